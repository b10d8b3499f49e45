"""Business logic configuration and constants."""

from typing import Final


class PurchaseLimits:
    """Ticket purchase limits."""

    MAX_TICKETS_PER_PURCHASE: Final[int] = 25
    MIN_VALID_ACCOUNT_ID: Final[int] = 1


class TicketPrices:
    """Price per ticket type, in whole currency units."""

    ADULT: Final[int] = 25
    CHILD: Final[int] = 15
    INFANT: Final[int] = 0
