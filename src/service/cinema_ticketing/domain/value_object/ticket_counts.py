from collections import Counter
from typing import Final, Iterable, Mapping

import attrs

from src.platform.config.business_config import PurchaseLimits, TicketPrices
from src.platform.logging.loguru_io import Logger
from src.service.cinema_ticketing.domain.enum.ticket_type import TicketType
from src.service.cinema_ticketing.domain.exception.purchase_rejected_error import (
    PurchaseRejectedError,
    PurchaseRejectionCode,
)
from src.service.cinema_ticketing.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


TICKET_PRICES: Final[Mapping[TicketType, int]] = {
    TicketType.ADULT: TicketPrices.ADULT,
    TicketType.CHILD: TicketPrices.CHILD,
    TicketType.INFANT: TicketPrices.INFANT,
}


@attrs.frozen
class TicketCounts:
    """Ticket totals per type for a single purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    @Logger.io
    def aggregate(cls, ticket_type_requests: Iterable[TicketTypeRequest]) -> 'TicketCounts':
        totals: Counter[TicketType] = Counter()
        for request in ticket_type_requests:
            totals[request.ticket_type] += request.quantity

        return cls(
            adult=totals[TicketType.ADULT],
            child=totals[TicketType.CHILD],
            infant=totals[TicketType.INFANT],
        )

    def count_of(self, ticket_type: TicketType) -> int:
        return {
            TicketType.ADULT: self.adult,
            TicketType.CHILD: self.child,
            TicketType.INFANT: self.infant,
        }[ticket_type]

    @property
    def total_tickets(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def total_seats(self) -> int:
        """Infants sit on an adult's lap and never take a seat."""
        return self.adult + self.child

    @property
    def total_amount(self) -> int:
        return sum(
            self.count_of(ticket_type) * price for ticket_type, price in TICKET_PRICES.items()
        )

    @Logger.io
    def validate_purchase_rules(self) -> None:
        """
        Check the purchase rules against the aggregated totals

        Raises:
            PurchaseRejectedError: On the first rule the totals break
        """
        if self.total_tickets > PurchaseLimits.MAX_TICKETS_PER_PURCHASE:
            raise PurchaseRejectedError(
                f'Cannot purchase more than {PurchaseLimits.MAX_TICKETS_PER_PURCHASE} tickets at once',
                PurchaseRejectionCode.TOO_MANY_TICKETS,
            )

        # Unreachable after request validation (every quantity is positive), kept as a guard
        if self.total_tickets == 0:
            raise PurchaseRejectedError(
                'At least one ticket must be purchased', PurchaseRejectionCode.NO_TICKETS
            )

        if (self.child > 0 or self.infant > 0) and self.adult == 0:
            raise PurchaseRejectedError(
                'Child and Infant tickets cannot be purchased without Adult tickets',
                PurchaseRejectionCode.ADULT_TICKET_REQUIRED,
            )

        if self.infant > self.adult:
            raise PurchaseRejectedError(
                'Number of Infant tickets cannot exceed number of Adult tickets',
                PurchaseRejectionCode.INFANTS_EXCEED_ADULTS,
            )
