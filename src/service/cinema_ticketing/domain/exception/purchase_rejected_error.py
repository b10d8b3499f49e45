from enum import StrEnum

from src.platform.exception.exceptions import DomainError


class PurchaseRejectionCode(StrEnum):
    UNSPECIFIED = 'unspecified'
    INVALID_ACCOUNT_ID = 'invalid_account_id'
    NO_TICKET_REQUESTS = 'no_ticket_requests'
    NON_POSITIVE_TICKET_QUANTITY = 'non_positive_ticket_quantity'
    TOO_MANY_TICKETS = 'too_many_tickets'
    NO_TICKETS = 'no_tickets'
    ADULT_TICKET_REQUIRED = 'adult_ticket_required'
    INFANTS_EXCEED_ADULTS = 'infants_exceed_adults'


class PurchaseRejectedError(DomainError):
    """
    Raised when a well-typed purchase request breaks a purchase rule.

    Malformed input (wrong types) raises the built-in TypeError instead, so
    callers can catch the two cases separately and match on `code` rather
    than on the message text.
    """

    def __init__(
        self, message: str = '', code: PurchaseRejectionCode = PurchaseRejectionCode.UNSPECIFIED
    ) -> None:
        super().__init__(message)
        self.code = code
