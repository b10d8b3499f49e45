from typing import Sequence

from src.platform.config.business_config import PurchaseLimits
from src.platform.logging.loguru_io import Logger
from src.service.cinema_ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.cinema_ticketing.domain.exception.purchase_rejected_error import (
    PurchaseRejectedError,
    PurchaseRejectionCode,
)
from src.service.cinema_ticketing.domain.validators import TypeValidators
from src.service.cinema_ticketing.domain.value_object.ticket_counts import TicketCounts
from src.service.cinema_ticketing.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case - validate, price, then pay and reserve

    Flow:
    1. Validate account id (TypeError / PurchaseRejectedError)
    2. Validate ticket requests (non-empty, TicketTypeRequest only, positive quantities)
    3. Aggregate quantities per ticket type
    4. Enforce purchase rules on the totals
    5. Charge the account, then reserve the seats

    Every check runs before the first gateway call, so a rejected purchase
    has no side effects. Gateway failures propagate unchanged: a failed
    reservation after a successful payment is not compensated.

    Dependencies:
    - payment_service: Charges the account
    - seat_reservation_service: Reserves seats for adults and children
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service

    @Logger.io
    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> None:
        """
        Purchase tickets for an account

        Args:
            account_id: Account making the purchase, must be greater than 0
            ticket_type_requests: One or more ticket requests, same types accumulate

        Raises:
            TypeError: If account_id is not an integer or a request is not a TicketTypeRequest
            PurchaseRejectedError: If the purchase breaks a purchase rule
        """
        self._validate_account_id(account_id)
        self._validate_ticket_type_requests(ticket_type_requests)

        ticket_counts = TicketCounts.aggregate(ticket_type_requests)
        ticket_counts.validate_purchase_rules()

        total_amount = ticket_counts.total_amount
        total_seats = ticket_counts.total_seats

        self._payment_service.make_payment(account_id, total_amount)
        self._seat_reservation_service.reserve_seat(account_id, total_seats)

        Logger.base.info(
            f'🎟️ [PURCHASE] account {account_id}: paid {total_amount}, reserved {total_seats} seats'
        )

    @staticmethod
    def _validate_account_id(account_id: int) -> None:
        TypeValidators.validate_integer(account_id, 'account_id')

        if account_id < PurchaseLimits.MIN_VALID_ACCOUNT_ID:
            raise PurchaseRejectedError(
                'Invalid account ID: must be greater than 0',
                PurchaseRejectionCode.INVALID_ACCOUNT_ID,
            )

    @staticmethod
    def _validate_ticket_type_requests(ticket_type_requests: Sequence[TicketTypeRequest]) -> None:
        if not ticket_type_requests:
            raise PurchaseRejectedError(
                'At least one ticket request is required',
                PurchaseRejectionCode.NO_TICKET_REQUESTS,
            )

        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise TypeError('All ticket requests must be instances of TicketTypeRequest')

            if request.quantity <= 0:
                raise PurchaseRejectedError(
                    'Number of tickets must be greater than 0',
                    PurchaseRejectionCode.NON_POSITIVE_TICKET_QUANTITY,
                )
