"""In-process payment gateway used when no real gateway is wired in."""

from typing import List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.cinema_ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.cinema_ticketing.domain.validators import TypeValidators


@attrs.frozen
class PaymentRecord:
    account_id: int
    total_amount_to_pay: int


class TicketPaymentServiceImpl(ITicketPaymentService):
    """Records payments in memory instead of charging a card."""

    def __init__(self) -> None:
        self.payments: List[PaymentRecord] = []

    @Logger.io
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        TypeValidators.validate_integer(account_id, 'account_id')
        TypeValidators.validate_integer(total_amount_to_pay, 'total_amount_to_pay')

        self.payments.append(
            PaymentRecord(account_id=account_id, total_amount_to_pay=total_amount_to_pay)
        )
        Logger.base.info(f'💳 [PAYMENT] Charged {total_amount_to_pay} to account {account_id}')
