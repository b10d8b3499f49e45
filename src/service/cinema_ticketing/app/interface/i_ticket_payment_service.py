"""
Ticket Payment Service Interface

Port to the external payment gateway. Implementations may block or raise;
the purchase flow does not catch or retry their failures.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """
        Charge an account for a ticket purchase

        Args:
            account_id: Account being charged
            total_amount_to_pay: Amount in whole currency units
        """
        pass
