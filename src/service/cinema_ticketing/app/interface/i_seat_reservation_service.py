"""
Seat Reservation Service Interface

Port to the external seat booking gateway.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserve seats for an account

        Args:
            account_id: Account the seats are held for
            total_seats_to_allocate: Number of seats, infants excluded
        """
        pass
