"""Application layer interfaces (Ports)"""

from src.service.cinema_ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)

__all__ = ['ISeatReservationService', 'ITicketPaymentService']
