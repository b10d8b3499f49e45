"""Cinema Ticketing Domain Enums"""

from src.service.cinema_ticketing.domain.enum.ticket_type import TicketType

__all__ = ['TicketType']
