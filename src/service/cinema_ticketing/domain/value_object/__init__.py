"""Cinema Ticketing Domain Value Objects"""

from src.service.cinema_ticketing.domain.value_object.ticket_counts import TicketCounts
from src.service.cinema_ticketing.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)

__all__ = ['TicketCounts', 'TicketTypeRequest']
