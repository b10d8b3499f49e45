"""
Ticket Type Enum - Domain Value Object

Closed set of ticket types a cinema purchase can contain.
"""

from enum import StrEnum


class TicketType(StrEnum):
    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'  # Sits on an adult's lap, no seat allocated
