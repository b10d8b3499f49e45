from typing import Any

import attrs

from src.service.cinema_ticketing.domain.enum.ticket_type import TicketType
from src.service.cinema_ticketing.domain.validators import TypeValidators


def _to_ticket_type(value: Any) -> TicketType:
    if isinstance(value, TicketType):
        return value
    if isinstance(value, str) and value in TicketType.__members__:
        return TicketType[value]

    names = [ticket_type.value for ticket_type in TicketType]
    raise TypeError(f'type must be {", ".join(names[:-1])}, or {names[-1]}')


@attrs.frozen
class TicketTypeRequest:
    """
    Immutable request for a number of tickets of one type.

    Only the structure is checked here. A zero or negative quantity is a
    valid value and is rejected later by the purchase flow.
    """

    _ticket_type: TicketType = attrs.field(converter=_to_ticket_type)
    _quantity: int = attrs.field(validator=TypeValidators.validate_integer_attribute)

    @property
    def ticket_type(self) -> TicketType:
        return self._ticket_type

    @property
    def quantity(self) -> int:
        return self._quantity
