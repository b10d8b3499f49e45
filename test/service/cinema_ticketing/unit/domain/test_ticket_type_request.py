"""
Unit tests for TicketTypeRequest

Construction checks structure only: ticket type and integer quantity.
Business validity of the quantity is left to the purchase flow.
"""

import attrs
import pytest

from src.service.cinema_ticketing.domain.enum.ticket_type import TicketType
from src.service.cinema_ticketing.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


class TestTicketTypeRequestConstruction:
    @pytest.mark.unit
    @pytest.mark.parametrize('ticket_type', list(TicketType))
    def test_accepts_every_ticket_type(self, ticket_type):
        request = TicketTypeRequest(ticket_type, 3)

        assert request.ticket_type is ticket_type
        assert request.quantity == 3

    @pytest.mark.unit
    def test_accepts_ticket_type_name(self):
        request = TicketTypeRequest('CHILD', 1)

        assert request.ticket_type is TicketType.CHILD

    @pytest.mark.unit
    def test_accepts_keyword_arguments(self):
        request = TicketTypeRequest(ticket_type=TicketType.INFANT, quantity=2)

        assert request.ticket_type is TicketType.INFANT
        assert request.quantity == 2

    @pytest.mark.unit
    @pytest.mark.parametrize('quantity', [0, -1])
    def test_allows_zero_and_negative_quantity(self, quantity):
        """
        GIVEN: A non-positive quantity
        WHEN: Constructing a request
        THEN: Construction succeeds, rejection happens at purchase time
        """
        request = TicketTypeRequest(TicketType.ADULT, quantity)

        assert request.quantity == quantity

    @pytest.mark.unit
    @pytest.mark.parametrize('ticket_type', ['SENIOR', 'adult', '', None, 1])
    def test_rejects_unknown_ticket_type(self, ticket_type):
        with pytest.raises(TypeError) as exc_info:
            TicketTypeRequest(ticket_type, 1)

        assert str(exc_info.value) == 'type must be ADULT, CHILD, or INFANT'

    @pytest.mark.unit
    @pytest.mark.parametrize('quantity', [1.5, '1', None, True])
    def test_rejects_non_integer_quantity(self, quantity):
        with pytest.raises(TypeError) as exc_info:
            TicketTypeRequest(TicketType.ADULT, quantity)

        assert str(exc_info.value) == 'quantity must be an integer'


class TestTicketTypeRequestImmutability:
    @pytest.mark.unit
    def test_public_accessors_are_read_only(self):
        request = TicketTypeRequest(TicketType.ADULT, 2)

        with pytest.raises(AttributeError):
            request.quantity = 5  # type: ignore[misc]
        with pytest.raises(AttributeError):
            request.ticket_type = TicketType.CHILD  # type: ignore[misc]

    @pytest.mark.unit
    def test_private_state_cannot_be_reassigned(self):
        request = TicketTypeRequest(TicketType.ADULT, 2)

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            request._quantity = 5  # type: ignore[misc]

        assert request.quantity == 2

    @pytest.mark.unit
    def test_equal_requests_compare_equal(self):
        assert TicketTypeRequest(TicketType.ADULT, 2) == TicketTypeRequest('ADULT', 2)
