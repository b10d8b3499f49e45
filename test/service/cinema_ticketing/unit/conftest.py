"""
Unit test configuration for cinema ticketing.

Gateways are replaced with mocks attached to a single parent so tests can
assert both the arguments and the order of the gateway calls.
"""

from unittest.mock import Mock

import pytest

from src.service.cinema_ticketing.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.cinema_ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


@pytest.fixture
def gateway_calls() -> Mock:
    """Parent mock recording the calls of both gateways in order"""
    return Mock()


@pytest.fixture
def mock_payment_service(gateway_calls: Mock) -> Mock:
    """Mock payment gateway"""
    service = Mock(spec=ITicketPaymentService)
    gateway_calls.attach_mock(service, 'payment_service')
    return service


@pytest.fixture
def mock_seat_reservation_service(gateway_calls: Mock) -> Mock:
    """Mock seat booking gateway"""
    service = Mock(spec=ISeatReservationService)
    gateway_calls.attach_mock(service, 'seat_reservation_service')
    return service


@pytest.fixture
def use_case(
    mock_payment_service: Mock, mock_seat_reservation_service: Mock
) -> PurchaseTicketsUseCase:
    """Create use case with mocked gateways"""
    return PurchaseTicketsUseCase(
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )
