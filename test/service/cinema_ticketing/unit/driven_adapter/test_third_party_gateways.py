"""
Unit tests for the in-process gateway implementations
"""

import pytest

from src.service.cinema_ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.cinema_ticketing.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationRecord,
    SeatReservationServiceImpl,
)
from src.service.cinema_ticketing.driven_adapter.third_party.ticket_payment_service_impl import (
    PaymentRecord,
    TicketPaymentServiceImpl,
)


class TestTicketPaymentServiceImpl:
    @pytest.mark.unit
    def test_implements_payment_port(self):
        assert isinstance(TicketPaymentServiceImpl(), ITicketPaymentService)

    @pytest.mark.unit
    def test_records_payment(self):
        service = TicketPaymentServiceImpl()

        service.make_payment(123, 50)

        assert service.payments == [PaymentRecord(account_id=123, total_amount_to_pay=50)]

    @pytest.mark.unit
    @pytest.mark.parametrize('account_id, amount', [('123', 50), (123, 50.0), (None, 0)])
    def test_rejects_non_integer_arguments(self, account_id, amount):
        service = TicketPaymentServiceImpl()

        with pytest.raises(TypeError):
            service.make_payment(account_id, amount)

        assert service.payments == []


class TestSeatReservationServiceImpl:
    @pytest.mark.unit
    def test_implements_seat_reservation_port(self):
        assert isinstance(SeatReservationServiceImpl(), ISeatReservationService)

    @pytest.mark.unit
    def test_records_reservation(self):
        service = SeatReservationServiceImpl()

        service.reserve_seat(456, 3)

        assert service.reservations == [
            SeatReservationRecord(account_id=456, total_seats_to_allocate=3)
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize('account_id, seats', [(456, '3'), (456.0, 3), (456, None)])
    def test_rejects_non_integer_arguments(self, account_id, seats):
        service = SeatReservationServiceImpl()

        with pytest.raises(TypeError):
            service.reserve_seat(account_id, seats)

        assert service.reservations == []
