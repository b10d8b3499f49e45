"""In-process seat booking gateway used when no real gateway is wired in."""

from typing import List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.cinema_ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_ticketing.domain.validators import TypeValidators


@attrs.frozen
class SeatReservationRecord:
    account_id: int
    total_seats_to_allocate: int


class SeatReservationServiceImpl(ISeatReservationService):
    """Records reservations in memory instead of holding real seats."""

    def __init__(self) -> None:
        self.reservations: List[SeatReservationRecord] = []

    @Logger.io
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        TypeValidators.validate_integer(account_id, 'account_id')
        TypeValidators.validate_integer(total_seats_to_allocate, 'total_seats_to_allocate')

        self.reservations.append(
            SeatReservationRecord(
                account_id=account_id, total_seats_to_allocate=total_seats_to_allocate
            )
        )
        Logger.base.info(
            f'💺 [SEAT-RESERVATION] Reserved {total_seats_to_allocate} seats for account {account_id}'
        )
