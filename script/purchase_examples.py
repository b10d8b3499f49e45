#!/usr/bin/env python3
"""
Cinema Ticket Purchase Examples

Runs a set of purchase scenarios against the container-built use case:
1. Valid purchases - adults only, a family, repeated requests of one type
2. Rejected purchases - child without adult, too many tickets,
   invalid account id, more infants than adults

Notes:
- Gateways are the in-process defaults, nothing is charged or held
"""

from dataclasses import dataclass
from typing import List

from src.platform.config.di import cleanup, container, setup
from src.service.cinema_ticketing.domain.enum.ticket_type import TicketType
from src.service.cinema_ticketing.domain.exception.purchase_rejected_error import (
    PurchaseRejectedError,
)
from src.service.cinema_ticketing.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


@dataclass
class PurchaseExample:
    """Purchase scenario configuration"""
    title: str
    account_id: int
    requests: List[TicketTypeRequest]
    expect_rejection: bool = False


EXAMPLES = [
    PurchaseExample(
        title='Simple adult ticket purchase',
        account_id=123,
        requests=[TicketTypeRequest(TicketType.ADULT, 2)],
    ),
    PurchaseExample(
        title='Family ticket purchase (2 adults, 1 child, 1 infant)',
        account_id=456,
        requests=[
            TicketTypeRequest(TicketType.ADULT, 2),
            TicketTypeRequest(TicketType.CHILD, 1),
            TicketTypeRequest(TicketType.INFANT, 1),
        ],
    ),
    PurchaseExample(
        title='Multiple requests aggregation',
        account_id=789,
        requests=[
            TicketTypeRequest(TicketType.ADULT, 1),
            TicketTypeRequest(TicketType.ADULT, 2),
            TicketTypeRequest(TicketType.CHILD, 1),
        ],
    ),
    PurchaseExample(
        title='Error case - Child ticket without adult',
        account_id=111,
        requests=[TicketTypeRequest(TicketType.CHILD, 1)],
        expect_rejection=True,
    ),
    PurchaseExample(
        title='Error case - Too many tickets',
        account_id=222,
        requests=[TicketTypeRequest(TicketType.ADULT, 26)],
        expect_rejection=True,
    ),
    PurchaseExample(
        title='Error case - Invalid account ID',
        account_id=0,
        requests=[TicketTypeRequest(TicketType.ADULT, 1)],
        expect_rejection=True,
    ),
    PurchaseExample(
        title='Error case - Too many infants for adults',
        account_id=333,
        requests=[
            TicketTypeRequest(TicketType.ADULT, 1),
            TicketTypeRequest(TicketType.INFANT, 2),
        ],
        expect_rejection=True,
    ),
]


def run_example(number: int, example: PurchaseExample) -> None:
    use_case = container.purchase_tickets_use_case()
    payment_service = container.ticket_payment_service()
    seat_reservation_service = container.seat_reservation_service()

    print(f'Example {number}: {example.title}')
    try:
        use_case.purchase_tickets(example.account_id, *example.requests)
    except PurchaseRejectedError as e:
        marker = '❌ Expected error' if example.expect_rejection else '❌ Purchase failed'
        print(f'   {marker} [{e.code}]: {e.message}\n')
        return

    payment = payment_service.payments[-1]
    reservation = seat_reservation_service.reservations[-1]
    print(
        f'   ✅ Paid £{payment.total_amount_to_pay}, '
        f'reserved {reservation.total_seats_to_allocate} seats\n'
    )


def main() -> None:
    print('🎬 Cinema Ticket Purchase Examples')
    print('=' * 50)

    setup()
    try:
        for number, example in enumerate(EXAMPLES, start=1):
            run_example(number, example)
    finally:
        cleanup()

    print('=' * 50)
    print('🎭 All examples completed!')


if __name__ == '__main__':
    main()
