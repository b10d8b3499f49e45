"""
https://python-dependency-injector.ets-labs.org/index.html

Composition root: the only place the default gateway implementations are chosen.
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.cinema_ticketing.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.cinema_ticketing.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.cinema_ticketing.driven_adapter.third_party.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Third-party gateways
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases (stateless, can be Singleton)
    purchase_tickets_use_case = providers.Singleton(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
