"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seat_reservation.app.command.find_and_hold_seats_use_case import (
    FindAndHoldSeatsUseCase,
)
from src.service.seat_reservation.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.seat_reservation.app.query.get_seat_availability_use_case import (
    GetSeatAvailabilityUseCase,
)
from src.service.seat_reservation.domain.value_object import Venue
from src.service.seat_reservation.driven_adapter.in_memory_ticket_service import (
    InMemoryTicketService,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    venue = providers.Singleton(
        Venue,
        rows=config_service.provided.VENUE_ROWS,
        cols=config_service.provided.VENUE_COLS,
    )

    # The engine holds all seat state, so there is exactly one per container
    ticket_service = providers.Singleton(
        InMemoryTicketService,
        venue=venue,
        max_hold_duration_ms=config_service.provided.SEAT_HOLD_TIMEOUT_MS,
    )

    # Use cases (stateless)
    find_and_hold_seats_use_case = providers.Singleton(
        FindAndHoldSeatsUseCase,
        ticket_service=ticket_service,
    )
    reserve_seats_use_case = providers.Singleton(
        ReserveSeatsUseCase,
        ticket_service=ticket_service,
    )
    get_seat_availability_use_case = providers.Singleton(
        GetSeatAvailabilityUseCase,
        ticket_service=ticket_service,
        venue=venue,
    )


container = Container()
