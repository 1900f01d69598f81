"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from threading import RLock

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings, settings
from src.service.seat_booking.app.command.booking_lifecycle_use_case import (
    BookingLifecycleUseCase,
)
from src.service.seat_booking.app.command.init_seat_grid_use_case import build_seat_grid
from src.service.seat_booking.app.command.toggle_seat_use_case import ToggleSeatUseCase
from src.service.seat_booking.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seat_booking.driven_adapter.confirmation.static_confirmation_service_impl import (
    StaticConfirmationService,
)
from src.service.seat_booking.driven_adapter.store.file_booked_seats_store_impl import (
    FileBookedSeatsStore,
)
from src.service.seat_booking.driven_adapter.store.in_memory_booked_seats_store_impl import (
    InMemoryBookedSeatsStore,
)
from src.service.seat_booking.driven_adapter.store.kvrocks_booked_seats_store_impl import (
    KvrocksBookedSeatsStore,
)


def _store_backend() -> str:
    return settings.BOOKING_STORE_BACKEND


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service: providers.Provider[Settings] = providers.Object(settings)

    # Booked seats persistence, selected by BOOKING_STORE_BACKEND
    booked_seats_store = providers.Selector(
        providers.Callable(_store_backend),
        memory=providers.Singleton(InMemoryBookedSeatsStore),
        file=providers.Singleton(
            FileBookedSeatsStore, path=config_service.provided.BOOKING_STORE_PATH
        ),
        kvrocks=providers.Singleton(KvrocksBookedSeatsStore),
    )

    # Default answer for prompts outside an explicit request (HTTP passes its own)
    confirmation_service = providers.Singleton(StaticConfirmationService, answer=False)

    # Session state: one grid per process, reconciled with the store on first use
    seat_grid = providers.Singleton(build_seat_grid, booked_seats_store=booked_seats_store)
    grid_lock = providers.Singleton(RLock)

    # Use cases
    toggle_seat_use_case = providers.Factory(
        ToggleSeatUseCase, seat_grid=seat_grid, grid_lock=grid_lock
    )
    get_seat_map_use_case = providers.Factory(
        GetSeatMapUseCase, seat_grid=seat_grid, grid_lock=grid_lock
    )
    booking_lifecycle_use_case = providers.Factory(
        BookingLifecycleUseCase,
        seat_grid=seat_grid,
        grid_lock=grid_lock,
        booked_seats_store=booked_seats_store,
        confirmation_service=confirmation_service,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.seat_grid()


def cleanup() -> None:
    container.reset_singletons()
