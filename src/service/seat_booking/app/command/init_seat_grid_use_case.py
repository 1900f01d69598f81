from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_booked_seats_store import IBookedSeatsStore
from src.service.seat_booking.domain.seat_grid import SeatGrid
from src.service.seat_booking.domain.value_object.booked_seat_ids import (
    BOOKED_SEATS_KEY,
    BookedSeatIds,
)


class InitSeatGridUseCase:
    """
    Build the session's seat grid and reconcile it with the persisted bookings.

    Runs once per session; later changes to the store are not picked up.
    """

    def __init__(self, *, booked_seats_store: IBookedSeatsStore) -> None:
        self.booked_seats_store = booked_seats_store

    @Logger.io
    def execute(self) -> SeatGrid:
        seat_grid = SeatGrid()
        booked = BookedSeatIds.from_json(self.booked_seats_store.load(BOOKED_SEATS_KEY))
        marked = seat_grid.mark_booked(booked.positions())

        if marked != len(booked):
            Logger.base.debug(
                f'[INIT-GRID] Ignored {len(booked) - marked} persisted ids that name no seat'
            )
        Logger.base.info(f'🪑 [INIT-GRID] Seat grid ready, {marked} seats booked')
        return seat_grid


def build_seat_grid(*, booked_seats_store: IBookedSeatsStore) -> SeatGrid:
    return InitSeatGridUseCase(booked_seats_store=booked_seats_store).execute()
