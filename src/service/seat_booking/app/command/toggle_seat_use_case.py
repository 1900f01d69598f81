from threading import RLock
from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.domain.continuity_validator import ContinuityValidator
from src.service.seat_booking.domain.pricing import PricingEngine
from src.service.seat_booking.domain.seat_constant import MAX_SEATS_PER_BOOKING
from src.service.seat_booking.domain.seat_entity import SeatStatus
from src.service.seat_booking.domain.seat_grid import SeatGrid
from src.service.seat_booking.domain.value_object.toggle_result import (
    ToggleOutcome,
    ToggleResult,
)


class ToggleSeatUseCase:
    """
    Seat click handling: available <-> selected.

    Rules, checked against the grid as it is when the click arrives:
    1. Booked seats ignore clicks
    2. Deselecting is never blocked
    3. Selecting is blocked once MAX_SEATS_PER_BOOKING seats are selected
    4. Selecting is blocked when the seat breaks its row's continuity

    A rejected click leaves the grid untouched; an accepted one changes
    exactly one seat.
    """

    def __init__(self, *, seat_grid: SeatGrid, grid_lock: RLock) -> None:
        self.seat_grid = seat_grid
        self.grid_lock = grid_lock

    @classmethod
    @inject
    def depends(
        cls,
        seat_grid: SeatGrid = Depends(Provide['seat_grid']),
        grid_lock: RLock = Depends(Provide['grid_lock']),
    ) -> Self:
        return cls(seat_grid=seat_grid, grid_lock=grid_lock)

    @Logger.io
    def toggle(self, *, row: int, col: int) -> ToggleResult:
        with self.grid_lock:
            seat = self.seat_grid.get(row, col)

            if seat.is_booked:
                return ToggleResult(seat_id=seat.seat_id, outcome=ToggleOutcome.IGNORED)

            if seat.is_selected:
                self.seat_grid.set_status(row, col, SeatStatus.AVAILABLE)
                return ToggleResult(seat_id=seat.seat_id, outcome=ToggleOutcome.DESELECTED)

            if PricingEngine.selected_count(self.seat_grid) >= MAX_SEATS_PER_BOOKING:
                Logger.base.warning(
                    f'⚠️ [TOGGLE] Seat {seat.seat_id} rejected: selection cap reached'
                )
                return ToggleResult.rejected_capacity(seat.seat_id)

            # Validate against a copy of the row so the grid is only touched on success
            tentative_row = [
                attrs.evolve(row_seat, status=SeatStatus.SELECTED)
                if row_seat.col == col
                else row_seat
                for row_seat in self.seat_grid.row_seats(row)
            ]
            if not ContinuityValidator.is_continuity_valid(tentative_row, col):
                Logger.base.warning(
                    f'⚠️ [TOGGLE] Seat {seat.seat_id} rejected: row not continuous'
                )
                return ToggleResult.rejected_continuity(seat.seat_id)

            self.seat_grid.set_status(row, col, SeatStatus.SELECTED)
            return ToggleResult(seat_id=seat.seat_id, outcome=ToggleOutcome.SELECTED)
