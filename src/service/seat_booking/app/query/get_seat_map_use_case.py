from threading import RLock
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.dto.seat_booking_dto import (
    PriceTierView,
    SeatMapView,
    SeatView,
)
from src.service.seat_booking.domain.pricing import PriceTier, PricingEngine
from src.service.seat_booking.domain.seat_grid import SeatGrid


class GetSeatMapUseCase:
    """Read-only projection of the grid: seats, counts and the running total."""

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

    @Logger.io(truncate_content=True)
    def execute(self) -> SeatMapView:
        with self.grid_lock:
            seats = [
                SeatView(
                    row=seat.row,
                    col=seat.col,
                    status=seat.status,
                    seat_id=seat.seat_id,
                    row_label=seat.row_label,
                    number=seat.number,
                    price=PricingEngine.price_for_row(seat.row),
                )
                for seat in self.seat_grid.all_seats()
            ]
            return SeatMapView(
                seats=seats,
                available_count=PricingEngine.available_count(self.seat_grid),
                selected_count=PricingEngine.selected_count(self.seat_grid),
                booked_count=PricingEngine.booked_count(self.seat_grid),
                total_price=PricingEngine.total_for_selected(self.seat_grid),
                price_tiers=[
                    PriceTierView(label=tier.label, rows=tier.row_labels, price=tier.price)
                    for tier in PriceTier
                ],
            )
