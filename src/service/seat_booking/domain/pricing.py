"""
Pricing

Seat prices depend only on the row. Counts and totals are always recomputed
from the grid, never kept as running counters.
"""

from enum import Enum

from src.service.seat_booking.domain.seat_entity import SeatStatus
from src.service.seat_booking.domain.seat_grid import SeatGrid


class PriceTier(Enum):
    PREMIUM = ('Premium', 1000, range(0, 3))
    STANDARD = ('Standard', 750, range(3, 6))
    ECONOMY = ('Economy', 500, range(6, 8))

    def __init__(self, label: str, price: int, rows: range) -> None:
        self.label = label
        self.price = price
        self.rows = rows

    @property
    def row_labels(self) -> str:
        """Row letters covered by the tier, e.g. "A-C"."""
        return f'{chr(ord("A") + self.rows.start)}-{chr(ord("A") + self.rows.stop - 1)}'


class PricingEngine:
    @staticmethod
    def tier_for_row(row: int) -> PriceTier:
        # Rows past the last tier fall back to the cheapest one
        if row <= 2:
            return PriceTier.PREMIUM
        if row <= 5:
            return PriceTier.STANDARD
        return PriceTier.ECONOMY

    @staticmethod
    def price_for_row(row: int) -> int:
        return PricingEngine.tier_for_row(row).price

    @staticmethod
    def total_for_selected(grid: SeatGrid) -> int:
        return sum(
            PricingEngine.price_for_row(seat.row)
            for seat in grid.seats_with_status(SeatStatus.SELECTED)
        )

    @staticmethod
    def available_count(grid: SeatGrid) -> int:
        return len(grid.seats_with_status(SeatStatus.AVAILABLE))

    @staticmethod
    def selected_count(grid: SeatGrid) -> int:
        return len(grid.seats_with_status(SeatStatus.SELECTED))

    @staticmethod
    def booked_count(grid: SeatGrid) -> int:
        return len(grid.seats_with_status(SeatStatus.BOOKED))
