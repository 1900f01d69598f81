"""
Seat Booking DTOs - Application Layer

Read model handed to the presentation layer and the results of the lifecycle
commands.
"""

from dataclasses import dataclass, field

from src.service.seat_booking.domain.seat_entity import SeatStatus


# ========== Read Model ==========


@dataclass(frozen=True)
class SeatView:
    row: int
    col: int
    status: SeatStatus
    seat_id: str
    row_label: str
    number: int
    price: int


@dataclass(frozen=True)
class PriceTierView:
    label: str
    rows: str
    price: int


@dataclass(frozen=True)
class SeatMapView:
    """Everything a seat map renderer needs, derived from the grid in one pass"""

    seats: list[SeatView]
    available_count: int
    selected_count: int
    booked_count: int
    total_price: int
    price_tiers: list[PriceTierView] = field(default_factory=list)


# ========== Lifecycle Commands ==========


@dataclass(frozen=True)
class CommitResult:
    committed: bool
    seat_ids: list[str] = field(default_factory=list)
    count: int = 0
    total_price: int = 0

    @classmethod
    def not_committed(cls, *, count: int = 0, total_price: int = 0) -> 'CommitResult':
        return cls(committed=False, count=count, total_price=total_price)


@dataclass(frozen=True)
class ResetResult:
    reset: bool
    released_count: int = 0
