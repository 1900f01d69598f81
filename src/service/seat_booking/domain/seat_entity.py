from enum import StrEnum

import attrs

from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    BOOKED = 'booked'


@attrs.define
class Seat:
    """
    One bookable seat.

    ``row`` and ``col`` are fixed at creation; ``status`` is the only field that
    changes over the seat's life.
    """

    row: int = attrs.field(on_setattr=attrs.setters.frozen)
    col: int = attrs.field(on_setattr=attrs.setters.frozen)
    status: SeatStatus = SeatStatus.AVAILABLE

    @property
    def position(self) -> SeatPosition:
        return SeatPosition(row=self.row, col=self.col)

    @property
    def seat_id(self) -> str:
        return self.position.seat_id

    @property
    def row_label(self) -> str:
        """Row letter as printed on the venue plan (row 0 is "A")."""
        return chr(ord('A') + self.row)

    @property
    def number(self) -> int:
        """1-based seat number within the row."""
        return self.col + 1

    @property
    def is_available(self) -> bool:
        return self.status == SeatStatus.AVAILABLE

    @property
    def is_selected(self) -> bool:
        return self.status == SeatStatus.SELECTED

    @property
    def is_booked(self) -> bool:
        return self.status == SeatStatus.BOOKED
