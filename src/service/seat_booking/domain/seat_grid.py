"""
Seat Grid

In-memory container for every seat of the venue. It holds state only: the
selection and booking rules live in the use cases that mutate it.
"""

from typing import Iterable, List, Tuple

from src.platform.exception.exceptions import NotFoundError
from src.service.seat_booking.domain.seat_constant import ROWS, SEATS_PER_ROW
from src.service.seat_booking.domain.seat_entity import Seat, SeatStatus
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


SeatSnapshot = Tuple[int, int, SeatStatus]


class SeatGrid:
    def __init__(self, *, rows: int = ROWS, seats_per_row: int = SEATS_PER_ROW) -> None:
        self.rows = rows
        self.seats_per_row = seats_per_row
        self._seats: List[List[Seat]] = [
            [Seat(row=row, col=col) for col in range(seats_per_row)] for row in range(rows)
        ]

    def get(self, row: int, col: int) -> Seat:
        if not (0 <= row < self.rows and 0 <= col < self.seats_per_row):
            raise NotFoundError(
                f'Seat {row}-{col} is outside the {self.rows}x{self.seats_per_row} grid'
            )
        return self._seats[row][col]

    def row_seats(self, row: int) -> List[Seat]:
        if not 0 <= row < self.rows:
            raise NotFoundError(f'Row {row} is outside the grid')
        return list(self._seats[row])

    def all_seats(self) -> List[Seat]:
        """Every seat in row-major order."""
        return [seat for row_seats in self._seats for seat in row_seats]

    def seats_with_status(self, status: SeatStatus) -> List[Seat]:
        return [seat for seat in self.all_seats() if seat.status == status]

    def set_status(self, row: int, col: int, status: SeatStatus) -> None:
        self.get(row, col).status = status

    def mark_booked(self, positions: Iterable[SeatPosition]) -> int:
        """Mark the given positions booked, skipping ones outside the grid."""
        marked = 0
        for position in positions:
            if 0 <= position.row < self.rows and 0 <= position.col < self.seats_per_row:
                self.set_status(position.row, position.col, SeatStatus.BOOKED)
                marked += 1
        return marked

    def snapshot(self) -> List[SeatSnapshot]:
        return [(seat.row, seat.col, seat.status) for seat in self.all_seats()]
