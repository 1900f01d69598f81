"""
Seat Position Value Object

Identifies one seat of the grid. The string form ``"row-col"`` is the id that
gets persisted in the booked seats record.
"""

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define(frozen=True)
class SeatPosition:
    """Seat Position (Value Object)"""

    row: int
    col: int

    @property
    def seat_id(self) -> str:
        return f'{self.row}-{self.col}'

    @classmethod
    def from_seat_id(cls, seat_id: str) -> 'SeatPosition':
        """Create seat position from seat ID"""
        try:
            row_str, col_str = seat_id.split('-')
            return cls(row=int(row_str), col=int(col_str))
        except (ValueError, AttributeError):
            raise DomainError(f'Invalid seat ID format: {seat_id}. Expected: row-col', 400)
