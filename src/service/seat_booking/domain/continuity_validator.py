"""
Continuity Validator

Row rule for growing a selection: a newly selected seat has to reach another
selected seat of the same row without crossing an available seat. Booked seats
count as spacers and are skipped.
"""

from typing import Sequence

from src.service.seat_booking.domain.seat_entity import Seat, SeatStatus


class ContinuityValidator:
    @staticmethod
    def is_continuity_valid(row_seats: Sequence[Seat], candidate_index: int) -> bool:
        """
        Check a candidate that is already tentatively marked selected.

        Only the candidate is checked. Seats selected earlier are never
        re-validated, so a deselect in the middle of a block may leave two
        separate groups behind.

        Args:
            row_seats: Seats of one row, ordered by column
            candidate_index: Column of the seat being selected

        Returns:
            True when the candidate is the row's only selection or reaches
            another selected seat on either side
        """
        selected = [seat for seat in row_seats if seat.status == SeatStatus.SELECTED]
        if len(selected) <= 1:
            return True

        left = range(candidate_index - 1, -1, -1)
        right = range(candidate_index + 1, len(row_seats))
        return ContinuityValidator._reaches_selected(
            row_seats, left
        ) or ContinuityValidator._reaches_selected(row_seats, right)

    @staticmethod
    def _reaches_selected(row_seats: Sequence[Seat], indices: range) -> bool:
        for index in indices:
            status = row_seats[index].status
            if status == SeatStatus.SELECTED:
                return True
            if status == SeatStatus.AVAILABLE:
                return False
        return False
