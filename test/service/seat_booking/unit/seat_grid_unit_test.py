import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.seat_booking.domain.seat_constant import ROWS, SEATS_PER_ROW
from src.service.seat_booking.domain.seat_entity import Seat, SeatStatus
from src.service.seat_booking.domain.seat_grid import SeatGrid
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


@pytest.mark.unit
class TestSeatGridConstruction:
    def test_new_grid_is_all_available(self) -> None:
        grid = SeatGrid()

        seats = grid.all_seats()

        assert len(seats) == ROWS * SEATS_PER_ROW == 80
        assert all(seat.status == SeatStatus.AVAILABLE for seat in seats)

    def test_all_seats_is_row_major(self) -> None:
        grid = SeatGrid()

        seats = grid.all_seats()

        assert (seats[0].row, seats[0].col) == (0, 0)
        assert (seats[9].row, seats[9].col) == (0, 9)
        assert (seats[10].row, seats[10].col) == (1, 0)
        assert (seats[-1].row, seats[-1].col) == (7, 9)

    def test_seat_ids_are_unique(self) -> None:
        grid = SeatGrid()

        seat_ids = [seat.seat_id for seat in grid.all_seats()]

        assert len(set(seat_ids)) == 80
        assert '3-7' in seat_ids


@pytest.mark.unit
class TestSeatGridAccess:
    @pytest.mark.parametrize('row,col', [(-1, 0), (0, -1), (8, 0), (0, 10)])
    def test_get_outside_grid_raises(self, row: int, col: int) -> None:
        grid = SeatGrid()

        with pytest.raises(NotFoundError) as exc_info:
            grid.get(row, col)

        assert exc_info.value.status_code == 404

    def test_row_seats_is_a_copy(self) -> None:
        # Given
        grid = SeatGrid()

        # When
        row = grid.row_seats(2)
        row.clear()

        # Then
        assert len(grid.row_seats(2)) == SEATS_PER_ROW

    def test_set_status_changes_one_seat(self) -> None:
        grid = SeatGrid()

        grid.set_status(4, 5, SeatStatus.SELECTED)

        assert grid.get(4, 5).is_selected
        assert [seat.seat_id for seat in grid.seats_with_status(SeatStatus.SELECTED)] == ['4-5']

    def test_mark_booked_skips_positions_outside_grid(self) -> None:
        grid = SeatGrid()

        marked = grid.mark_booked(
            [SeatPosition(row=0, col=0), SeatPosition(row=9, col=0), SeatPosition(row=7, col=9)]
        )

        assert marked == 2
        assert grid.get(0, 0).is_booked
        assert grid.get(7, 9).is_booked

    def test_snapshot_lists_every_seat_with_its_status(self) -> None:
        grid = SeatGrid()
        grid.set_status(0, 1, SeatStatus.BOOKED)

        snapshot = grid.snapshot()

        assert len(snapshot) == 80
        assert snapshot[0] == (0, 0, SeatStatus.AVAILABLE)
        assert snapshot[1] == (0, 1, SeatStatus.BOOKED)


@pytest.mark.unit
class TestSeat:
    def test_labels(self) -> None:
        seat = Seat(row=2, col=4)

        assert seat.seat_id == '2-4'
        assert seat.row_label == 'C'
        assert seat.number == 5

    def test_position_is_fixed(self) -> None:
        seat = Seat(row=1, col=1)

        with pytest.raises(AttributeError):
            seat.row = 3

    def test_seat_position_from_seat_id(self) -> None:
        assert SeatPosition.from_seat_id('7-9') == SeatPosition(row=7, col=9)
        assert SeatPosition(row=7, col=9).seat_id == '7-9'

    @pytest.mark.parametrize('seat_id', ['', 'abc', '1-', '1-2-3', 'A-1'])
    def test_seat_position_rejects_malformed_ids(self, seat_id: str) -> None:
        from src.platform.exception.exceptions import DomainError

        with pytest.raises(DomainError):
            SeatPosition.from_seat_id(seat_id)
