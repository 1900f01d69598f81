"""
Booked Seat Ids Value Object

The durable booking record: the ids of every booked seat, stored as a JSON
array of ``"row-col"`` strings under a single key.
"""

from typing import FrozenSet, Iterable, List, Optional

import attrs
import orjson

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


BOOKED_SEATS_KEY = 'bookedSeats'


@attrs.define(frozen=True)
class BookedSeatIds:
    seat_ids: FrozenSet[str] = attrs.field(factory=frozenset, converter=frozenset)

    @classmethod
    def of(cls, seat_ids: Iterable[str]) -> 'BookedSeatIds':
        return cls(seat_ids=frozenset(seat_ids))

    def __len__(self) -> int:
        return len(self.seat_ids)

    def __contains__(self, seat_id: object) -> bool:
        return seat_id in self.seat_ids

    def positions(self) -> List[SeatPosition]:
        """
        Parsed positions of the ids in canonical ``row-col`` form.

        An id only names a seat when it matches that seat's id exactly, so
        variants such as ``"00-01"`` or ``"0- 1"`` are skipped like any other
        malformed id.
        """
        positions = []
        for seat_id in sorted(self.seat_ids):
            try:
                position = SeatPosition.from_seat_id(seat_id)
            except DomainError:
                position = None
            if position is None or position.seat_id != seat_id:
                Logger.base.debug(f'Skipping malformed booked seat id: {seat_id!r}')
                continue
            positions.append(position)
        return positions

    def to_json(self) -> str:
        ordered = sorted(self.seat_ids, key=_seat_id_sort_key)
        return orjson.dumps(ordered).decode()

    @classmethod
    def from_json(cls, raw: Optional[str]) -> 'BookedSeatIds':
        """
        Decode a persisted value.

        Absent values, invalid JSON and anything other than an array of strings
        all mean "no bookings".
        """
        if not raw:
            return cls()
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError:
            Logger.base.debug('Persisted booked seats are not valid JSON, treating as empty')
            return cls()
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            Logger.base.debug('Persisted booked seats are not a list of ids, treating as empty')
            return cls()
        return cls.of(data)


def _seat_id_sort_key(seat_id: str) -> tuple[int, int, int, str]:
    # Row-major for well-formed ids, anything else after them
    try:
        position = SeatPosition.from_seat_id(seat_id)
    except DomainError:
        return (1, 0, 0, seat_id)
    return (0, position.row, position.col, seat_id)
