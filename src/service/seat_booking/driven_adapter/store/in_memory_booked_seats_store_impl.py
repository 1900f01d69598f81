from typing import Dict, Optional

from src.service.seat_booking.app.interface.i_booked_seats_store import IBookedSeatsStore


class InMemoryBookedSeatsStore(IBookedSeatsStore):
    """Process-local store; contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def save(self, key: str, value: str) -> None:
        self._values[key] = value
