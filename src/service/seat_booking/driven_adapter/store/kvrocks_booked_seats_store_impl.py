"""
Booked Seats Store backed by Kvrocks

Key format: {KVROCKS_KEY_PREFIX}{key}
Value: the encoded booked seat ids, stored as a plain string
"""

from typing import Optional

from redis import Redis

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.interface.i_booked_seats_store import IBookedSeatsStore


class KvrocksBookedSeatsStore(IBookedSeatsStore):
    def __init__(
        self, *, client: Optional[Redis] = None, key_prefix: Optional[str] = None
    ) -> None:
        self._client = client
        self.key_prefix = settings.KVROCKS_KEY_PREFIX if key_prefix is None else key_prefix

    @property
    def client(self) -> Redis:
        if self._client is None:
            self._client = kvrocks_client.get_client()
        return self._client

    def _build_key(self, key: str) -> str:
        return f'{self.key_prefix}{key}'

    @Logger.io
    def load(self, key: str) -> Optional[str]:
        value = self.client.get(self._build_key(key))
        if isinstance(value, bytes):
            return value.decode()
        return value  # type: ignore[return-value]

    @Logger.io
    def save(self, key: str, value: str) -> None:
        self.client.set(self._build_key(key), value)
