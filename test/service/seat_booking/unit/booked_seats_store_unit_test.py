"""Unit tests for the booked seats store adapters (memory, file, kvrocks)."""

from pathlib import Path
from unittest.mock import MagicMock

import orjson
import pytest

from src.service.seat_booking.domain.value_object.booked_seat_ids import BOOKED_SEATS_KEY
from src.service.seat_booking.driven_adapter.store.file_booked_seats_store_impl import (
    FileBookedSeatsStore,
)
from src.service.seat_booking.driven_adapter.store.in_memory_booked_seats_store_impl import (
    InMemoryBookedSeatsStore,
)
from src.service.seat_booking.driven_adapter.store.kvrocks_booked_seats_store_impl import (
    KvrocksBookedSeatsStore,
)


@pytest.mark.unit
class TestInMemoryBookedSeatsStore:
    def test_missing_key_is_none(self) -> None:
        assert InMemoryBookedSeatsStore().load(BOOKED_SEATS_KEY) is None

    def test_save_overwrites(self) -> None:
        store = InMemoryBookedSeatsStore({BOOKED_SEATS_KEY: '["0-0"]'})

        store.save(BOOKED_SEATS_KEY, '[]')

        assert store.load(BOOKED_SEATS_KEY) == '[]'

    def test_initial_values_are_copied(self) -> None:
        initial = {BOOKED_SEATS_KEY: '["0-0"]'}
        store = InMemoryBookedSeatsStore(initial)

        store.save(BOOKED_SEATS_KEY, '[]')

        assert initial[BOOKED_SEATS_KEY] == '["0-0"]'


@pytest.mark.unit
class TestFileBookedSeatsStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = FileBookedSeatsStore(path=tmp_path / 'state' / 'booked_seats.json')

        assert store.load(BOOKED_SEATS_KEY) is None

    def test_save_then_load_from_a_new_instance(self, tmp_path: Path) -> None:
        # Given
        path = tmp_path / 'state' / 'booked_seats.json'
        FileBookedSeatsStore(path=path).save(BOOKED_SEATS_KEY, '["0-0","0-1"]')

        # When
        loaded = FileBookedSeatsStore(path=path).load(BOOKED_SEATS_KEY)

        # Then
        assert loaded == '["0-0","0-1"]'
        assert orjson.loads(path.read_bytes()) == {BOOKED_SEATS_KEY: '["0-0","0-1"]'}
        assert not path.with_name('booked_seats.json.tmp').exists()

    def test_save_keeps_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / 'booked_seats.json'
        path.write_bytes(orjson.dumps({'other': 'value'}))
        store = FileBookedSeatsStore(path=path)

        store.save(BOOKED_SEATS_KEY, '[]')

        assert store.load('other') == 'value'
        assert store.load(BOOKED_SEATS_KEY) == '[]'

    @pytest.mark.parametrize('content', [b'not json', b'["0-0"]'])
    def test_unreadable_file_is_treated_as_empty(self, tmp_path: Path, content: bytes) -> None:
        path = tmp_path / 'booked_seats.json'
        path.write_bytes(content)

        store = FileBookedSeatsStore(path=path)

        assert store.load(BOOKED_SEATS_KEY) is None

    def test_save_replaces_an_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / 'booked_seats.json'
        path.write_bytes(b'garbage')
        store = FileBookedSeatsStore(path=path)

        store.save(BOOKED_SEATS_KEY, '["1-1"]')

        assert store.load(BOOKED_SEATS_KEY) == '["1-1"]'


@pytest.mark.unit
class TestKvrocksBookedSeatsStore:
    @pytest.fixture
    def mock_client(self) -> MagicMock:
        return MagicMock()

    def test_load_uses_prefixed_key(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = '["0-0"]'
        store = KvrocksBookedSeatsStore(client=mock_client, key_prefix='venue:')

        assert store.load(BOOKED_SEATS_KEY) == '["0-0"]'
        mock_client.get.assert_called_once_with('venue:bookedSeats')

    def test_load_decodes_bytes(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = b'["0-0"]'
        store = KvrocksBookedSeatsStore(client=mock_client, key_prefix='')

        assert store.load(BOOKED_SEATS_KEY) == '["0-0"]'

    def test_load_missing_key(self, mock_client: MagicMock) -> None:
        mock_client.get.return_value = None
        store = KvrocksBookedSeatsStore(client=mock_client, key_prefix='')

        assert store.load(BOOKED_SEATS_KEY) is None

    def test_save_sets_value(self, mock_client: MagicMock) -> None:
        store = KvrocksBookedSeatsStore(client=mock_client, key_prefix='venue:')

        store.save(BOOKED_SEATS_KEY, '[]')

        mock_client.set.assert_called_once_with('venue:bookedSeats', '[]')

    def test_default_prefix_comes_from_settings(self, mock_client: MagicMock) -> None:
        store = KvrocksBookedSeatsStore(client=mock_client)

        assert store.key_prefix == 'test_'
