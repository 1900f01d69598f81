"""
Test Configuration and Fixtures

- Environment is set before any application module reads settings
- Unit tests (test/**/unit/) build their objects directly or with mocks
- Integration tests drive the FastAPI app against an in-memory booked seats store
"""

# =============================================================================
# Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['BOOKING_STORE_BACKEND'] = 'memory'
    os.environ['KVROCKS_KEY_PREFIX'] = 'test_'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.seat_booking.driven_adapter.store.in_memory_booked_seats_store_impl import (  # noqa: E402, E501
    InMemoryBookedSeatsStore,
)


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Per-test Fixtures
# =============================================================================
@pytest.fixture
def booked_seats_store() -> Generator[InMemoryBookedSeatsStore, None, None]:
    """Fresh store and grid for every test that talks to the container."""
    store = InMemoryBookedSeatsStore()
    container.booked_seats_store.override(providers.Object(store))
    container.seat_grid.reset()
    yield store
    container.booked_seats_store.reset_override()
    container.seat_grid.reset()
