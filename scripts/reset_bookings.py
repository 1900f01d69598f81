#!/usr/bin/env python3
"""
Booking Reset Script

Wipes every booking of the venue from the configured booked seats store
(BOOKING_STORE_BACKEND). Asks for confirmation on the terminal first.

Usage:
    python -m scripts.reset_bookings
"""

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.domain.pricing import PricingEngine
from src.service.seat_booking.driven_adapter.confirmation.console_confirmation_service_impl import (
    ConsoleConfirmationService,
)


def main() -> int:
    seat_grid = container.seat_grid()
    print(f'📦 Store backend: {settings.BOOKING_STORE_BACKEND}')
    print(f'🪑 Booked seats: {PricingEngine.booked_count(seat_grid)}')

    use_case = container.booking_lifecycle_use_case(
        confirmation_service=ConsoleConfirmationService()
    )
    try:
        result = use_case.reset_all()
    finally:
        if settings.BOOKING_STORE_BACKEND == 'kvrocks':
            kvrocks_client.disconnect()

    if not result.reset:
        print('🚫 Reset cancelled, nothing changed')
        return 1

    Logger.base.info(f'✅ Reset done, {result.released_count} seats released')
    print(f'✅ Released {result.released_count} seats')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
