"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seat_booking.app.command import (
    booking_lifecycle_use_case,
    toggle_seat_use_case,
)
from src.service.seat_booking.app.query import get_seat_map_use_case


WIRE_MODULES: list[ModuleType] = [
    toggle_seat_use_case,
    booking_lifecycle_use_case,
    get_seat_map_use_case,
]
