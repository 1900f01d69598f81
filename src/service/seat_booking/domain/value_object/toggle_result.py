from enum import StrEnum
from typing import Optional

import attrs

from src.service.seat_booking.domain.seat_constant import MAX_SEATS_PER_BOOKING


CAPACITY_WARNING = f'You can book a maximum of {MAX_SEATS_PER_BOOKING} seats.'
CONTINUITY_WARNING = 'Seat selection must be continuous.'


class ToggleOutcome(StrEnum):
    SELECTED = 'selected'
    DESELECTED = 'deselected'
    IGNORED = 'ignored'
    REJECTED_CAPACITY = 'rejected_capacity'
    REJECTED_CONTINUITY = 'rejected_continuity'


@attrs.define(frozen=True)
class ToggleResult:
    """Outcome of one seat click (Value Object)"""

    seat_id: str
    outcome: ToggleOutcome
    warning: Optional[str] = None

    @property
    def is_rejected(self) -> bool:
        return self.outcome in (ToggleOutcome.REJECTED_CAPACITY, ToggleOutcome.REJECTED_CONTINUITY)

    @classmethod
    def rejected_capacity(cls, seat_id: str) -> 'ToggleResult':
        return cls(
            seat_id=seat_id, outcome=ToggleOutcome.REJECTED_CAPACITY, warning=CAPACITY_WARNING
        )

    @classmethod
    def rejected_continuity(cls, seat_id: str) -> 'ToggleResult':
        return cls(
            seat_id=seat_id, outcome=ToggleOutcome.REJECTED_CONTINUITY, warning=CONTINUITY_WARNING
        )
