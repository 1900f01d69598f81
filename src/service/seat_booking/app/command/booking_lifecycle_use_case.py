from threading import RLock
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.dto.seat_booking_dto import CommitResult, ResetResult
from src.service.seat_booking.app.interface.i_booked_seats_store import IBookedSeatsStore
from src.service.seat_booking.app.interface.i_confirmation_service import IConfirmationService
from src.service.seat_booking.domain.pricing import PricingEngine
from src.service.seat_booking.domain.seat_entity import Seat, SeatStatus
from src.service.seat_booking.domain.seat_grid import SeatGrid
from src.service.seat_booking.domain.value_object.booked_seat_ids import (
    BOOKED_SEATS_KEY,
    BookedSeatIds,
)


RESET_CONFIRMATION_MESSAGE = 'Reset all seats? This removes every booking.'


def build_commit_confirmation_message(*, count: int, total_price: int) -> str:
    return f'Confirm booking?\nSeats: {count}\nTotal Price: ₹{total_price}'


class BookingLifecycleUseCase:
    """
    Booking lifecycle: commit the selection, clear it, or reset the venue.

    Dependencies:
    - booked_seats_store: durable record of booked seat ids
    - confirmation_service: yes/no prompt before commit and reset
    """

    def __init__(
        self,
        *,
        seat_grid: SeatGrid,
        grid_lock: RLock,
        booked_seats_store: IBookedSeatsStore,
        confirmation_service: IConfirmationService,
    ) -> None:
        self.seat_grid = seat_grid
        self.grid_lock = grid_lock
        self.booked_seats_store = booked_seats_store
        self.confirmation_service = confirmation_service

    @classmethod
    @inject
    def depends(
        cls,
        seat_grid: SeatGrid = Depends(Provide['seat_grid']),
        grid_lock: RLock = Depends(Provide['grid_lock']),
        booked_seats_store: IBookedSeatsStore = Depends(Provide['booked_seats_store']),
        confirmation_service: IConfirmationService = Depends(Provide['confirmation_service']),
    ) -> Self:
        return cls(
            seat_grid=seat_grid,
            grid_lock=grid_lock,
            booked_seats_store=booked_seats_store,
            confirmation_service=confirmation_service,
        )

    @Logger.io
    def commit(
        self, *, confirmation_service: Optional[IConfirmationService] = None
    ) -> CommitResult:
        """
        Book every selected seat

        Flow:
        1. Quote the selection (count + total)
        2. Ask for confirmation, stop if declined
        3. Overwrite the persisted record with all booked ids
        4. Selected -> booked

        Args:
            confirmation_service: Answers the prompt for this call instead of
                the injected service (HTTP requests carry their own answer)

        Returns:
            CommitResult; ``committed`` is False when nothing was selected or
            the user declined
        """
        with self.grid_lock:
            selected = self.seat_grid.seats_with_status(SeatStatus.SELECTED)
            if not selected:
                return CommitResult.not_committed()

            count = len(selected)
            total_price = PricingEngine.total_for_selected(self.seat_grid)
            message = build_commit_confirmation_message(count=count, total_price=total_price)
            if not self._confirm(message, confirmation_service=confirmation_service):
                Logger.base.info(f'🚫 [COMMIT] Booking of {count} seats declined')
                return CommitResult.not_committed(count=count, total_price=total_price)

            # Persist first: a failing store leaves the grid as it was
            self._persist_booked(newly_booked=selected)
            for seat in selected:
                self.seat_grid.set_status(seat.row, seat.col, SeatStatus.BOOKED)

            seat_ids = [seat.seat_id for seat in selected]
            Logger.base.info(
                f'✅ [COMMIT] Booked {count} seats {seat_ids}, total: {total_price}'
            )
            return CommitResult(
                committed=True, seat_ids=seat_ids, count=count, total_price=total_price
            )

    @Logger.io
    def clear_selection(self) -> int:
        """Release every selected seat; bookings and the store stay as they are."""
        with self.grid_lock:
            selected = self.seat_grid.seats_with_status(SeatStatus.SELECTED)
            for seat in selected:
                self.seat_grid.set_status(seat.row, seat.col, SeatStatus.AVAILABLE)
            return len(selected)

    @Logger.io
    def reset_all(
        self, *, confirmation_service: Optional[IConfirmationService] = None
    ) -> ResetResult:
        """
        Return every seat to available and wipe the persisted bookings

        Destroys committed bookings, so it asks for confirmation first.
        """
        with self.grid_lock:
            if not self._confirm(
                RESET_CONFIRMATION_MESSAGE, confirmation_service=confirmation_service
            ):
                Logger.base.info('🚫 [RESET] Reset declined')
                return ResetResult(reset=False)

            released = [
                seat for seat in self.seat_grid.all_seats() if not seat.is_available
            ]
            self.booked_seats_store.save(BOOKED_SEATS_KEY, BookedSeatIds().to_json())
            for seat in released:
                self.seat_grid.set_status(seat.row, seat.col, SeatStatus.AVAILABLE)

            Logger.base.info(f'🧹 [RESET] Released {len(released)} seats, bookings cleared')
            return ResetResult(reset=True, released_count=len(released))

    def _confirm(
        self, message: str, *, confirmation_service: Optional[IConfirmationService]
    ) -> bool:
        if confirmation_service is None:
            confirmation_service = self.confirmation_service
        return confirmation_service.confirm(message)

    def _persist_booked(self, *, newly_booked: List[Seat]) -> None:
        already_booked = self.seat_grid.seats_with_status(SeatStatus.BOOKED)
        booked = BookedSeatIds.of(seat.seat_id for seat in already_booked + newly_booked)
        self.booked_seats_store.save(BOOKED_SEATS_KEY, booked.to_json())
