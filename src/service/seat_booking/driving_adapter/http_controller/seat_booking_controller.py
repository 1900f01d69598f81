from fastapi import APIRouter, Depends

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.booking_lifecycle_use_case import (
    BookingLifecycleUseCase,
)
from src.service.seat_booking.app.command.toggle_seat_use_case import ToggleSeatUseCase
from src.service.seat_booking.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.seat_booking.driven_adapter.confirmation.static_confirmation_service_impl import (
    StaticConfirmationService,
)
from src.service.seat_booking.driving_adapter.http_controller.schema.seat_booking_schema import (
    ClearSelectionResponse,
    CommitResponse,
    ConfirmationRequest,
    ResetResponse,
    SeatMapResponse,
    ToggleSeatResponse,
)


router = APIRouter()


@router.get('/map')
@Logger.io(truncate_content=True)
def get_seat_map(
    use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> SeatMapResponse:
    return SeatMapResponse.from_view(use_case.execute())


@router.post('/{row}/{col}/toggle')
@Logger.io(truncate_content=True)
def toggle_seat(
    row: int,
    col: int,
    toggle_use_case: ToggleSeatUseCase = Depends(ToggleSeatUseCase.depends),
    seat_map_use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> ToggleSeatResponse:
    result = toggle_use_case.toggle(row=row, col=col)
    if result.is_rejected:
        raise ConflictError(result.warning or f'Seat {result.seat_id} cannot be selected')

    return ToggleSeatResponse(
        seat_id=result.seat_id,
        outcome=result.outcome.value,
        seat_map=SeatMapResponse.from_view(seat_map_use_case.execute()),
    )


@router.post('/commit')
@Logger.io(truncate_content=True)
def commit_booking(
    request: ConfirmationRequest,
    lifecycle_use_case: BookingLifecycleUseCase = Depends(BookingLifecycleUseCase.depends),
    seat_map_use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> CommitResponse:
    # The client has already shown the quote; its answer stands in for the prompt
    result = lifecycle_use_case.commit(
        confirmation_service=StaticConfirmationService(answer=request.confirm)
    )
    return CommitResponse(
        committed=result.committed,
        seat_ids=result.seat_ids,
        count=result.count,
        total_price=result.total_price,
        seat_map=SeatMapResponse.from_view(seat_map_use_case.execute()),
    )


@router.post('/clear')
@Logger.io(truncate_content=True)
def clear_selection(
    lifecycle_use_case: BookingLifecycleUseCase = Depends(BookingLifecycleUseCase.depends),
    seat_map_use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> ClearSelectionResponse:
    released_count = lifecycle_use_case.clear_selection()
    return ClearSelectionResponse(
        released_count=released_count,
        seat_map=SeatMapResponse.from_view(seat_map_use_case.execute()),
    )


@router.post('/reset')
@Logger.io(truncate_content=True)
def reset_all(
    request: ConfirmationRequest,
    lifecycle_use_case: BookingLifecycleUseCase = Depends(BookingLifecycleUseCase.depends),
    seat_map_use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> ResetResponse:
    result = lifecycle_use_case.reset_all(
        confirmation_service=StaticConfirmationService(answer=request.confirm)
    )
    return ResetResponse(
        reset=result.reset,
        released_count=result.released_count,
        seat_map=SeatMapResponse.from_view(seat_map_use_case.execute()),
    )
