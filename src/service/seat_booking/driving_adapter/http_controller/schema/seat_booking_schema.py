from typing import List

from pydantic import BaseModel

from src.service.seat_booking.app.dto.seat_booking_dto import SeatMapView


class SeatResponse(BaseModel):
    row: int
    col: int
    status: str
    seat_id: str
    row_label: str
    number: int
    price: int


class PriceTierResponse(BaseModel):
    label: str
    rows: str
    price: int


class SeatMapResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'seats': [
                    {
                        'row': 0,
                        'col': 0,
                        'status': 'available',
                        'seat_id': '0-0',
                        'row_label': 'A',
                        'number': 1,
                        'price': 1000,
                    }
                ],
                'available_count': 78,
                'selected_count': 2,
                'booked_count': 0,
                'total_price': 2000,
                'price_tiers': [{'label': 'Premium', 'rows': 'A-C', 'price': 1000}],
            }
        },
    }

    seats: List[SeatResponse]
    available_count: int
    selected_count: int
    booked_count: int
    total_price: int
    price_tiers: List[PriceTierResponse]

    @classmethod
    def from_view(cls, view: SeatMapView) -> 'SeatMapResponse':
        return cls(
            seats=[
                SeatResponse(
                    row=seat.row,
                    col=seat.col,
                    status=seat.status.value,
                    seat_id=seat.seat_id,
                    row_label=seat.row_label,
                    number=seat.number,
                    price=seat.price,
                )
                for seat in view.seats
            ],
            available_count=view.available_count,
            selected_count=view.selected_count,
            booked_count=view.booked_count,
            total_price=view.total_price,
            price_tiers=[
                PriceTierResponse(label=tier.label, rows=tier.rows, price=tier.price)
                for tier in view.price_tiers
            ],
        )


class ToggleSeatResponse(BaseModel):
    seat_id: str
    outcome: str
    seat_map: SeatMapResponse


class ConfirmationRequest(BaseModel):
    model_config = {'json_schema_extra': {'example': {'confirm': True}}}

    confirm: bool = False


class CommitResponse(BaseModel):
    committed: bool
    seat_ids: List[str]
    count: int
    total_price: int
    seat_map: SeatMapResponse


class ClearSelectionResponse(BaseModel):
    released_count: int
    seat_map: SeatMapResponse


class ResetResponse(BaseModel):
    reset: bool
    released_count: int
    seat_map: SeatMapResponse
