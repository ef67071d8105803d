from datetime import date, datetime, time
from typing import Dict, List, Optional, Union

from pydantic import Field

from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.booking_session import SeatMap
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.driving_adapter.schema.base_schema import CamelModel

# Raw dimension input; out-of-range or non-numeric values are clamped, not rejected
RawDimension = Optional[Union[int, float, str]]


class ClassLayoutRequest(CamelModel):
    carriages: RawDimension = None
    rows: RawDimension = None
    cols: RawDimension = None


class CreateTrainScheduleRequest(CamelModel):
    train_name: str = Field(..., min_length=1)
    travel_date: str = Field(..., alias='date')
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    start_station: str = Field(..., min_length=1)
    stop_station: str = Field(..., min_length=1)
    first: Optional[ClassLayoutRequest] = None
    second: Optional[ClassLayoutRequest] = None
    unavailable_seats: Optional[Dict[str, List[str]]] = None

    class Config:
        json_schema_extra = {
            'example': {
                'trainName': 'Express 101',
                'date': '2025-12-24',
                'departureTime': '08:30',
                'arrivalTime': '11:45',
                'startStation': 'Taipei',
                'stopStation': 'Kaohsiung',
                'first': {'carriages': 1, 'rows': 10, 'cols': 6},
                'second': {'carriages': 3, 'rows': 12, 'cols': 8},
                'unavailableSeats': {'First': ['FC1-A1'], 'Second': []},
            }
        }


class ClassLayoutResponse(CamelModel):
    carriages: int
    rows: int
    cols: int
    capacity: int


class TrainScheduleResponse(CamelModel):
    id: int
    train_name: str
    travel_date: Optional[date] = Field(None, alias='date')
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    start_station: str
    stop_station: str
    classes: Dict[str, ClassLayoutResponse]
    unavailable_seats: Dict[str, List[str]]
    created_at: Optional[datetime] = None

    @classmethod
    def from_aggregate(cls, schedule: TrainSchedule) -> 'TrainScheduleResponse':
        if schedule.id is None:
            raise ValueError('Schedule ID should not be None after persistence.')

        return cls(
            id=schedule.id,
            train_name=schedule.train_name,
            travel_date=schedule.travel_date,
            departure_time=_format_time(schedule.departure_time),
            arrival_time=_format_time(schedule.arrival_time),
            start_station=schedule.start_station,
            stop_station=schedule.stop_station,
            classes={
                travel_class.value: ClassLayoutResponse(
                    carriages=layout.carriages,
                    rows=layout.rows,
                    cols=layout.cols,
                    capacity=schedule.capacity_for(travel_class),
                )
                for travel_class, layout in schedule.layouts.items()
            },
            unavailable_seats={
                travel_class.value: list(schedule.unavailable_seats.get(travel_class, ()))
                for travel_class in TravelClass
            },
            created_at=schedule.created_at,
        )


def _format_time(value: Optional[time]) -> Optional[str]:
    return value.strftime('%H:%M') if value else None


class DeleteScheduleResponse(CamelModel):
    success: bool = True


class SeatResponse(CamelModel):
    id: str
    row: str
    column: str
    is_window: bool
    available: bool


class SeatMapResponse(CamelModel):
    travel_class: TravelClass
    carriage: int
    carriages: int
    aisle_after: Optional[int] = None
    rows: List[List[SeatResponse]]

    @classmethod
    def from_seat_map(cls, seat_map: SeatMap) -> 'SeatMapResponse':
        return cls(
            travel_class=seat_map.travel_class,
            carriage=seat_map.carriage,
            carriages=seat_map.carriages,
            aisle_after=seat_map.aisle_after,
            rows=[
                [
                    SeatResponse(
                        id=cell.seat_id,
                        row=cell.row_label,
                        column=cell.column_label,
                        is_window=cell.is_window,
                        available=cell.available,
                    )
                    for cell in row
                ]
                for row in seat_map.rows
            ],
        )
