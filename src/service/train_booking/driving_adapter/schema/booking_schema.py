from typing import List, Optional

from pydantic import Field

from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.driving_adapter.schema.base_schema import CamelModel


class PrepareBookingRequest(CamelModel):
    passenger_name: str = Field(..., min_length=1, max_length=255)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: str = ''
    contact: str = ''
    schedule_id: Optional[int] = None
    from_station: Optional[str] = None
    to_station: Optional[str] = None
    travel_class: TravelClass = TravelClass.FIRST
    ticket_count: int = Field(1, ge=0)
    seats: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            'example': {
                'passengerName': 'Jane Doe',
                'age': 30,
                'gender': 'female',
                'contact': '0912345678',
                'scheduleId': 1,
                'travelClass': 'First',
                'ticketCount': 2,
                'seats': ['FC1-A1', 'FC1-A2'],
            }
        }


class BookingPayloadResponse(CamelModel):
    passenger_name: str
    age: Optional[int] = None
    gender: str
    contact: str
    schedule_id: int
    from_station: str
    to_station: str
    date: Optional[str] = None
    travel_class: TravelClass
    ticket_count: int
    seats: List[str]
