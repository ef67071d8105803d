"""
Booking Request Builder

Linear validation: NoSchedule -> CountMismatch -> CapacityViolation -> Ready.
The first failing check decides the outcome; rejections are returned as
results with a user-facing message, never raised.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.enum.travel_class import TravelClass

NO_SCHEDULE_MESSAGE = 'Please select a train before booking.'


class BookingValidationState(Enum):
    NO_SCHEDULE = 'no_schedule'
    COUNT_MISMATCH = 'count_mismatch'
    CAPACITY_VIOLATION = 'capacity_violation'
    READY = 'ready'


@attrs.frozen
class Passenger:
    name: str = ''
    age: Optional[int] = None
    gender: str = ''
    contact: str = ''


@attrs.frozen
class BookingRequest:
    passenger: Passenger
    schedule_id: Optional[int]
    from_station: str
    to_station: str
    travel_date: Optional[date]
    travel_class: TravelClass
    ticket_count: int
    seats: Tuple[str, ...]

    def to_payload(self) -> Dict[str, Any]:
        """Wire format handed to the booking collaborator"""
        return {
            'passengerName': self.passenger.name,
            'age': self.passenger.age,
            'gender': self.passenger.gender,
            'contact': self.passenger.contact,
            'scheduleId': self.schedule_id,
            'fromStation': self.from_station,
            'toStation': self.to_station,
            'date': self.travel_date.isoformat() if self.travel_date else None,
            'travelClass': self.travel_class.value,
            'ticketCount': self.ticket_count,
            'seats': list(self.seats),
        }


@attrs.frozen
class BookingValidationResult:
    state: BookingValidationState
    message: Optional[str] = None
    request: Optional[BookingRequest] = None

    @property
    def is_ready(self) -> bool:
        return self.state is BookingValidationState.READY

    @property
    def payload(self) -> Optional[Dict[str, Any]]:
        return self.request.to_payload() if self.request else None


def seat_count_message(ticket_count: int) -> str:
    noun = 'seat' if ticket_count == 1 else 'seats'
    return f'Please select exactly {ticket_count} {noun}.'


def capacity_message(travel_class: TravelClass, capacity: int) -> str:
    return f'Invalid ticket count. Available capacity for {travel_class.value} is {capacity}.'


@Logger.io
def build_booking_request(
    *,
    schedule: Optional[TrainSchedule],
    travel_class: TravelClass,
    ticket_count: int,
    seats: Sequence[str],
    passenger: Passenger,
    from_station: Optional[str] = None,
    to_station: Optional[str] = None,
    travel_date: Optional[date] = None,
) -> BookingValidationResult:
    if schedule is None:
        return BookingValidationResult(
            state=BookingValidationState.NO_SCHEDULE, message=NO_SCHEDULE_MESSAGE
        )

    if len(seats) != ticket_count:
        return BookingValidationResult(
            state=BookingValidationState.COUNT_MISMATCH,
            message=seat_count_message(ticket_count),
        )

    capacity = schedule.capacity_for(travel_class)
    if ticket_count < 1 or ticket_count > capacity:
        return BookingValidationResult(
            state=BookingValidationState.CAPACITY_VIOLATION,
            message=capacity_message(travel_class, capacity),
        )

    request = BookingRequest(
        passenger=passenger,
        schedule_id=schedule.id,
        from_station=from_station or schedule.start_station,
        to_station=to_station or schedule.stop_station,
        travel_date=travel_date or schedule.travel_date,
        travel_class=travel_class,
        ticket_count=ticket_count,
        seats=tuple(seats),
    )
    return BookingValidationResult(state=BookingValidationState.READY, request=request)
