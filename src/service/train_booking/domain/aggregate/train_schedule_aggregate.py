"""
Train Schedule Aggregate

[Business Invariants]
- A schedule always carries exactly two class layouts: First and Second
- Class capacity is derived from the layout, never stored on its own
- Unavailable seats belong to the class they are listed under and fit its layout
- Created once and deleted as a whole; never updated in place
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.schedule_capacity import capacity_of
from src.service.train_booking.domain.seat_availability import (
    normalize_unavailable_seats,
    unavailable_for_class,
)
from src.service.train_booking.domain.value_object.class_layout import ClassLayout
from src.service.train_booking.domain.value_object.seat_id import SeatId

_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_TIME_PATTERN = re.compile(r'^\d{2}:\d{2}(:\d{2})?$')

# A schedule without a departure time still counts as upcoming for the whole day
END_OF_DAY = time(23, 59)


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f'Schedule {attribute.name} cannot be empty')


def parse_travel_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
        raise DomainError('Invalid travel date format')
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise DomainError('Invalid travel date format')


def parse_clock_time(value: Any) -> Optional[time]:
    if value is None or isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise DomainError('Invalid time format')
    value = value.strip()
    if not value:
        return None
    if not _TIME_PATTERN.match(value):
        raise DomainError('Invalid time format')
    try:
        return time.fromisoformat(value)
    except ValueError:
        raise DomainError('Invalid time format')


def seat_fits_layout(seat: SeatId, travel_class: TravelClass, layout: ClassLayout) -> bool:
    return (
        seat.travel_class is travel_class
        and layout.has_carriage(seat.carriage)
        and seat.row_index < layout.rows
        and seat.col_index < layout.cols
    )


def _layout_from_input(raw: Optional[Mapping[str, Any]]) -> ClassLayout:
    raw = raw or {}
    return ClassLayout.from_raw(
        carriages=raw.get('carriages'), rows=raw.get('rows'), cols=raw.get('cols')
    )


@attrs.define
class TrainSchedule:
    train_name: str = attrs.field(converter=_strip, validator=_validate_non_empty_string)
    travel_date: Optional[date]
    start_station: str = attrs.field(converter=_strip, validator=_validate_non_empty_string)
    stop_station: str = attrs.field(converter=_strip, validator=_validate_non_empty_string)
    first_class: ClassLayout
    second_class: ClassLayout
    departure_time: Optional[time] = None
    arrival_time: Optional[time] = None
    unavailable_seats: Dict[TravelClass, Tuple[str, ...]] = attrs.field(
        factory=dict, converter=normalize_unavailable_seats
    )
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        train_name: str,
        travel_date: Any,
        start_station: str,
        stop_station: str,
        first_class: Optional[Mapping[str, Any]] = None,
        second_class: Optional[Mapping[str, Any]] = None,
        departure_time: Any = None,
        arrival_time: Any = None,
        unavailable_seats: Optional[Mapping[Any, Any]] = None,
    ) -> 'TrainSchedule':
        """
        Build a new schedule from request input

        Layout dimensions are clamped into range (missing values default to 1);
        seat ids in unavailable_seats must be well formed and fit the layout of
        the class they are listed under.
        """
        layouts = {
            TravelClass.FIRST: _layout_from_input(first_class),
            TravelClass.SECOND: _layout_from_input(second_class),
        }
        cls._validate_unavailable_seats(unavailable_seats or {}, layouts)

        return cls(
            train_name=train_name,
            travel_date=parse_travel_date(travel_date),
            departure_time=parse_clock_time(departure_time),
            arrival_time=parse_clock_time(arrival_time),
            start_station=start_station,
            stop_station=stop_station,
            first_class=layouts[TravelClass.FIRST],
            second_class=layouts[TravelClass.SECOND],
            unavailable_seats=dict(unavailable_seats or {}),
            created_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def _validate_unavailable_seats(
        unavailable_seats: Mapping[Any, Any], layouts: Mapping[TravelClass, ClassLayout]
    ) -> None:
        for key, seats in unavailable_seats.items():
            travel_class = TravelClass.parse(key)
            if not isinstance(seats, list | tuple):
                raise DomainError(f'Unavailable seats for {travel_class.value} must be a list')

            layout = layouts[travel_class]
            for raw in seats:
                if not seat_fits_layout(SeatId.parse(raw), travel_class, layout):
                    raise DomainError(
                        f'Seat {raw} does not exist in {travel_class.value} class layout'
                    )

    @property
    def layouts(self) -> Dict[TravelClass, ClassLayout]:
        return {TravelClass.FIRST: self.first_class, TravelClass.SECOND: self.second_class}

    def layout_for(self, travel_class: TravelClass) -> ClassLayout:
        return self.layouts[travel_class]

    def capacity_for(self, travel_class: TravelClass) -> int:
        return capacity_of(self.layout_for(travel_class))

    def unavailable_for(self, travel_class: TravelClass) -> FrozenSet[str]:
        return unavailable_for_class(self.unavailable_seats, travel_class)

    def has_seat(self, travel_class: TravelClass, seat_id: str) -> bool:
        if not SeatId.is_valid(seat_id):
            return False
        return seat_fits_layout(SeatId.parse(seat_id), travel_class, self.layout_for(travel_class))

    @property
    def departure_at(self) -> Optional[datetime]:
        if self.travel_date is None:
            return None
        return datetime.combine(self.travel_date, self.departure_time or END_OF_DAY)

    def is_upcoming(self, now: datetime) -> bool:
        departure_at = self.departure_at
        # Undated schedules are never filtered out
        if departure_at is None:
            return True
        return departure_at >= now

    def sort_key(self) -> Tuple[date, time, int]:
        return (
            self.travel_date or date.max,
            self.departure_time or time.max,
            self.id or 0,
        )
