"""
Booking Session

One passenger's pass through the booking flow: pick a schedule, class,
carriage and ticket count, toggle seats on the seat map, then submit.
Owns the seat selection and applies its reset rules:
- schedule change: carriage back to 1, selection cleared
- class change: carriage back to 1, selection cleared, ticket count re-clamped
- carriage change: selection cleared
- ticket count change: selection trimmed to the new count
"""

from typing import Any, List, Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.booking_request_builder import (
    BookingValidationResult,
    Passenger,
    build_booking_request,
)
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.schedule_capacity import (
    MAX_CLASS_CAPACITY,
    MIN_TICKET_COUNT,
    clamp_ticket_count,
)
from src.service.train_booking.domain.seat_availability import (
    carriage_prefix,
    unavailable_in_carriage,
)
from src.service.train_booking.domain.seat_geometry import aisle_after, enumerate_seats
from src.service.train_booking.domain.seat_selection_tracker import SeatSelectionTracker
from src.service.train_booking.domain.value_object.class_layout import clamp_int


@attrs.frozen
class SeatMapCell:
    seat_id: str
    row_label: str
    column_label: str
    is_window: bool
    available: bool
    selected: bool


@attrs.frozen
class SeatMap:
    travel_class: TravelClass
    carriage: int
    carriages: int
    rows: List[List[SeatMapCell]]
    aisle_after: Optional[int]


@Logger.io
def build_seat_map(
    schedule: TrainSchedule,
    travel_class: TravelClass,
    carriage: int,
    selected: frozenset = frozenset(),
) -> SeatMap:
    layout = schedule.layout_for(travel_class)
    taken = unavailable_in_carriage(schedule.unavailable_seats, travel_class, carriage)
    rows = [
        [
            SeatMapCell(
                seat_id=cell.id,
                row_label=cell.row_label,
                column_label=cell.column_label,
                is_window=cell.is_window,
                available=cell.id not in taken,
                selected=cell.id in selected,
            )
            for cell in row
        ]
        for row in enumerate_seats(travel_class, carriage, layout.rows, layout.cols)
    ]
    return SeatMap(
        travel_class=travel_class,
        carriage=carriage,
        carriages=layout.carriages,
        rows=rows,
        aisle_after=aisle_after(layout.cols),
    )


@attrs.define
class BookingSession:
    """
    Schedule, class, carriage and ticket count are read-only; the methods
    below change them and keep the seat selection consistent. Constructor
    arguments go through the same clamping and scoping.
    """

    _schedule: Optional[TrainSchedule] = None
    _travel_class: TravelClass = attrs.field(
        default=TravelClass.FIRST, converter=TravelClass.parse
    )
    _carriage: Any = 1
    _ticket_count: Any = MIN_TICKET_COUNT
    from_station: str = ''
    to_station: str = ''
    _tracker: SeatSelectionTracker = attrs.field(
        init=False, factory=lambda: SeatSelectionTracker(max_selectable=MIN_TICKET_COUNT)
    )

    def __attrs_post_init__(self) -> None:
        if self._schedule is not None:
            self.from_station = self.from_station or self._schedule.start_station or ''
            self.to_station = self.to_station or self._schedule.stop_station or ''
        self._carriage = self._bounded_carriage(self._carriage)
        self._rescope()
        self._reclamp_ticket_count()

    @property
    def schedule(self) -> Optional[TrainSchedule]:
        return self._schedule

    @property
    def travel_class(self) -> TravelClass:
        return self._travel_class

    @property
    def carriage(self) -> int:
        return self._carriage

    @property
    def ticket_count(self) -> int:
        return self._ticket_count

    @property
    def tracker(self) -> SeatSelectionTracker:
        return self._tracker

    @property
    def selected_seats(self) -> tuple:
        return self._tracker.selected

    @property
    def capacity(self) -> int:
        if self._schedule is None:
            return 0
        return self._schedule.capacity_for(self._travel_class)

    def _ticket_limit(self) -> int:
        return MAX_CLASS_CAPACITY if self._schedule is None else self.capacity

    def _bounded_carriage(self, raw: Any) -> int:
        carriages = (
            self._schedule.layout_for(self._travel_class).carriages if self._schedule else 1
        )
        return clamp_int(raw, 1, max(carriages, 1))

    def _rescope(self) -> None:
        if self._schedule is None:
            self._tracker.rescope(())
            return
        self._tracker.rescope(
            unavailable_in_carriage(
                self._schedule.unavailable_seats, self._travel_class, self._carriage
            )
        )

    def _reclamp_ticket_count(self) -> None:
        self._ticket_count = clamp_ticket_count(self._ticket_count, self._ticket_limit())
        self._tracker.set_max_selectable(self._ticket_count)

    def select_schedule(self, schedule: Optional[TrainSchedule]) -> None:
        self._schedule = schedule
        self._carriage = 1
        if schedule is None:
            self.from_station = ''
            self.to_station = ''
        else:
            self.from_station = schedule.start_station or self.from_station
            self.to_station = schedule.stop_station or self.to_station
        self._rescope()
        self._reclamp_ticket_count()

    def change_class(self, travel_class: Any) -> None:
        self._travel_class = TravelClass.parse(travel_class)
        self._carriage = 1
        self._rescope()
        self._reclamp_ticket_count()

    def change_carriage(self, carriage: Any) -> None:
        self._carriage = self._bounded_carriage(carriage)
        self._rescope()

    def set_ticket_count(self, raw: Any) -> int:
        self._ticket_count = clamp_ticket_count(raw, self._ticket_limit())
        self._tracker.set_max_selectable(self._ticket_count)
        return self._ticket_count

    def toggle_seat(self, seat_id: str) -> bool:
        # Only seats of the carriage on screen can be picked
        if not seat_id.startswith(carriage_prefix(self._travel_class, self._carriage)):
            return False
        return self._tracker.toggle(seat_id)

    def seat_map(self) -> Optional[SeatMap]:
        if self._schedule is None:
            return None
        return build_seat_map(
            self._schedule,
            self._travel_class,
            self._carriage,
            frozenset(self._tracker.selected),
        )

    @Logger.io
    def submit(self, passenger: Passenger) -> BookingValidationResult:
        return build_booking_request(
            schedule=self._schedule,
            travel_class=self._travel_class,
            ticket_count=self._ticket_count,
            seats=self._tracker.selected,
            passenger=passenger,
            from_station=self.from_station,
            to_station=self.to_station,
        )
