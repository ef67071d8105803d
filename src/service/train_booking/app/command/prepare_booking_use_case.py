"""
Prepare Booking

Validates a submitted booking against the schedule and emits the booking
payload. Nothing is persisted here; storing the booking and marking its
seats unavailable belongs to the booking service that receives the payload.
"""

from typing import Optional, Sequence, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.domain.booking_request_builder import (
    BookingValidationResult,
    Passenger,
    build_booking_request,
)
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.seat_selection_tracker import SeatSelectionTracker


class PrepareBookingUseCase:
    def __init__(self, train_schedule_query_repo: ITrainScheduleQueryRepo) -> None:
        self.train_schedule_query_repo = train_schedule_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        train_schedule_query_repo: ITrainScheduleQueryRepo = Depends(
            Provide[Container.train_schedule_query_repo]
        ),
    ) -> Self:
        return cls(train_schedule_query_repo=train_schedule_query_repo)

    @Logger.io
    async def prepare(
        self,
        *,
        schedule_id: Optional[int],
        travel_class: TravelClass,
        ticket_count: int,
        seats: Sequence[str],
        passenger: Passenger,
        from_station: Optional[str] = None,
        to_station: Optional[str] = None,
    ) -> BookingValidationResult:
        schedule = None
        selected: Sequence[str] = ()
        if schedule_id is not None:
            schedule = await self.train_schedule_query_repo.get_by_id(schedule_id)
            if schedule is None:
                raise NotFoundError('Schedule not found')

            # Replay the picks the way the seat map would have accepted them:
            # taken, unknown and repeated seats never make it into the selection.
            # Surplus seats are kept so the count check reports them.
            tracker = SeatSelectionTracker(
                max_selectable=max(ticket_count, len(set(seats))),
                unavailable=schedule.unavailable_for(travel_class),
            )
            selected = tracker.select_many(
                seat for seat in seats if schedule.has_seat(travel_class, seat)
            )

        result = build_booking_request(
            schedule=schedule,
            travel_class=travel_class,
            ticket_count=ticket_count,
            seats=selected,
            passenger=passenger,
            from_station=from_station,
            to_station=to_station,
        )

        if result.is_ready:
            Logger.base.info(
                f'🎫 [BOOKING] Ready: schedule {schedule_id}, {travel_class.value}, '
                f'{ticket_count} seat(s)'
            )
        else:
            Logger.base.info(f'⚠️ [BOOKING] Rejected ({result.state.value}): {result.message}')
        return result
