from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.domain.booking_session import SeatMap, build_seat_map
from src.service.train_booking.domain.enum.travel_class import TravelClass


class GetSeatMapUseCase:
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
    async def get_seat_map(
        self, *, schedule_id: int, travel_class: TravelClass, carriage: int
    ) -> SeatMap:
        schedule = await self.train_schedule_query_repo.get_by_id(schedule_id)
        if schedule is None:
            raise NotFoundError('Schedule not found')

        layout = schedule.layout_for(travel_class)
        if not layout.has_carriage(carriage):
            raise DomainError(
                f'Carriage {carriage} out of range for {travel_class.value} '
                f'(1-{layout.carriages})'
            )

        return build_seat_map(schedule, travel_class, carriage)
