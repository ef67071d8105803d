from typing import Any, Mapping, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_command_repo import (
    ITrainScheduleCommandRepo,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule


class CreateTrainScheduleUseCase:
    def __init__(self, train_schedule_command_repo: ITrainScheduleCommandRepo) -> None:
        self.train_schedule_command_repo = train_schedule_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        train_schedule_command_repo: ITrainScheduleCommandRepo = Depends(
            Provide[Container.train_schedule_command_repo]
        ),
    ) -> Self:
        return cls(train_schedule_command_repo=train_schedule_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        train_name: str,
        travel_date: str,
        start_station: str,
        stop_station: str,
        departure_time: Optional[str] = None,
        arrival_time: Optional[str] = None,
        first_class: Optional[Mapping[str, Any]] = None,
        second_class: Optional[Mapping[str, Any]] = None,
        unavailable_seats: Optional[Mapping[str, Any]] = None,
    ) -> TrainSchedule:
        schedule = TrainSchedule.create(
            train_name=train_name,
            travel_date=travel_date,
            departure_time=departure_time,
            arrival_time=arrival_time,
            start_station=start_station,
            stop_station=stop_station,
            first_class=first_class,
            second_class=second_class,
            unavailable_seats=unavailable_seats,
        )
        return await self.train_schedule_command_repo.create(schedule)
