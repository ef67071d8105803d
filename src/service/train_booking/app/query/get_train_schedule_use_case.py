from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule


class GetTrainScheduleUseCase:
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
    async def get_by_id(self, *, schedule_id: int) -> TrainSchedule:
        schedule = await self.train_schedule_query_repo.get_by_id(schedule_id)
        if schedule is None:
            Logger.base.warning(f'⚠️ [GET_SCHEDULE] Schedule {schedule_id} not found')
            raise NotFoundError('Schedule not found')

        return schedule
