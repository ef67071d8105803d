from datetime import datetime
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule


class ListTrainSchedulesUseCase:
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
    async def list_schedules(
        self, *, upcoming: bool = False, now: Optional[datetime] = None
    ) -> List[TrainSchedule]:
        schedules = sorted(
            await self.train_schedule_query_repo.list_all(), key=TrainSchedule.sort_key
        )
        if not upcoming:
            return schedules

        # Departure times are wall-clock times without a zone
        reference = now or datetime.now()
        return [schedule for schedule in schedules if schedule.is_upcoming(reference)]
