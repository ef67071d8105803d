from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_command_repo import (
    ITrainScheduleCommandRepo,
)


class DeleteTrainScheduleUseCase:
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
    async def delete(self, *, schedule_id: int) -> None:
        if schedule_id < 1:
            raise DomainError('Invalid schedule id')

        deleted = await self.train_schedule_command_repo.delete(schedule_id)
        if not deleted:
            raise NotFoundError('Schedule not found')
