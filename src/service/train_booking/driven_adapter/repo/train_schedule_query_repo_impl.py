from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.driven_adapter.model.train_schedule_model import (
    TrainScheduleModel,
)
from src.service.train_booking.driven_adapter.repo.train_schedule_mapper import (
    model_to_schedule,
)


class TrainScheduleQueryRepoImpl(ITrainScheduleQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, schedule_id: int) -> Optional[TrainSchedule]:
        async with self.session_factory() as session:
            schedule_model = await session.get(TrainScheduleModel, schedule_id)
            if schedule_model is None:
                return None

            return model_to_schedule(schedule_model)

    @Logger.io
    async def list_all(self) -> List[TrainSchedule]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TrainScheduleModel).order_by(
                    TrainScheduleModel.travel_date.asc().nulls_last(),
                    TrainScheduleModel.departure_time.asc().nulls_last(),
                    TrainScheduleModel.id.asc(),
                )
            )
            return [model_to_schedule(model) for model in result.scalars().all()]
