from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_schedule_command_repo import (
    ITrainScheduleCommandRepo,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.driven_adapter.model.train_schedule_model import (
    TrainScheduleModel,
)
from src.service.train_booking.driven_adapter.repo.train_schedule_mapper import (
    class_models_from_schedule,
    encode_unavailable_seats,
    model_to_schedule,
)


class TrainScheduleCommandRepoImpl(ITrainScheduleCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, schedule: TrainSchedule) -> TrainSchedule:
        async with self.session_factory() as session:
            schedule_model = TrainScheduleModel(
                train_name=schedule.train_name,
                travel_date=schedule.travel_date,
                departure_time=schedule.departure_time,
                arrival_time=schedule.arrival_time,
                start_station=schedule.start_station,
                stop_station=schedule.stop_station,
                unavailable_seats=encode_unavailable_seats(schedule),
                classes=class_models_from_schedule(schedule),
            )
            if schedule.created_at:
                schedule_model.created_at = schedule.created_at

            # Schedule row and both class rows commit together or not at all
            session.add(schedule_model)
            await session.commit()

            Logger.base.info(
                f'🚆 [SCHEDULE] Created schedule {schedule_model.id} ({schedule_model.train_name})'
            )
            return model_to_schedule(schedule_model)

    @Logger.io
    async def delete(self, schedule_id: int) -> bool:
        async with self.session_factory() as session:
            schedule_model = await session.get(TrainScheduleModel, schedule_id)
            if schedule_model is None:
                return False

            await session.delete(schedule_model)
            await session.commit()

            Logger.base.info(f'🗑️ [SCHEDULE] Deleted schedule {schedule_id}')
            return True
