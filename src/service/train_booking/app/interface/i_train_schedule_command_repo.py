from abc import ABC, abstractmethod

from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule


class ITrainScheduleCommandRepo(ABC):
    @abstractmethod
    async def create(self, schedule: TrainSchedule) -> TrainSchedule:
        """Persist the schedule and both class layouts in one transaction"""
        pass

    @abstractmethod
    async def delete(self, schedule_id: int) -> bool:
        """Delete the schedule with its class layouts; False when nothing was deleted"""
        pass
