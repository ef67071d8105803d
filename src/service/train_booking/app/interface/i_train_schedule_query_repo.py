from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule


class ITrainScheduleQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, schedule_id: int) -> Optional[TrainSchedule]:
        pass

    @abstractmethod
    async def list_all(self) -> List[TrainSchedule]:
        """All schedules ordered by travel date, then departure time"""
        pass
