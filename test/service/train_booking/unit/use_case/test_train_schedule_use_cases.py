from datetime import date, datetime, time
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.train_booking.app.command.create_train_schedule_use_case import (
    CreateTrainScheduleUseCase,
)
from src.service.train_booking.app.command.delete_train_schedule_use_case import (
    DeleteTrainScheduleUseCase,
)
from src.service.train_booking.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.train_booking.app.query.get_train_schedule_use_case import (
    GetTrainScheduleUseCase,
)
from src.service.train_booking.app.query.list_train_schedules_use_case import (
    ListTrainSchedulesUseCase,
)
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.value_object.class_layout import ClassLayout


def _schedule(schedule_id, travel_date, departure_time=None):
    return TrainSchedule(
        id=schedule_id,
        train_name=f'Train {schedule_id}',
        travel_date=travel_date,
        departure_time=departure_time,
        start_station='Central',
        stop_station='Harbor',
        first_class=ClassLayout(carriages=1, rows=10, cols=6),
        second_class=ClassLayout(carriages=2, rows=12, cols=8),
        unavailable_seats={'Second': ['SC2-B3']},
    )


@pytest.mark.unit
class TestCreateTrainSchedule:
    async def test_create_persists_the_new_schedule(self):
        repo = AsyncMock()
        repo.create.side_effect = lambda schedule: schedule
        use_case = CreateTrainScheduleUseCase(train_schedule_command_repo=repo)

        schedule = await use_case.create(
            train_name='Northern Express',
            travel_date='2099-12-24',
            start_station='Central',
            stop_station='Harbor',
            departure_time='08:30',
            first_class={'carriages': 1, 'rows': 10, 'cols': 6},
            second_class={'carriages': 2, 'rows': 12, 'cols': 8},
        )

        repo.create.assert_awaited_once()
        assert schedule.departure_time == time(8, 30)
        assert schedule.capacity_for(TravelClass.SECOND) == 192

    async def test_invalid_input_never_reaches_the_repo(self):
        repo = AsyncMock()
        use_case = CreateTrainScheduleUseCase(train_schedule_command_repo=repo)

        with pytest.raises(DomainError):
            await use_case.create(
                train_name='Northern Express',
                travel_date='not-a-date',
                start_station='Central',
                stop_station='Harbor',
            )
        repo.create.assert_not_awaited()


@pytest.mark.unit
class TestDeleteTrainSchedule:
    async def test_delete(self):
        repo = AsyncMock()
        repo.delete.return_value = True

        await DeleteTrainScheduleUseCase(train_schedule_command_repo=repo).delete(schedule_id=3)

        repo.delete.assert_awaited_once_with(3)

    async def test_missing_schedule(self):
        repo = AsyncMock()
        repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            await DeleteTrainScheduleUseCase(train_schedule_command_repo=repo).delete(
                schedule_id=3
            )

    @pytest.mark.parametrize('schedule_id', [0, -1])
    async def test_invalid_id(self, schedule_id):
        repo = AsyncMock()

        with pytest.raises(DomainError, match='Invalid schedule id'):
            await DeleteTrainScheduleUseCase(train_schedule_command_repo=repo).delete(
                schedule_id=schedule_id
            )
        repo.delete.assert_not_awaited()


@pytest.mark.unit
class TestQuerySchedules:
    @pytest.fixture
    def query_repo(self):
        repo = AsyncMock()
        repo.list_all.return_value = [
            _schedule(3, date(2030, 1, 2), time(6, 0)),
            _schedule(1, date(2020, 1, 1), time(9, 0)),
            _schedule(2, date(2030, 1, 1), time(12, 0)),
        ]
        repo.get_by_id.side_effect = lambda schedule_id: next(
            (s for s in repo.list_all.return_value if s.id == schedule_id), None
        )
        return repo

    async def test_list_is_sorted_by_departure(self, query_repo):
        schedules = await ListTrainSchedulesUseCase(query_repo).list_schedules()

        assert [s.id for s in schedules] == [1, 2, 3]

    async def test_upcoming_hides_departed_trains(self, query_repo):
        schedules = await ListTrainSchedulesUseCase(query_repo).list_schedules(
            upcoming=True, now=datetime(2030, 1, 1, 13, 0)
        )

        assert [s.id for s in schedules] == [3]

    async def test_get_by_id(self, query_repo):
        schedule = await GetTrainScheduleUseCase(query_repo).get_by_id(schedule_id=2)

        assert schedule.train_name == 'Train 2'

    async def test_get_missing(self, query_repo):
        with pytest.raises(NotFoundError):
            await GetTrainScheduleUseCase(query_repo).get_by_id(schedule_id=42)

    async def test_seat_map(self, query_repo):
        seat_map = await GetSeatMapUseCase(query_repo).get_seat_map(
            schedule_id=2, travel_class=TravelClass.SECOND, carriage=2
        )

        taken = [cell.seat_id for row in seat_map.rows for cell in row if not cell.available]
        assert taken == ['SC2-B3']
        assert len(seat_map.rows) == 12

    async def test_seat_map_carriage_out_of_range(self, query_repo):
        with pytest.raises(DomainError, match='Carriage 2 out of range'):
            await GetSeatMapUseCase(query_repo).get_seat_map(
                schedule_id=2, travel_class=TravelClass.FIRST, carriage=2
            )

    async def test_seat_map_missing_schedule(self, query_repo):
        with pytest.raises(NotFoundError):
            await GetSeatMapUseCase(query_repo).get_seat_map(
                schedule_id=42, travel_class=TravelClass.FIRST, carriage=1
            )
