"""
Unit tests for PrepareBookingUseCase

Focus:
1. Submitted seats are replayed through the selection rules (taken, unknown, repeated)
2. Outcome order: NoSchedule -> CountMismatch -> CapacityViolation -> Ready
3. Fail fast when the schedule does not exist
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.train_booking.app.command.prepare_booking_use_case import PrepareBookingUseCase
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.booking_request_builder import (
    BookingValidationState,
    Passenger,
)
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.value_object.class_layout import ClassLayout


PASSENGER = Passenger(name='Ada Lovelace', age=36, gender='Female', contact='ada@example.com')


@pytest.mark.unit
class TestPrepareBooking:
    @pytest.fixture
    def schedule(self):
        return TrainSchedule(
            id=1,
            train_name='Northern Express',
            travel_date=date(2099, 12, 24),
            start_station='Central',
            stop_station='Harbor',
            first_class=ClassLayout(carriages=1, rows=10, cols=6),
            second_class=ClassLayout(carriages=2, rows=12, cols=8),
            unavailable_seats={'First': ['FC1-A1'], 'Second': ['SC2-B3']},
        )

    @pytest.fixture
    def query_repo(self, schedule):
        repo = AsyncMock()
        repo.get_by_id.return_value = schedule
        return repo

    @pytest.fixture
    def use_case(self, query_repo):
        return PrepareBookingUseCase(train_schedule_query_repo=query_repo)

    async def test_ready_booking(self, use_case, query_repo):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=3,
            seats=['FC1-A2', 'FC1-A3', 'FC1-A4'],
            passenger=PASSENGER,
        )

        assert result.is_ready
        assert result.payload['seats'] == ['FC1-A2', 'FC1-A3', 'FC1-A4']
        assert result.payload['fromStation'] == 'Central'
        query_repo.get_by_id.assert_awaited_once_with(1)

    async def test_too_few_seats(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=3,
            seats=['FC1-A2', 'FC1-A3'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.COUNT_MISMATCH
        assert result.message == 'Please select exactly 3 seats.'

    async def test_unavailable_seat_is_dropped(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=2,
            seats=['FC1-A1', 'FC1-A2'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.COUNT_MISMATCH

    async def test_seat_outside_layout_is_dropped(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.SECOND,
            ticket_count=1,
            seats=['SC3-A1'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.COUNT_MISMATCH

    async def test_repeated_seat_counts_once(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=2,
            seats=['FC1-A2', 'FC1-A2'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.COUNT_MISMATCH

    async def test_surplus_seats_are_reported(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=1,
            seats=['FC1-A2', 'FC1-A3'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.COUNT_MISMATCH
        assert result.message == 'Please select exactly 1 seat.'

    async def test_zero_ticket_count(self, use_case):
        result = await use_case.prepare(
            schedule_id=1,
            travel_class=TravelClass.FIRST,
            ticket_count=0,
            seats=[],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.CAPACITY_VIOLATION

    async def test_no_schedule_selected(self, use_case, query_repo):
        result = await use_case.prepare(
            schedule_id=None,
            travel_class=TravelClass.FIRST,
            ticket_count=1,
            seats=['FC1-A2'],
            passenger=PASSENGER,
        )

        assert result.state is BookingValidationState.NO_SCHEDULE
        query_repo.get_by_id.assert_not_awaited()

    async def test_missing_schedule(self, use_case, query_repo):
        query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Schedule not found'):
            await use_case.prepare(
                schedule_id=99,
                travel_class=TravelClass.FIRST,
                ticket_count=1,
                seats=['FC1-A2'],
                passenger=PASSENGER,
            )
