from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
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
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.driving_adapter.http_controller.user_controller import (
    get_current_user,
)
from src.service.train_booking.driving_adapter.schema.train_schedule_schema import (
    CreateTrainScheduleRequest,
    DeleteScheduleResponse,
    SeatMapResponse,
    TrainScheduleResponse,
)


router = APIRouter()


def _parse_schedule_id(raw: str) -> int:
    try:
        schedule_id = int(raw)
    except ValueError:
        raise DomainError('Invalid schedule id')
    if schedule_id <= 0:
        raise DomainError('Invalid schedule id')
    return schedule_id


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_schedule(
    request: CreateTrainScheduleRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateTrainScheduleUseCase = Depends(CreateTrainScheduleUseCase.depends),
) -> TrainScheduleResponse:
    schedule = await use_case.create(
        train_name=request.train_name,
        travel_date=request.travel_date,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
        start_station=request.start_station,
        stop_station=request.stop_station,
        first_class=request.first.model_dump() if request.first else None,
        second_class=request.second.model_dump() if request.second else None,
        unavailable_seats=request.unavailable_seats,
    )
    return TrainScheduleResponse.from_aggregate(schedule)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_schedules(
    upcoming: bool = False,
    use_case: ListTrainSchedulesUseCase = Depends(ListTrainSchedulesUseCase.depends),
) -> List[TrainScheduleResponse]:
    schedules = await use_case.list_schedules(upcoming=upcoming)
    return [TrainScheduleResponse.from_aggregate(schedule) for schedule in schedules]


@router.get('/{schedule_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_schedule(
    schedule_id: str,
    use_case: GetTrainScheduleUseCase = Depends(GetTrainScheduleUseCase.depends),
) -> TrainScheduleResponse:
    schedule = await use_case.get_by_id(schedule_id=_parse_schedule_id(schedule_id))
    return TrainScheduleResponse.from_aggregate(schedule)


@router.delete('/{schedule_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_schedule(
    schedule_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteTrainScheduleUseCase = Depends(DeleteTrainScheduleUseCase.depends),
) -> DeleteScheduleResponse:
    await use_case.delete(schedule_id=_parse_schedule_id(schedule_id))
    return DeleteScheduleResponse(success=True)


@router.get(
    '/{schedule_id}/classes/{travel_class}/carriages/{carriage}/seats',
    status_code=status.HTTP_200_OK,
)
@Logger.io
async def get_seat_map(
    schedule_id: str,
    travel_class: TravelClass,
    carriage: int,
    use_case: GetSeatMapUseCase = Depends(GetSeatMapUseCase.depends),
) -> SeatMapResponse:
    seat_map = await use_case.get_seat_map(
        schedule_id=_parse_schedule_id(schedule_id),
        travel_class=travel_class,
        carriage=carriage,
    )
    return SeatMapResponse.from_seat_map(seat_map)
