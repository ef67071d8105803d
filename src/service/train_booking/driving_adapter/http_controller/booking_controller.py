from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.command.prepare_booking_use_case import PrepareBookingUseCase
from src.service.train_booking.domain.booking_request_builder import Passenger
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.driving_adapter.http_controller.user_controller import (
    get_current_user,
)
from src.service.train_booking.driving_adapter.schema.booking_schema import (
    BookingPayloadResponse,
    PrepareBookingRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def prepare_booking(
    request: PrepareBookingRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: PrepareBookingUseCase = Depends(PrepareBookingUseCase.depends),
) -> BookingPayloadResponse:
    result = await use_case.prepare(
        schedule_id=request.schedule_id,
        travel_class=request.travel_class,
        ticket_count=request.ticket_count,
        seats=request.seats,
        passenger=Passenger(
            name=request.passenger_name.strip(),
            age=request.age,
            gender=request.gender,
            contact=request.contact,
        ),
        from_station=request.from_station,
        to_station=request.to_station,
    )

    if not result.is_ready:
        raise DomainError(result.message or 'Invalid booking request')

    return BookingPayloadResponse.model_validate(result.payload)
