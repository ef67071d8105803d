"""Conversion between TrainSchedule aggregates and their ORM rows"""

from typing import Any, Dict, List

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.domain.aggregate.train_schedule_aggregate import TrainSchedule
from src.service.train_booking.domain.enum.travel_class import (
    InvalidTravelClassError,
    TravelClass,
)
from src.service.train_booking.domain.value_object.class_layout import ClassLayout
from src.service.train_booking.driven_adapter.model.train_class_model import TrainClassModel
from src.service.train_booking.driven_adapter.model.train_schedule_model import (
    TrainScheduleModel,
)

# A schedule row without a class row has no seats in that class
_EMPTY_LAYOUT = ClassLayout(carriages=0, rows=1, cols=1)


def decode_unavailable_seats(raw: Any) -> Any:
    # Rows written by older clients may hold the blob as a JSON string
    if isinstance(raw, str | bytes):
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            Logger.base.warning(f'⚠️ [SCHEDULE] Ignoring malformed unavailable_seats: {e}')
            return {}
    return raw


def encode_unavailable_seats(schedule: TrainSchedule) -> Dict[str, List[str]]:
    return {
        travel_class.value: list(schedule.unavailable_seats.get(travel_class, ()))
        for travel_class in TravelClass
    }


def class_models_from_schedule(schedule: TrainSchedule) -> List[TrainClassModel]:
    return [
        TrainClassModel(
            class_name=travel_class.value,
            carriages=layout.carriages,
            seat_rows=layout.rows,
            seat_cols=layout.cols,
            capacity=layout.capacity,
        )
        for travel_class, layout in schedule.layouts.items()
    ]


def model_to_schedule(model: TrainScheduleModel) -> TrainSchedule:
    layouts: Dict[TravelClass, ClassLayout] = {}
    for class_model in model.classes:
        try:
            travel_class = TravelClass.parse(class_model.class_name)
        except InvalidTravelClassError:
            continue
        layouts[travel_class] = ClassLayout.from_raw(
            carriages=class_model.carriages, rows=class_model.seat_rows, cols=class_model.seat_cols
        )

    return TrainSchedule(
        id=model.id,
        train_name=model.train_name,
        travel_date=model.travel_date,
        departure_time=model.departure_time,
        arrival_time=model.arrival_time,
        start_station=model.start_station,
        stop_station=model.stop_station,
        first_class=layouts.get(TravelClass.FIRST, _EMPTY_LAYOUT),
        second_class=layouts.get(TravelClass.SECOND, _EMPTY_LAYOUT),
        unavailable_seats=decode_unavailable_seats(model.unavailable_seats),
        created_at=model.created_at,
    )
