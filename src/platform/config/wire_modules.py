"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.train_booking.app.command import (
    create_train_schedule_use_case,
    delete_train_schedule_use_case,
    prepare_booking_use_case,
    sign_up_use_case,
    update_profile_use_case,
)
from src.service.train_booking.app.query import (
    get_seat_map_use_case,
    get_train_schedule_use_case,
    get_user_profile_use_case,
    list_train_schedules_use_case,
)
from src.service.train_booking.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    sign_up_use_case,
    update_profile_use_case,
    create_train_schedule_use_case,
    delete_train_schedule_use_case,
    prepare_booking_use_case,
    get_seat_map_use_case,
    get_train_schedule_use_case,
    get_user_profile_use_case,
    list_train_schedules_use_case,
    user_controller,
]
