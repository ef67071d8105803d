"""Application layer interfaces (Ports)"""

from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.app.interface.i_train_schedule_command_repo import (
    ITrainScheduleCommandRepo,
)
from src.service.train_booking.app.interface.i_train_schedule_query_repo import (
    ITrainScheduleQueryRepo,
)
from src.service.train_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.train_booking.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IPasswordHasher',
    'ITrainScheduleCommandRepo',
    'ITrainScheduleQueryRepo',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
