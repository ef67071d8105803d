"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.train_booking.driven_adapter.model.train_class_model import TrainClassModel
from src.service.train_booking.driven_adapter.model.train_schedule_model import (
    TrainScheduleModel,
)
from src.service.train_booking.driven_adapter.model.user_model import UserModel

__all__ = ['TrainClassModel', 'TrainScheduleModel', 'UserModel']
