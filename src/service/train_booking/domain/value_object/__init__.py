"""Train Booking Domain Value Objects"""

from src.service.train_booking.domain.value_object.class_layout import ClassLayout
from src.service.train_booking.domain.value_object.seat_id import SeatId, SeatIdFormatError

__all__ = ['ClassLayout', 'SeatId', 'SeatIdFormatError']
