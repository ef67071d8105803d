"""Train Booking Domain Enums"""

from src.service.train_booking.domain.enum.travel_class import (
    InvalidTravelClassError,
    TravelClass,
)

__all__ = ['InvalidTravelClassError', 'TravelClass']
