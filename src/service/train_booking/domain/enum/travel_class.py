from enum import Enum
from typing import Any

from src.platform.exception.exceptions import DomainError


class InvalidTravelClassError(DomainError):
    def __init__(self, value: Any) -> None:
        super().__init__(f'Invalid travel class: {value}. Expected one of: First, Second')


class TravelClass(Enum):
    """Travel classes offered on every schedule"""

    FIRST = 'First'
    SECOND = 'Second'

    @property
    def initial(self) -> str:
        # Seat ids are prefixed with this letter: FC1-A1, SC2-B3
        return self.value[0]

    @classmethod
    def parse(cls, value: Any) -> 'TravelClass':
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidTravelClassError(value)
