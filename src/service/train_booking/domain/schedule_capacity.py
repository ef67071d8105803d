"""
Schedule Capacity

capacity = carriages * rows * cols, recomputed on every call, and the ticket
count clamp that keeps a requested count inside [1, capacity].
"""

import math
from typing import Any

from src.service.train_booking.domain.value_object.class_layout import (
    MAX_CARRIAGES,
    ClassLayout,
    to_finite_number,
)
from src.service.train_booking.domain.value_object.seat_id import MAX_COLS, MAX_ROWS

MIN_TICKET_COUNT = 1
MAX_CLASS_CAPACITY = MAX_CARRIAGES * MAX_ROWS * MAX_COLS


def capacity_of(layout: ClassLayout) -> int:
    return layout.carriages * layout.rows * layout.cols


def clamp_ticket_count(value: Any, capacity: int) -> int:
    number = to_finite_number(value)
    if number is None:
        return MIN_TICKET_COUNT
    # Still 1 when capacity < 1; the booking builder reports that case
    return max(MIN_TICKET_COUNT, min(capacity, math.floor(number)))
