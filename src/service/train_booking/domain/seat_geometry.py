"""
Seat Geometry

Maps a (travel class, carriage, rows, cols) configuration onto addressable
seat ids. Pure and deterministic: the same inputs always yield the same
ordered seats.
"""

import math
from typing import Iterator, List, Optional

import attrs

from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.value_object.seat_id import MAX_COLS, MAX_ROWS, SeatId


@attrs.frozen
class SeatCell:
    seat_id: SeatId
    row_label: str
    column_label: str
    is_window: bool

    @property
    def id(self) -> str:
        return self.seat_id.value


def row_label(index: int) -> str:
    if not 0 <= index < MAX_ROWS:
        raise ValueError(f'Row index out of range: {index}')
    return chr(ord('A') + index)


def column_label(index: int) -> str:
    return str(index + 1)


def is_window_column(index: int, cols: int) -> bool:
    return index == 0 or index == cols - 1


def aisle_after(cols: int) -> Optional[int]:
    """Number of columns left of the aisle; None when the carriage is a single column."""
    if cols <= 1:
        return None
    return math.ceil(cols / 2)


def _bounded(value: int, maximum: int) -> int:
    return max(0, min(value, maximum))


def enumerate_seats(
    travel_class: TravelClass, carriage: int, rows: int, cols: int
) -> List[List[SeatCell]]:
    """Row-major seat grid of one carriage"""
    rows = _bounded(rows, MAX_ROWS)
    cols = _bounded(cols, MAX_COLS)
    return [
        [
            SeatCell(
                seat_id=SeatId(
                    travel_class=travel_class,
                    carriage=carriage,
                    row_index=r,
                    col_index=c,
                ),
                row_label=row_label(r),
                column_label=column_label(c),
                is_window=is_window_column(c, cols),
            )
            for c in range(cols)
        ]
        for r in range(rows)
    ]


def iter_seat_ids(travel_class: TravelClass, carriage: int, rows: int, cols: int) -> Iterator[str]:
    for row in enumerate_seats(travel_class, carriage, rows, cols):
        for cell in row:
            yield cell.id
