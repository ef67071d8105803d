import math
from typing import Any, Optional

import attrs

from src.service.train_booking.domain.value_object.seat_id import MAX_COLS, MAX_ROWS

MAX_CARRIAGES = 50


def to_finite_number(value: Any) -> Optional[float]:
    """Numeric view of raw input; None for missing, non-numeric, NaN or infinite values."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def clamp_int(value: Any, minimum: int, maximum: int) -> int:
    number = to_finite_number(value)
    if number is None:
        return minimum
    return max(minimum, min(maximum, math.floor(number)))


def _cap_rows(value: Any) -> Any:
    # Row letters stop at Z
    if isinstance(value, int) and not isinstance(value, bool):
        return min(value, MAX_ROWS)
    return value


_int = attrs.validators.instance_of(int)


@attrs.frozen
class ClassLayout:
    """
    Carriage/row/column layout of one travel class

    capacity is always derived from the three dimensions and never stored.
    carriages=0 is accepted here (a layout with no seats); raw request input
    goes through from_raw, which clamps every dimension to at least 1.
    """

    carriages: int = attrs.field(
        validator=[_int, attrs.validators.ge(0), attrs.validators.le(MAX_CARRIAGES)]
    )
    rows: int = attrs.field(converter=_cap_rows, validator=[_int, attrs.validators.ge(1)])
    cols: int = attrs.field(
        validator=[_int, attrs.validators.ge(1), attrs.validators.le(MAX_COLS)]
    )

    @property
    def capacity(self) -> int:
        return self.carriages * self.rows * self.cols

    @classmethod
    def from_raw(cls, *, carriages: Any = None, rows: Any = None, cols: Any = None) -> 'ClassLayout':
        return cls(
            carriages=clamp_int(carriages, 1, MAX_CARRIAGES),
            rows=clamp_int(rows, 1, MAX_ROWS),
            cols=clamp_int(cols, 1, MAX_COLS),
        )

    def has_carriage(self, carriage: int) -> bool:
        return 1 <= carriage <= self.carriages
