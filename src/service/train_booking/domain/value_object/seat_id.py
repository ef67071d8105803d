import re

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.train_booking.domain.enum.travel_class import TravelClass

MAX_ROWS = 26
MAX_COLS = 10

_SEAT_ID_PATTERN = re.compile(r'^([FS])C([1-9][0-9]*)-([A-Z])([1-9][0-9]?)$')


class SeatIdFormatError(DomainError):
    def __init__(self, value: object) -> None:
        super().__init__(
            f'Invalid seat ID format: {value}. Expected: <class initial>C<carriage>-<row><column>'
        )


@attrs.frozen
class SeatId:
    """
    Addressable seat identifier, e.g. FC1-A1 or SC3-J10

    row_index and col_index are zero-based; the rendered form uses a row
    letter (A..Z) and a 1-based column number.
    """

    travel_class: TravelClass
    carriage: int = attrs.field(validator=attrs.validators.ge(1))
    row_index: int = attrs.field(
        validator=[attrs.validators.ge(0), attrs.validators.lt(MAX_ROWS)]
    )
    col_index: int = attrs.field(
        validator=[attrs.validators.ge(0), attrs.validators.lt(MAX_COLS)]
    )

    @property
    def row_label(self) -> str:
        return chr(ord('A') + self.row_index)

    @property
    def column_label(self) -> str:
        return str(self.col_index + 1)

    @property
    def value(self) -> str:
        return (
            f'{self.travel_class.initial}C{self.carriage}-{self.row_label}{self.column_label}'
        )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: object) -> 'SeatId':
        if not isinstance(raw, str):
            raise SeatIdFormatError(raw)

        match = _SEAT_ID_PATTERN.match(raw)
        if not match:
            raise SeatIdFormatError(raw)

        initial, carriage, row_letter, column = match.groups()
        col_index = int(column) - 1
        if col_index >= MAX_COLS:
            raise SeatIdFormatError(raw)

        travel_class = next(tc for tc in TravelClass if tc.initial == initial)
        return cls(
            travel_class=travel_class,
            carriage=int(carriage),
            row_index=ord(row_letter) - ord('A'),
            col_index=col_index,
        )

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        try:
            cls.parse(raw)
        except SeatIdFormatError:
            return False
        return True
