"""
Seat Availability

Projects a schedule's per-class unavailable seat list onto one carriage.
Missing or malformed data never raises; it simply yields no unavailable
seats.
"""

from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple

import attrs

from src.service.train_booking.domain.enum.travel_class import TravelClass
from src.service.train_booking.domain.value_object.seat_id import SeatId

UnavailableSeats = Mapping[TravelClass, Tuple[str, ...]]


@attrs.frozen
class SeatPartition:
    available: Tuple[str, ...]
    unavailable: Tuple[str, ...]


def carriage_prefix(travel_class: TravelClass, carriage: int) -> str:
    return f'{travel_class.initial}C{carriage}-'


def _class_entry(unavailable_seats: Any, travel_class: TravelClass) -> Any:
    if not isinstance(unavailable_seats, Mapping):
        return None
    entry = unavailable_seats.get(travel_class)
    if entry is None:
        entry = unavailable_seats.get(travel_class.value)
    return entry


def unavailable_for_class(unavailable_seats: Any, travel_class: TravelClass) -> FrozenSet[str]:
    entry = _class_entry(unavailable_seats, travel_class)
    if not isinstance(entry, list | tuple | set | frozenset):
        return frozenset()
    return frozenset(seat for seat in entry if isinstance(seat, str))


def unavailable_in_carriage(
    unavailable_seats: Any, travel_class: TravelClass, carriage: int
) -> FrozenSet[str]:
    prefix = carriage_prefix(travel_class, carriage)
    return frozenset(
        seat
        for seat in unavailable_for_class(unavailable_seats, travel_class)
        if seat.startswith(prefix)
    )


def partition(
    seats: Iterable[str], unavailable_seats: Any, travel_class: TravelClass, carriage: int
) -> SeatPartition:
    taken = unavailable_in_carriage(unavailable_seats, travel_class, carriage)
    available = []
    unavailable = []
    for seat in seats:
        (unavailable if seat in taken else available).append(seat)
    return SeatPartition(available=tuple(available), unavailable=tuple(unavailable))


def normalize_unavailable_seats(raw: Any) -> Dict[TravelClass, Tuple[str, ...]]:
    """
    Clean a stored or submitted unavailable-seat mapping

    Unknown class keys, non-list entries and ids that are not well formed or
    belong to another class are dropped one by one. Order is kept and
    duplicates are removed.
    """
    result: Dict[TravelClass, Tuple[str, ...]] = {tc: () for tc in TravelClass}
    if not isinstance(raw, Mapping):
        return result

    for travel_class in TravelClass:
        entry = _class_entry(raw, travel_class)
        if not isinstance(entry, list | tuple):
            continue
        seen: Dict[str, None] = {}
        for seat in entry:
            if not SeatId.is_valid(seat):
                continue
            if SeatId.parse(seat).travel_class is not travel_class:
                continue
            seen.setdefault(seat, None)
        result[travel_class] = tuple(seen)
    return result
