from typing import Any, FrozenSet, Iterable, List, Tuple

import attrs


def _non_negative(value: Any) -> int:
    return max(0, int(value))


@attrs.define
class SeatSelectionTracker:
    """
    Ordered, bounded set of selected seat ids

    After every operation:
    - len(selected) <= max_selectable
    - no selected seat is in unavailable

    Rejected toggles are silent no-ops; toggle() reports whether anything changed.
    The bound and the unavailable set are read-only; set_max_selectable() and
    rescope() are the only ways to change them.
    """

    _max_selectable: int = attrs.field(default=0, converter=_non_negative)
    _unavailable: FrozenSet[str] = attrs.field(factory=frozenset, converter=frozenset)
    _selected: List[str] = attrs.field(factory=list, init=False)

    @property
    def max_selectable(self) -> int:
        return self._max_selectable

    @property
    def unavailable(self) -> FrozenSet[str]:
        return self._unavailable

    @property
    def selected(self) -> Tuple[str, ...]:
        return tuple(self._selected)

    @property
    def count(self) -> int:
        return len(self._selected)

    @property
    def is_full(self) -> bool:
        return len(self._selected) >= self._max_selectable

    def is_selected(self, seat_id: str) -> bool:
        return seat_id in self._selected

    def toggle(self, seat_id: str) -> bool:
        if seat_id in self._unavailable:
            return False
        if seat_id in self._selected:
            self._selected.remove(seat_id)
            return True
        if self.is_full:
            return False
        self._selected.append(seat_id)
        return True

    def select_many(self, seat_ids: Iterable[str]) -> Tuple[str, ...]:
        """Select each seat in order; repeats and rejected seats are skipped."""
        for seat_id in seat_ids:
            if seat_id not in self._selected:
                self.toggle(seat_id)
        return self.selected

    def reset(self) -> None:
        self._selected.clear()

    def set_max_selectable(self, value: int) -> None:
        self._max_selectable = _non_negative(value)
        # Keep the earliest picks when the bound shrinks
        del self._selected[self._max_selectable :]

    def rescope(self, unavailable: Iterable[str]) -> None:
        """Switch to another carriage or class: new unavailable set, empty selection."""
        self._unavailable = frozenset(unavailable)
        self.reset()
