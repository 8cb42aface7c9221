"""Sort state and the three-state toggle cycle.

A ``SortState`` is an immutable tuple of ``SortEntry`` items in priority
order; the empty tuple means unsorted. Toggling a column header walks the
cycle ``Unsorted -> Ascending -> Descending -> Unsorted``. Toggling a
different column restarts the cycle on that column and discards the old one.

With ``settings.MAX_SORT_COLUMNS`` above 1, a multi toggle (shift-click)
appends the column to the existing entries instead of replacing them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from config import settings

from .errors import ConfigurationError

log = logging.getLogger(__name__)

__all__ = [
    "SortEntry",
    "SortState",
    "UNSORTED",
    "normalize_sort_state",
    "toggle_sort",
    "direction_of",
    "sort_indicator",
    "SortStateController",
]

SORT_INDICATOR_ASC = " ▲"
SORT_INDICATOR_DESC = " ▼"


@dataclass(frozen=True)
class SortEntry:
    column_id: str
    descending: bool = False


SortState = Tuple[SortEntry, ...]
UNSORTED: SortState = ()


def _coerce_entry(item: Any) -> SortEntry:
    if isinstance(item, SortEntry):
        return item
    if isinstance(item, str):
        return SortEntry(item)
    if isinstance(item, dict):
        return SortEntry(str(item["id"]), bool(item.get("desc", False)))
    if isinstance(item, tuple) and len(item) == 2:
        return SortEntry(str(item[0]), bool(item[1]))
    raise ConfigurationError(f"Cannot interpret {item!r} as a sort entry")


def normalize_sort_state(state: Optional[Iterable[Any]]) -> SortState:
    """Coerce ``state`` into a ``SortState`` tuple.

    Accepts ``SortEntry`` items, bare column ids (ascending), ``(id, desc)``
    pairs and ``{"id": ..., "desc": ...}`` dicts.
    """
    if state is None:
        return UNSORTED
    if isinstance(state, (str, SortEntry)):
        raise ConfigurationError(
            f"Sort state must be a sequence of entries, got {type(state).__name__} {state!r}"
        )
    entries = tuple(_coerce_entry(item) for item in state)
    seen = set()
    for entry in entries:
        if entry.column_id in seen:
            raise ConfigurationError(f"Column '{entry.column_id}' appears twice in sort state")
        seen.add(entry.column_id)
    return entries


def toggle_sort(state: SortState, column_id: str, *, multi: bool = False) -> SortState:
    """Return the state following a header toggle on ``column_id``."""
    state = normalize_sort_state(state)
    existing = next((i for i, e in enumerate(state) if e.column_id == column_id), None)
    if not multi or settings.MAX_SORT_COLUMNS <= 1:
        if existing is None:
            return (SortEntry(column_id),)
        # Other entries of a multi sort are dropped
        return _advance(state[existing])
    if existing is None:
        if len(state) >= settings.MAX_SORT_COLUMNS:
            state = state[1:]
        return state + (SortEntry(column_id),)
    return state[:existing] + _advance(state[existing]) + state[existing + 1 :]


def _advance(entry: SortEntry) -> SortState:
    if not entry.descending:
        return (SortEntry(entry.column_id, True),)
    return UNSORTED


def direction_of(state: SortState, column_id: str) -> Optional[str]:
    """``"asc"``, ``"desc"`` or ``None`` for ``column_id`` within ``state``."""
    for entry in state:
        if entry.column_id == column_id:
            return "desc" if entry.descending else "asc"
    return None


def sort_indicator(state: SortState, column_id: str) -> str:
    direction = direction_of(state, column_id)
    if direction == "asc":
        return SORT_INDICATOR_ASC
    if direction == "desc":
        return SORT_INDICATOR_DESC
    return ""


class SortStateController:
    """Owns the current ``SortState`` and advances it on toggle events.

    Every transition assigns a fresh tuple; readers never see a partially
    updated state.
    """

    def __init__(self, initial: Optional[Iterable[Any]] = None) -> None:
        self._state: SortState = normalize_sort_state(initial)

    @property
    def state(self) -> SortState:
        return self._state

    def toggle(self, column_id: str, *, multi: bool = False) -> SortState:
        new_state = toggle_sort(self._state, column_id, multi=multi)
        log.debug("Sort toggle on %s: %s -> %s", column_id, self._state, new_state)
        self._state = new_state
        return new_state

    def set(self, state: Optional[Iterable[Any]]) -> SortState:
        self._state = normalize_sort_state(state)
        return self._state

    def clear(self) -> SortState:
        self._state = UNSORTED
        return self._state

    def direction_of(self, column_id: str) -> Optional[str]:
        return direction_of(self._state, column_id)

    @property
    def is_sorted(self) -> bool:
        return bool(self._state)
