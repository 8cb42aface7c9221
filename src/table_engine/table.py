"""Table view-model tying data, columns and sort state together.

Presentation layers hold one ``TableModel``, forward header clicks to
``toggle_sorting`` and read ``rows()`` / ``headers()`` back. A rebuild that
fails with ``ConfigurationError`` leaves both the previous rows and the
previous sort state in place and re-raises, so a view never silently falls
back to unsorted data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from .columns import ColumnDef, validate_columns
from .comparators import ComparatorRegistry
from .row_model import RowIdFunc, RowModel, build_row_model
from .sort_state import (
    SortState,
    SortStateController,
    normalize_sort_state,
    sort_indicator,
    toggle_sort,
)

log = logging.getLogger(__name__)

__all__ = ["HeaderInfo", "TableModel"]


@dataclass(frozen=True)
class HeaderInfo:
    column_id: str
    label: str
    can_sort: bool
    direction: Optional[str]  # "asc" | "desc" | None
    indicator: str
    meta: Any

    @property
    def text(self) -> str:
        return f"{self.label}{self.indicator}"


class TableModel:
    def __init__(
        self,
        data: Iterable[Any],
        columns: Iterable[ColumnDef],
        sort_state: Optional[Iterable[Any]] = None,
        *,
        registry: ComparatorRegistry | None = None,
        get_row_id: RowIdFunc | None = None,
    ):
        self._data: List[Any] = list(data)
        self._columns: List[ColumnDef] = list(columns)
        self._by_id = validate_columns(self._columns)
        self._registry = registry
        self._get_row_id = get_row_id
        self._sorting = SortStateController()
        self._rows = self._build(normalize_sort_state(sort_state))
        self._sorting.set(self._rows.sort_state)

    # Internal ----------------------------------------------------------
    def _build(self, state: SortState, data: Optional[List[Any]] = None) -> RowModel:
        return build_row_model(
            self._data if data is None else data,
            self._columns,
            state,
            registry=self._registry,
            get_row_id=self._get_row_id,
        )

    # Queries -----------------------------------------------------------
    @property
    def columns(self) -> List[ColumnDef]:
        return list(self._columns)

    @property
    def sort_state(self) -> SortState:
        return self._sorting.state

    def get_column(self, column_id: str) -> Optional[ColumnDef]:
        return self._by_id.get(column_id)

    def rows(self) -> RowModel:
        return self._rows

    def headers(self) -> List[HeaderInfo]:
        state = self._sorting.state
        return [
            HeaderInfo(
                column_id=str(col.id),
                label=col.label,
                can_sort=col.enable_sorting,
                direction=self._sorting.direction_of(str(col.id)),
                indicator=sort_indicator(state, str(col.id)),
                meta=col.meta,
            )
            for col in self._columns
        ]

    # Mutations ---------------------------------------------------------
    def set_sort_state(self, state: Optional[Iterable[Any]]) -> RowModel:
        """Replace the sort state; on failure nothing changes and the error propagates."""
        new_state = normalize_sort_state(state)
        rows = self._build(new_state)
        self._rows = rows
        self._sorting.set(new_state)
        return rows

    def toggle_sorting(self, column_id: str, *, multi: bool = False) -> RowModel:
        col = self._by_id.get(column_id)
        if col is not None and not col.enable_sorting:
            log.debug("Ignoring sort toggle on unsortable column %s", column_id)
            return self._rows
        return self.set_sort_state(toggle_sort(self._sorting.state, column_id, multi=multi))

    def clear_sorting(self) -> RowModel:
        return self.set_sort_state(None)

    def set_data(self, data: Iterable[Any]) -> RowModel:
        records = list(data)
        rows = self._build(self._sorting.state, records)
        self._data = records
        self._rows = rows
        return rows
