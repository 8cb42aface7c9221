"""Row model builder.

Materializes the ordered rows for one (records, columns, sort state)
combination. Values are resolved eagerly, once per row and column, so every
comparison within a build sees the same value.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from config import settings

from .columns import NO_VALUE, ColumnDef, resolve_value, validate_columns
from .comparators import ComparatorRegistry, RowComparator, default_registry
from .errors import AccessorFault, ConfigurationError
from .sort_state import SortState, normalize_sort_state

log = logging.getLogger(__name__)

__all__ = ["Row", "RowModel", "build_row_model"]

RowIdFunc = Callable[[Any, int], str]


class Row:
    """A view over one record and its resolved cell values."""

    __slots__ = ("id", "index", "original", "_values")

    def __init__(self, row_id: str, index: int, original: Any, values: Mapping[str, Any]):
        self.id = row_id
        self.index = index
        self.original = original
        self._values = MappingProxyType(dict(values))

    def get_value(self, column_id: str) -> Any:
        try:
            return self._values[column_id]
        except KeyError:
            raise ConfigurationError(f"Row has no column '{column_id}'") from None

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Row(id={self.id!r}, index={self.index})"


class RowModel(Sequence):
    """Ordered, read-only sequence of ``Row`` objects from one build."""

    def __init__(
        self,
        rows: Iterable[Row],
        *,
        sort_state: SortState = (),
        faults: Iterable[AccessorFault] = (),
    ) -> None:
        self._rows: Tuple[Row, ...] = tuple(rows)
        self.sort_state = sort_state
        self.faults: Tuple[AccessorFault, ...] = tuple(faults)

    def __getitem__(self, idx):
        return self._rows[idx]

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    def originals(self) -> List[Any]:
        return [row.original for row in self._rows]

    def column_values(self, column_id: str) -> List[Any]:
        return [row.get_value(column_id) for row in self._rows]

    def row_by_id(self, row_id: str) -> Optional[Row]:
        return next((row for row in self._rows if row.id == row_id), None)


def _default_row_id(record: Any, index: int) -> str:
    return str(index)


def _resolve_rows(
    records: List[Any], columns: List[ColumnDef], get_row_id: RowIdFunc
) -> Tuple[List[Row], List[AccessorFault]]:
    rows: List[Row] = []
    faults: List[AccessorFault] = []
    for index, record in enumerate(records):
        values = {}
        for col in columns:
            try:
                values[col.id] = resolve_value(col, record, index)
            except AccessorFault as fault:
                if not settings.ACCESSOR_FAULTS_AS_NO_VALUE:
                    raise
                log.warning("%s; treating as no value", fault)
                faults.append(fault)
                values[col.id] = NO_VALUE
        rows.append(Row(get_row_id(record, index), index, record, values))
    return rows, faults


def _sort_comparators(
    sort_state: SortState, by_id: Mapping[str, ColumnDef], registry: ComparatorRegistry
) -> List[Tuple[RowComparator, int]]:
    if len(sort_state) > settings.MAX_SORT_COLUMNS:
        raise ConfigurationError(
            f"Sort state has {len(sort_state)} entries; at most "
            f"{settings.MAX_SORT_COLUMNS} allowed"
        )
    chain = []
    for entry in sort_state:
        col = by_id.get(entry.column_id)
        if col is None:
            raise ConfigurationError(f"Cannot sort by unknown column '{entry.column_id}'")
        if not col.enable_sorting:
            raise ConfigurationError(f"Sorting is disabled for column '{entry.column_id}'")
        chain.append((registry.resolve(col), -1 if entry.descending else 1))
    return chain


def build_row_model(
    records: Iterable[Any],
    columns: Iterable[ColumnDef],
    sort_state: Optional[Iterable[Any]] = None,
    *,
    registry: Optional[ComparatorRegistry] = None,
    get_row_id: Optional[RowIdFunc] = None,
) -> RowModel:
    """Build the ordered row model.

    Raises ``ConfigurationError`` for duplicate column ids or a sort entry
    naming an unknown (or unsortable) column, and ``ComparatorFault`` when a
    comparator raises. The result is always a permutation of ``records``;
    ties keep their original relative order in both directions.
    """
    records = list(records)
    columns = list(columns)
    by_id = validate_columns(columns)
    state = normalize_sort_state(sort_state)
    # Validate sort configuration before touching any record
    chain = _sort_comparators(state, by_id, registry or default_registry)

    rows, faults = _resolve_rows(records, columns, get_row_id or _default_row_id)
    if chain and len(rows) > 1:

        def compare(a: Row, b: Row) -> int:
            for row_cmp, direction in chain:
                result = row_cmp(a, b) * direction
                if result:
                    return result
            return (a.index > b.index) - (a.index < b.index)

        rows = sorted(rows, key=cmp_to_key(compare))
    log.debug("Built row model: %d rows, sort=%s, faults=%d", len(rows), state, len(faults))
    return RowModel(rows, sort_state=state, faults=faults)
