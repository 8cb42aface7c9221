"""Column definitions and accessor resolution.

A ``ColumnDef`` describes how one column derives its cell value from a caller
record and (optionally) how two such values are ordered. Accessors come in
two flavours:

 - a dotted field path (``"address.zipCode"``) looked up segment by segment,
   mapping keys first, then attributes;
 - an arbitrary pure function ``record -> value`` (e.g. joining two name
   fields, or projecting a nested object wholesale for a later comparator).

Missing fields never raise; they resolve to the ``NO_VALUE`` sentinel.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Union

from .errors import AccessorFault, ConfigurationError

__all__ = [
    "NO_VALUE",
    "NoValue",
    "Accessor",
    "ComparatorSpec",
    "ColumnDef",
    "column",
    "resolve_value",
    "validate_columns",
]


class NoValue:
    """Singleton marker for a cell without a value."""

    _instance: "NoValue | None" = None

    def __new__(cls) -> "NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __reduce__(self):  # pragma: no cover - keeps identity across copy/pickle
        return (NoValue, ())


NO_VALUE = NoValue()

Accessor = Union[str, Callable[[Any], Any]]
ComparatorSpec = Union[None, str, Callable[[Any, Any], int]]


@dataclass(frozen=True)
class ColumnDef:
    """Immutable description of one table column.

    ``id`` defaults to the accessor path when the accessor is a string; a
    function accessor must be given an explicit id. ``meta`` is carried
    through untouched for presentation layers (e.g. ``{"is_numeric": True}``).
    """

    accessor: Accessor
    id: str | None = None
    header: str | None = None
    comparator: ComparatorSpec = None
    meta: Mapping[str, Any] = field(default_factory=dict)
    enable_sorting: bool = True

    def __post_init__(self) -> None:
        column_id = self.id
        if column_id is None:
            if not isinstance(self.accessor, str):
                raise ConfigurationError("Columns with a function accessor require an explicit id")
            column_id = self.accessor
        if not isinstance(column_id, str) or not column_id:
            raise ConfigurationError(f"Invalid column id: {column_id!r}")
        if not isinstance(self.accessor, str) and not callable(self.accessor):
            raise ConfigurationError(
                f"Column '{column_id}': accessor must be a field path or a callable"
            )
        object.__setattr__(self, "id", column_id)

    @property
    def label(self) -> str:
        return self.header if self.header is not None else str(self.id)


def column(accessor: Accessor, **options: Any) -> ColumnDef:
    """Shorthand for ``ColumnDef(accessor, **options)``."""
    return ColumnDef(accessor, **options)


_MISSING = object()


def _lookup(obj: Any, segment: str) -> Any:
    if obj is None or obj is NO_VALUE:
        return _MISSING
    if isinstance(obj, Mapping):
        return obj.get(segment, _MISSING)
    if isinstance(obj, Sequence) and not isinstance(obj, str) and segment.isdigit():
        idx = int(segment)
        return obj[idx] if idx < len(obj) else _MISSING
    return getattr(obj, segment, _MISSING)


def _resolve_path(record: Any, path: str) -> Any:
    current = record
    for segment in path.split("."):
        current = _lookup(current, segment)
        if current is _MISSING:
            return NO_VALUE
    return current


def resolve_value(col: ColumnDef, record: Any, row_index: int = 0) -> Any:
    """Evaluate ``col``'s accessor against ``record``.

    ``None`` and missing fields come back as ``NO_VALUE``. An exception raised
    while reading the record (a function accessor, a property getter, a custom
    mapping) is wrapped in ``AccessorFault``; whether that fault degrades to
    ``NO_VALUE`` is decided by the row model builder.
    """
    try:
        if isinstance(col.accessor, str):
            value = _resolve_path(record, col.accessor)
        else:
            value = col.accessor(record)
    except Exception as exc:
        raise AccessorFault(str(col.id), row_index, exc) from exc
    return NO_VALUE if value is None else value


def validate_columns(columns: Iterable[ColumnDef]) -> dict[str, ColumnDef]:
    """Return an id -> column mapping, raising on duplicate ids."""
    by_id: dict[str, ColumnDef] = {}
    for col in columns:
        if not isinstance(col, ColumnDef):
            raise ConfigurationError(f"Expected ColumnDef, got {type(col).__name__}")
        if col.id in by_id:
            raise ConfigurationError(f"Duplicate column id '{col.id}'")
        by_id[str(col.id)] = col
    return by_id
