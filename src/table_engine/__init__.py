"""Headless table engine public API.

Curated surface for presentation layers (Qt view, terminal renderer, tests):
column definitions, comparators, the row model builder and sort state.
Deep module paths remain importable but are not part of the stable surface.
"""

from __future__ import annotations

from .errors import (  # noqa: F401
    TableEngineError,
    ConfigurationError,
    AccessorFault,
    ComparatorFault,
)
from .columns import (  # noqa: F401
    NO_VALUE,
    ColumnDef,
    column,
    resolve_value,
    validate_columns,
)
from .comparators import (  # noqa: F401
    ComparatorRegistry,
    default_registry,
    basic,
    datetime_compare,
    text,
    text_case_sensitive,
    alphanumeric,
    fixed_order,
    nested_field,
    use_host_collation,
)
from .sort_state import (  # noqa: F401
    SortEntry,
    SortState,
    UNSORTED,
    SortStateController,
    normalize_sort_state,
    toggle_sort,
    direction_of,
    sort_indicator,
)
from .row_model import Row, RowModel, build_row_model  # noqa: F401
from .table import HeaderInfo, TableModel  # noqa: F401

__all__ = [
    "TableEngineError",
    "ConfigurationError",
    "AccessorFault",
    "ComparatorFault",
    "NO_VALUE",
    "ColumnDef",
    "column",
    "resolve_value",
    "validate_columns",
    "ComparatorRegistry",
    "default_registry",
    "basic",
    "datetime_compare",
    "text",
    "text_case_sensitive",
    "alphanumeric",
    "fixed_order",
    "nested_field",
    "use_host_collation",
    "SortEntry",
    "SortState",
    "UNSORTED",
    "SortStateController",
    "normalize_sort_state",
    "toggle_sort",
    "direction_of",
    "sort_indicator",
    "Row",
    "RowModel",
    "build_row_model",
    "HeaderInfo",
    "TableModel",
]
