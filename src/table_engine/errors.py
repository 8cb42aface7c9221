"""Exception hierarchy for the table engine."""

from __future__ import annotations

__all__ = [
    "TableEngineError",
    "ConfigurationError",
    "AccessorFault",
    "ComparatorFault",
]


class TableEngineError(Exception):
    """Base class for all table engine errors."""


class ConfigurationError(TableEngineError, ValueError):
    """Raised when columns or sort state are inconsistent (unknown or duplicate ids)."""


class AccessorFault(TableEngineError):
    """An accessor raised while resolving a cell value.

    Under the default policy the fault is recorded on the row model and the
    cell resolves to ``NO_VALUE``; it is only raised when
    ``settings.ACCESSOR_FAULTS_AS_NO_VALUE`` is disabled.
    """

    def __init__(self, column_id: str, row_index: int, cause: BaseException):
        super().__init__(
            f"Accessor for column '{column_id}' failed on row {row_index}: "
            f"{type(cause).__name__}: {cause}"
        )
        self.column_id = column_id
        self.row_index = row_index
        self.cause = cause


class ComparatorFault(TableEngineError):
    """A comparator raised while ordering rows; never recovered in place."""

    def __init__(self, column_id: str, cause: BaseException):
        super().__init__(
            f"Comparator for column '{column_id}' failed: {type(cause).__name__}: {cause}"
        )
        self.column_id = column_id
        self.cause = cause
