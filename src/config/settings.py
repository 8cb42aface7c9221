"""Global configuration and constants for the table engine."""

from __future__ import annotations

import os
from typing import Final


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Records without a value sort after every present value in ascending order
NO_VALUE_LAST: Final = _env_flag("TABLE_ENGINE_NO_VALUE_LAST", True)
# 1 keeps the single active sort model; raise to allow shift-click multi sort
MAX_SORT_COLUMNS: Final = max(1, int(os.environ.get("TABLE_ENGINE_MAX_SORT_COLUMNS", "1")))
# A raising accessor degrades to NO_VALUE instead of aborting the row model
ACCESSOR_FAULTS_AS_NO_VALUE: Final = _env_flag("TABLE_ENGINE_ACCESSOR_FAULTS_AS_NO_VALUE", True)
LOG_LEVEL: Final = os.environ.get("TABLE_ENGINE_LOG_LEVEL", "WARNING").upper()
