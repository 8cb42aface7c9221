"""Demo GUI layer for the headless table engine.

Curated, intentionally small surface: the demo dataset/column configuration
and the launcher. Qt widgets live under ``gui.views`` and are imported
lazily so headless callers (CLI, tests) never pull in PyQt6.
"""

from __future__ import annotations

from .models import FullName, Address, UserEntry  # noqa: F401
from .demo_data import STATUS_ORDER, default_users, user_columns, format_cell, user_row_id  # noqa: F401

__all__ = [
    "FullName",
    "Address",
    "UserEntry",
    "STATUS_ORDER",
    "default_users",
    "user_columns",
    "format_cell",
    "user_row_id",
]
