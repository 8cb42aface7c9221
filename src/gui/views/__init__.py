"""GUI view layer.

Exports:
 - UserTableView
"""

from .table_view import UserTableView  # noqa: F401
