"""Demo dataset and column configuration for the user table.

Only configuration lives here: the records, which accessor each column uses,
how it is ordered and how a cell value is turned into display text. All
ordering work happens in ``table_engine``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List

from table_engine import NO_VALUE, ColumnDef, fixed_order, nested_field

from .models import Address, FullName, UserEntry

__all__ = [
    "STATUS_ORDER",
    "default_users",
    "user_columns",
    "format_cell",
    "user_row_id",
]

STATUS_ORDER = ("Active", "Pending", "Inactive")


def _utc(raw: str) -> datetime:
    return datetime.fromisoformat(raw).replace(tzinfo=timezone.utc)


def default_users() -> List[UserEntry]:
    return [
        UserEntry(
            id=1,
            full_name=FullName("Tanner", "Linsley"),
            address=Address("94107", "123 Main St", "San Francisco", "CA"),
            age=30,
            last_login=_utc("2024-03-15T10:30:00"),
            status="Active",
            is_admin=True,
            progress=75,
        ),
        UserEntry(
            id=2,
            full_name=FullName("Jane", "Doe"),
            address=Address("78701", "456 Oak Ave", "Austin", "TX"),
            age=25,
            last_login=_utc("2024-05-20T14:00:00"),
            status="Pending",
            is_admin=False,
            progress=45,
        ),
        UserEntry(
            id=3,
            full_name=FullName("John", "Smith"),
            address=Address("10001", "789 Pine Ln", "New York", "NY"),
            age=42,
            last_login=_utc("2023-11-01T08:15:00"),
            status="Inactive",
            is_admin=False,
            progress=90,
        ),
        UserEntry(
            id=4,
            full_name=FullName("Kevin", "Vandy"),
            address=Address("60601", "101 Maple Dr", "Chicago", "IL"),
            age=35,
            last_login=_utc("2024-06-01T22:00:00"),
            status="Active",
            is_admin=True,
            progress=20,
        ),
        UserEntry(
            id=5,
            full_name=FullName("Emily", "White"),
            address=Address("98101", "212 Birch Rd", "Seattle", "WA"),
            age=28,
            last_login=_utc("2024-05-28T18:45:00"),
            status="Pending",
            is_admin=False,
            progress=100,
        ),
    ]


def user_row_id(user: UserEntry, index: int) -> str:
    return str(user.id)


def _fmt_date(value: datetime) -> str:
    return value.strftime("%m/%d/%Y")


def _fmt_admin(value: bool) -> str:
    return "●" if value else "○"


def _fmt_progress(value: int) -> str:
    return f"{value}%"


def _fmt_address(value: Address) -> str:
    return value.zip_code


def user_columns() -> List[ColumnDef]:
    return [
        ColumnDef(
            lambda u: f"{u.full_name.first_name} {u.full_name.last_name}",
            id="full_name",
            header="Full Name",
            comparator="basic",
        ),
        ColumnDef("age", header="Age", meta={"is_numeric": True}),
        ColumnDef(
            "last_login",
            header="Last Login",
            comparator="datetime",
            meta={"cell": _fmt_date},
        ),
        ColumnDef(
            "status",
            header="Status",
            comparator=fixed_order(STATUS_ORDER),
            meta={"badge": {"Active": "green", "Pending": "yellow", "Inactive": "red"}},
        ),
        ColumnDef("is_admin", header="Admin", meta={"cell": _fmt_admin, "align": "center"}),
        ColumnDef(
            "progress",
            header="Profile Progress",
            meta={"is_numeric": True, "cell": _fmt_progress},
        ),
        ColumnDef(
            lambda u: u.address,
            id="zip_code",
            header="ZipCode",
            comparator=nested_field("zip_code"),
            meta={"cell": _fmt_address},
        ),
    ]


def format_cell(col: ColumnDef, value: Any) -> str:
    """Display text for ``value``; presentation only, never used for ordering."""
    if value is NO_VALUE:
        return ""
    fmt = col.meta.get("cell") if col.meta else None
    return fmt(value) if fmt is not None else str(value)
