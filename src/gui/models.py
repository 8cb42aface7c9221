"""GUI-facing lightweight models for the demo user table."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FullName:
    first_name: str
    last_name: str

    @property
    def display(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Address:
    zip_code: str
    street: str
    city: str
    state: str


@dataclass(frozen=True)
class UserEntry:
    """One user row of the demo table.

    ``status`` is one of Active / Pending / Inactive; ``progress`` is a
    profile completion percentage (0-100).
    """

    id: int
    full_name: FullName
    address: Address
    age: int | None
    last_login: datetime | None
    status: str
    is_admin: bool
    progress: int


__all__ = ["FullName", "Address", "UserEntry"]
