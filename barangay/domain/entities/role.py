"""Domain entity representing a user role."""

from dataclasses import dataclass

ROLE_ADMIN = "admin"
ROLE_STAFF = "staff"
ROLE_RESIDENT = "resident"


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "ROLE_ADMIN", "ROLE_STAFF", "ROLE_RESIDENT"]
