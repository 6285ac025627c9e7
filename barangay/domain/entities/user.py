"""Domain entity representing a user account."""

from dataclasses import dataclass
from datetime import datetime

from .role import ROLE_ADMIN, ROLE_RESIDENT, ROLE_STAFF, Role


@dataclass
class User:
    """Core attributes describing an authenticated account."""

    id: int | None
    role: Role
    name: str
    email: str | None
    password: str
    is_active: bool = True
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def is_staff(self) -> bool:
        """Return ``True`` for barangay staff members (administrators included)."""

        return self.is_admin() or self.has_role(ROLE_STAFF)

    def is_resident(self) -> bool:
        return self.has_role(ROLE_RESIDENT)
