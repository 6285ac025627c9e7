"""Domain entity representing a barangay staff member."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Staff:
    """Staff record holding the module permissions granted to a user."""

    id: int | None
    user_id: int
    module_permissions: dict[str, Any] | list[str] | None = field(default=None)


__all__ = ["Staff"]
