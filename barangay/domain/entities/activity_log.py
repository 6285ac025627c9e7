"""Domain entity representing an entry of the activity log."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ActivityLog:
    """Captured information about an action performed in the system."""

    id: int | None
    user_id: int | None
    action: str
    model_type: str | None = None
    model_id: int | None = None
    description: str | None = None
    old_values: dict[str, Any] = field(default_factory=dict)
    new_values: dict[str, Any] = field(default_factory=dict)
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime | None = None
    user_name: str | None = field(default=None, compare=False)


__all__ = ["ActivityLog"]
