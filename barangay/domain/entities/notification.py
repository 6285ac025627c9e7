"""Domain entities describing notifications delivered to residents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .program import Program


class NotificationSource(str, Enum):
    """Store a notification was read from."""

    FRAMEWORK = "framework_notification"
    CUSTOM = "custom_notification"


class NotificationCategory(str, Enum):
    """Closed set of semantic categories assigned to notifications."""

    DOCUMENT_REQUEST = "document_request"
    ASSET_REQUEST = "asset_request"
    ASSET_PAYMENT = "asset_payment"
    BLOTTER_REQUEST = "blotter_request"
    BLOTTER_APPOINTMENT = "blotter_appointment"
    ANNOUNCEMENT = "announcement"
    PROGRAM_ANNOUNCEMENT = "program_announcement"
    PROJECT = "project"
    BENEFIT_UPDATE = "benefit_update"
    GENERIC_PROGRAM = "generic_program"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class NotificationKey:
    """Globally unique notification address made of its source and local id."""

    source: NotificationSource
    local_id: str

    @classmethod
    def parse(cls, value: str) -> "NotificationKey | None":
        """Return the key encoded as ``"<source>:<id>"`` or ``None``."""

        prefix, separator, local_id = value.partition(":")
        if not separator or not local_id:
            return None
        try:
            source = NotificationSource(prefix)
        except ValueError:
            return None
        return cls(source=source, local_id=local_id)

    def __str__(self) -> str:
        return f"{self.source.value}:{self.local_id}"


@dataclass
class UserNotification:
    """Framework-native notification stored against a user account."""

    id: str | None
    user_id: int
    type: str
    data: dict[str, Any] = field(default_factory=dict)
    read_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass
class ResidentNotification:
    """Application-specific notification stored against a resident profile."""

    id: int | None
    resident_id: int
    type: str | None = None
    title: str | None = None
    message: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
    program_id: int | None = None
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    program: Program | None = field(default=None, compare=False)


@dataclass
class NotificationEntry:
    """Unified, display-ready representation of a notification."""

    id: str
    source: NotificationSource
    category: NotificationCategory
    title: str
    message: str
    data: dict[str, Any]
    is_read: bool
    read_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    redirect_path: str | None = None

    @property
    def key(self) -> NotificationKey:
        return NotificationKey(source=self.source, local_id=self.id)


@dataclass
class NotificationFeed:
    """Merged notification listing returned to a resident."""

    entries: list[NotificationEntry]
    unread_count: int


__all__ = [
    "NotificationSource",
    "NotificationCategory",
    "NotificationKey",
    "UserNotification",
    "ResidentNotification",
    "NotificationEntry",
    "NotificationFeed",
]
