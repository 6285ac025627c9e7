"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from barangay.domain.entities import NotificationCategory, NotificationSource


class NotificationEntryRead(BaseModel):
    """Representation of a unified notification delivered to the client."""

    id: str = Field(..., description="Identifier unique within its source")
    key: str = Field(..., description="Globally unique '<source>:<id>' key")
    source: NotificationSource
    category: NotificationCategory
    title: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    redirect_path: str | None = None


class NotificationFeedRead(BaseModel):
    notifications: list[NotificationEntryRead]
    unread_count: int


class CustomNotificationCreate(BaseModel):
    """Payload used by staff to notify a single resident."""

    message: str = Field(..., min_length=1)
    title: str | None = Field(default=None, max_length=255)
    type: str | None = Field(default=None, max_length=100)
    program_id: int | None = Field(default=None, ge=1)
    data: dict[str, Any] = Field(default_factory=dict)


class CustomNotificationRead(BaseModel):
    id: int
    key: str
    resident_id: int
    title: str | None
    message: str | None
    type: str | None
    program_id: int | None
    created_at: datetime | None


__all__ = [
    "CustomNotificationCreate",
    "CustomNotificationRead",
    "NotificationEntryRead",
    "NotificationFeedRead",
]
