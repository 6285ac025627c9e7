"""Domain entity representing an announcement attached to a program."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .program import Program

ANNOUNCEMENT_STATUS_DRAFT = "draft"
ANNOUNCEMENT_STATUS_PUBLISHED = "published"
ANNOUNCEMENT_STATUS_ARCHIVED = "archived"

ANNOUNCEMENT_STATUSES = (
    ANNOUNCEMENT_STATUS_DRAFT,
    ANNOUNCEMENT_STATUS_PUBLISHED,
    ANNOUNCEMENT_STATUS_ARCHIVED,
)


@dataclass
class ProgramAnnouncement:
    """Information published to residents about a program."""

    id: int | None
    program_id: int
    title: str
    content: str
    status: str = ANNOUNCEMENT_STATUS_DRAFT
    published_at: datetime | None = None
    expires_at: datetime | None = None
    is_urgent: bool = False
    target_audience: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    program: Program | None = field(default=None, compare=False)

    @property
    def is_published(self) -> bool:
        return self.status == ANNOUNCEMENT_STATUS_PUBLISHED


__all__ = [
    "ANNOUNCEMENT_STATUS_DRAFT",
    "ANNOUNCEMENT_STATUS_PUBLISHED",
    "ANNOUNCEMENT_STATUS_ARCHIVED",
    "ANNOUNCEMENT_STATUSES",
    "ProgramAnnouncement",
]
