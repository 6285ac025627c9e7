"""Use case for creating program announcements."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from barangay.domain.entities import (
    ANNOUNCEMENT_STATUS_DRAFT,
    ANNOUNCEMENT_STATUS_PUBLISHED,
    ProgramAnnouncement,
)
from barangay.infrastructure.repositories import ProgramAnnouncementRepository
from barangay.utils import now_in_app_timezone

from .validators import coerce_is_urgent, ensure_program_exists, validate_announcement_fields


def create_announcement(
    session: Session,
    *,
    program_id: int,
    title: str,
    content: str,
    status: str | None = None,
    published_at: datetime | None = None,
    expires_at: datetime | None = None,
    is_urgent: Any = False,
    target_audience: list[str] | None = None,
) -> ProgramAnnouncement:
    """Create an announcement for ``program_id``.

    Announcements created as published without a publication date are
    stamped with the current time.
    """

    status = status or ANNOUNCEMENT_STATUS_DRAFT
    validate_announcement_fields(
        title=title,
        content=content,
        status=status,
        published_at=published_at,
        expires_at=expires_at,
    )
    ensure_program_exists(session, program_id)

    if status == ANNOUNCEMENT_STATUS_PUBLISHED and published_at is None:
        published_at = now_in_app_timezone()

    announcement = ProgramAnnouncement(
        id=None,
        program_id=program_id,
        title=title.strip(),
        content=content,
        status=status,
        published_at=published_at,
        expires_at=expires_at,
        is_urgent=coerce_is_urgent(is_urgent),
        target_audience=target_audience,
    )
    return ProgramAnnouncementRepository(session).create(announcement)
