"""Use case for updating program announcements."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from barangay.domain.entities import ProgramAnnouncement
from barangay.domain.exceptions import ProgramAnnouncementNotFoundError
from barangay.infrastructure.repositories import ProgramAnnouncementRepository

from .validators import coerce_is_urgent, validate_announcement_fields

UPDATABLE_FIELDS = (
    "title",
    "content",
    "status",
    "published_at",
    "expires_at",
    "is_urgent",
    "target_audience",
)


def update_announcement(
    session: Session, *, announcement_id: int, changes: dict[str, Any]
) -> tuple[ProgramAnnouncement, ProgramAnnouncement]:
    """Apply ``changes`` and return the previous and updated announcement.

    Only keys present in ``changes`` are modified; ``None`` clears the
    nullable dates.
    """

    repository = ProgramAnnouncementRepository(session)
    current = repository.get(announcement_id)
    if current is None:
        raise ProgramAnnouncementNotFoundError(announcement_id)

    updates = {key: changes[key] for key in UPDATABLE_FIELDS if key in changes}
    if "is_urgent" in updates:
        updates["is_urgent"] = coerce_is_urgent(updates["is_urgent"])

    candidate = replace(current, **updates)
    validate_announcement_fields(
        title=updates.get("title"),
        content=updates.get("content"),
        status=updates.get("status"),
        published_at=candidate.published_at,
        expires_at=candidate.expires_at if "expires_at" in updates else None,
    )
    return current, repository.update(candidate)
