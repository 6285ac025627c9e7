"""Use cases for reading program announcements."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from barangay.domain.entities import ProgramAnnouncement
from barangay.domain.exceptions import ProgramAnnouncementNotFoundError
from barangay.infrastructure.repositories import ProgramAnnouncementRepository


def list_announcements(
    session: Session,
    *,
    program_id: int | None = None,
    status: str | None = None,
    published_only: bool = False,
) -> Sequence[ProgramAnnouncement]:
    return ProgramAnnouncementRepository(session).list(
        program_id=program_id, status=status, published_only=published_only
    )


def list_resident_announcements(session: Session) -> Sequence[ProgramAnnouncement]:
    """Return published, unexpired announcements with urgent ones first."""

    return ProgramAnnouncementRepository(session).list_for_residents()


def get_announcement(session: Session, announcement_id: int) -> ProgramAnnouncement:
    announcement = ProgramAnnouncementRepository(session).get(announcement_id)
    if announcement is None:
        raise ProgramAnnouncementNotFoundError(announcement_id)
    return announcement
