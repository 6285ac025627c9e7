"""Use case for publishing program announcements."""

from dataclasses import replace

from sqlalchemy.orm import Session

from barangay.domain.entities import ANNOUNCEMENT_STATUS_PUBLISHED, ProgramAnnouncement
from barangay.domain.exceptions import ProgramAnnouncementNotFoundError
from barangay.infrastructure.repositories import ProgramAnnouncementRepository
from barangay.utils import now_in_app_timezone


def publish_announcement(session: Session, announcement_id: int) -> ProgramAnnouncement:
    """Mark the announcement published as of now."""

    repository = ProgramAnnouncementRepository(session)
    current = repository.get(announcement_id)
    if current is None:
        raise ProgramAnnouncementNotFoundError(announcement_id)

    published = replace(
        current,
        status=ANNOUNCEMENT_STATUS_PUBLISHED,
        published_at=now_in_app_timezone(),
    )
    return repository.update(published)
