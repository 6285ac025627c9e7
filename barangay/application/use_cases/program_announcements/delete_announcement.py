"""Use case for deleting program announcements."""

from sqlalchemy.orm import Session

from barangay.domain.entities import ProgramAnnouncement
from barangay.domain.exceptions import ProgramAnnouncementNotFoundError
from barangay.infrastructure.repositories import ProgramAnnouncementRepository


def delete_announcement(session: Session, announcement_id: int) -> ProgramAnnouncement:
    """Remove an announcement and return what was deleted."""

    repository = ProgramAnnouncementRepository(session)
    announcement = repository.get(announcement_id)
    if announcement is None or not repository.delete(announcement_id):
        raise ProgramAnnouncementNotFoundError(announcement_id)
    return announcement
