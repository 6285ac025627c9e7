"""Helpers that create notifications for residents."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barangay.config import get_settings
from barangay.domain.entities import (
    NotificationSource,
    ProgramAnnouncement,
    ResidentNotification,
    UserNotification,
)
from barangay.domain.exceptions import ProgramNotFoundError, ResidentNotFoundError
from barangay.infrastructure.database import SessionLocal
from barangay.infrastructure.email import send_program_announcement_email
from barangay.infrastructure.repositories import (
    ProgramAnnouncementRepository,
    ProgramRepository,
    ResidentNotificationRepository,
    ResidentRepository,
    UserNotificationRepository,
    UserRepository,
)
from barangay.utils import now_in_app_timezone

from .redirects import resolve_redirect

logger = logging.getLogger(__name__)

PROGRAM_ANNOUNCEMENT_NOTIFICATION_TYPE = "program_announcement.created"


def program_announcement_payload(announcement: ProgramAnnouncement) -> dict[str, Any]:
    program = announcement.program
    return {
        "type": "program_announcement",
        "program_announcement_id": announcement.id,
        "program_id": announcement.program_id,
        "program_name": program.name if program is not None else None,
        "announcement_title": announcement.title,
        "is_urgent": announcement.is_urgent,
    }


def notify_program_announcement_published(
    session: Session, *, announcement: ProgramAnnouncement
) -> int:
    """Notify every resident account about ``announcement``.

    Each recipient gets a framework notification and, when SendGrid is
    configured, an email. Failures for one recipient are logged and skipped.
    Returns the number of notifications stored.
    """

    recipients = UserRepository(session).list_notifiable_residents()
    repository = UserNotificationRepository(session)
    payload = program_announcement_payload(announcement)
    link = get_settings().frontend_url.rstrip("/") + (
        resolve_redirect(payload, NotificationSource.FRAMEWORK) or ""
    )

    delivered = 0
    for user in recipients:
        try:
            repository.create(
                UserNotification(
                    id=None,
                    user_id=user.id,
                    type=PROGRAM_ANNOUNCEMENT_NOTIFICATION_TYPE,
                    data=dict(payload),
                    created_at=now_in_app_timezone(),
                )
            )
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning(
                "Failed to store program announcement notification for user %s: %s",
                user.id,
                exc,
            )
            continue
        delivered += 1

        if user.email:
            send_program_announcement_email(
                user.email,
                announcement_title=announcement.title,
                announcement_content=announcement.content,
                program_name=payload["program_name"],
                link=link,
            )

    logger.info(
        "Program announcement %s notifications sent to %s of %s residents",
        announcement.id,
        delivered,
        len(recipients),
    )
    return delivered


def dispatch_program_announcement_notifications(announcement_id: int) -> None:
    """Background entry point: fan out ``announcement_id`` with its own session."""

    session = SessionLocal()
    try:
        announcement = ProgramAnnouncementRepository(session).get(announcement_id)
        if announcement is None:
            logger.warning(
                "Program announcement %s disappeared before notifications were sent",
                announcement_id,
            )
            return
        notify_program_announcement_published(session, announcement=announcement)
    except Exception:
        logger.exception(
            "Failed to send notifications for program announcement %s", announcement_id
        )
    finally:
        session.close()


def send_resident_notification(
    session: Session,
    *,
    resident_id: int,
    message: str,
    title: str | None = None,
    notification_type: str | None = None,
    program_id: int | None = None,
    data: dict[str, Any] | None = None,
) -> ResidentNotification:
    """Store a custom notification addressed to one resident."""

    if ResidentRepository(session).get(resident_id) is None:
        raise ResidentNotFoundError(resident_id)
    if program_id is not None and ProgramRepository(session).get(program_id) is None:
        raise ProgramNotFoundError(program_id)

    notification = ResidentNotification(
        id=None,
        resident_id=resident_id,
        program_id=program_id,
        type=notification_type,
        title=title,
        message=message,
        data=data or {},
        created_at=now_in_app_timezone(),
    )
    return ResidentNotificationRepository(session).create(notification)


__all__ = [
    "PROGRAM_ANNOUNCEMENT_NOTIFICATION_TYPE",
    "dispatch_program_announcement_notifications",
    "notify_program_announcement_published",
    "program_announcement_payload",
    "send_resident_notification",
]
