"""Use cases exposing the unified notification feed of a resident."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barangay.config import get_settings
from barangay.domain.entities import (
    NotificationEntry,
    NotificationFeed,
    NotificationKey,
    NotificationSource,
    Resident,
    ResidentNotification,
    UserNotification,
)
from barangay.domain.entities.notification_payload import parse_payload
from barangay.domain.exceptions import (
    NotificationNotFoundError,
    ResidentProfileNotFoundError,
)
from barangay.infrastructure.repositories import (
    ResidentNotificationRepository,
    ResidentRepository,
    UserNotificationRepository,
)

from .messages import build_message, notification_title
from .redirects import resolve_redirect

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _require_resident(session: Session, user_id: int) -> Resident:
    resident = ResidentRepository(session).get_by_user_id(user_id)
    if resident is None:
        raise ResidentProfileNotFoundError(user_id)
    return resident


def custom_notification_payload(notification: ResidentNotification) -> dict[str, Any]:
    """Return the stored payload enriched with the program and row columns."""

    data = dict(notification.data or {})
    program = notification.program
    data["program_id"] = (
        notification.program_id
        if notification.program_id is not None
        else data.get("program_id")
    )
    data["program_name"] = program.name if program is not None else data.get("program_name")
    data["program_type"] = program.type if program is not None else data.get("program_type")
    if notification.message is not None:
        data["message"] = notification.message
    if notification.type is not None:
        data["type"] = notification.type
    return data


def _build_entry(
    *,
    local_id: Any,
    source: NotificationSource,
    data: dict[str, Any],
    title: str | None,
    is_read: bool,
    read_at: datetime | None,
    created_at: datetime | None,
    updated_at: datetime | None,
) -> NotificationEntry:
    parsed = parse_payload(data)
    return NotificationEntry(
        id=str(local_id),
        source=source,
        category=parsed.category,
        title=title if title is not None else notification_title(parsed.category),
        message=build_message(data, created_at, parsed=parsed),
        data=data,
        is_read=is_read,
        read_at=read_at,
        created_at=created_at,
        updated_at=updated_at,
        redirect_path=resolve_redirect(data, source, parsed=parsed),
    )


def framework_entry(notification: UserNotification) -> NotificationEntry:
    return _build_entry(
        local_id=notification.id,
        source=NotificationSource.FRAMEWORK,
        data=dict(notification.data or {}),
        title=None,
        is_read=notification.is_read,
        read_at=notification.read_at,
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


def custom_entry(notification: ResidentNotification) -> NotificationEntry:
    return _build_entry(
        local_id=notification.id,
        source=NotificationSource.CUSTOM,
        data=custom_notification_payload(notification),
        title=notification.title,
        is_read=notification.is_read,
        read_at=notification.read_at,
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


def merge_entries(*streams: list[NotificationEntry]) -> NotificationFeed:
    """Concatenate ``streams`` newest first and count the unread entries."""

    combined = [entry for stream in streams for entry in stream]
    # ``sorted`` is stable: entries sharing a timestamp keep stream order.
    combined = sorted(combined, key=lambda entry: entry.created_at or _OLDEST, reverse=True)
    unread_count = sum(1 for entry in combined if not entry.is_read)
    return NotificationFeed(entries=combined, unread_count=unread_count)


def list_notifications(
    session: Session, *, user_id: int, limit: int | None = None
) -> NotificationFeed:
    """Return the merged, classified notifications for the resident of ``user_id``.

    Each store contributes at most ``limit`` (default
    ``NOTIFICATION_SOURCE_LIMIT``) of its most recent rows.
    """

    resident = _require_resident(session, user_id)
    per_source = limit or get_settings().notification_source_limit

    framework = UserNotificationRepository(session).list_for_user(user_id, limit=per_source)
    custom = ResidentNotificationRepository(session).list_for_resident(
        resident.id, limit=per_source
    )
    return merge_entries(
        [framework_entry(notification) for notification in framework],
        [custom_entry(notification) for notification in custom],
    )


def mark_notification_read(
    session: Session,
    *,
    user_id: int,
    notification_id: str,
    source: NotificationSource | None = None,
) -> NotificationKey:
    """Mark one notification as read and return the key that was updated.

    ``notification_id`` may be a composite ``"<source>:<id>"`` key. Without a
    source the framework store is searched before the resident store.
    """

    resident = _require_resident(session, user_id)

    local_id = str(notification_id)
    key = NotificationKey.parse(local_id)
    if key is not None:
        source, local_id = key.source, key.local_id

    sources = (
        (source,)
        if source is not None
        else (NotificationSource.FRAMEWORK, NotificationSource.CUSTOM)
    )
    for candidate in sources:
        if candidate is NotificationSource.FRAMEWORK:
            repository = UserNotificationRepository(session)
            if repository.get_for_user(local_id, user_id=user_id) is not None:
                repository.mark_as_read(local_id, user_id=user_id)
                return NotificationKey(source=candidate, local_id=local_id)
        else:
            try:
                custom_id = int(local_id)
            except ValueError:
                continue
            repository = ResidentNotificationRepository(session)
            if repository.get_for_resident(custom_id, resident_id=resident.id) is not None:
                repository.mark_as_read(custom_id, resident_id=resident.id)
                return NotificationKey(source=candidate, local_id=local_id)

    raise NotificationNotFoundError(str(notification_id))


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    """Mark every unread notification of both stores read in one transaction."""

    resident = _require_resident(session, user_id)
    try:
        updated = UserNotificationRepository(session).mark_all_as_read(user_id, commit=False)
        updated += ResidentNotificationRepository(session).mark_all_as_read(
            resident.id, commit=False
        )
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Rolled back mark-all-read for user %s", user_id)
        raise
    return updated


__all__ = [
    "custom_entry",
    "custom_notification_payload",
    "framework_entry",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "merge_entries",
]
