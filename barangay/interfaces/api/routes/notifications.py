"""Endpoints exposing the unified notification feed of residents."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from barangay.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
    send_resident_notification,
)
from barangay.domain.entities import NotificationEntry, NotificationKey, NotificationSource, User
from barangay.infrastructure.database import get_db
from barangay.interfaces.api.dependencies import get_current_active_user, require_staff
from barangay.interfaces.api.schemas import (
    ActionResponse,
    BulkActionResponse,
    CustomNotificationCreate,
    CustomNotificationRead,
    NotificationEntryRead,
    NotificationFeedRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _entry_to_schema(entry: NotificationEntry) -> NotificationEntryRead:
    return NotificationEntryRead(
        id=entry.id,
        key=str(entry.key),
        source=entry.source,
        category=entry.category,
        title=entry.title,
        message=entry.message,
        data=entry.data,
        is_read=entry.is_read,
        read_at=entry.read_at,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
        redirect_path=entry.redirect_path,
    )


@router.get("/", response_model=NotificationFeedRead)
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationFeedRead:
    """Return the merged notifications of the authenticated resident, newest first."""

    feed = list_notifications_uc(db, user_id=current_user.id)
    return NotificationFeedRead(
        notifications=[_entry_to_schema(entry) for entry in feed.entries],
        unread_count=feed.unread_count,
    )


# Declared before the ``{notification_id}`` routes so it is not captured as an id.
@router.api_route("/read-all", methods=["PATCH", "POST"], response_model=BulkActionResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> BulkActionResponse:
    """Mark every notification of the authenticated resident as read."""

    updated = mark_all_notifications_read(db, user_id=current_user.id)
    return BulkActionResponse(message="All notifications marked as read", updated=updated)


@router.api_route(
    "/{notification_id}/read", methods=["PATCH", "POST"], response_model=ActionResponse
)
def mark_as_read(
    notification_id: str,
    source: NotificationSource | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ActionResponse:
    """Mark one notification as read.

    ``notification_id`` is either a bare id, looked up in the framework store
    first, or a ``<source>:<id>`` key. ``source`` restricts the lookup.
    """

    mark_notification_read(
        db,
        user_id=current_user.id,
        notification_id=notification_id,
        source=source,
    )
    return ActionResponse(message="Notification marked as read")


@router.post(
    "/residents/{resident_id}",
    response_model=CustomNotificationRead,
    status_code=status.HTTP_201_CREATED,
)
def notify_resident(
    resident_id: int,
    payload: CustomNotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> CustomNotificationRead:
    """Send a custom notification to one resident."""

    notification = send_resident_notification(
        db,
        resident_id=resident_id,
        message=payload.message,
        title=payload.title,
        notification_type=payload.type,
        program_id=payload.program_id,
        data=payload.data,
    )
    return CustomNotificationRead(
        id=notification.id,
        key=str(NotificationKey(NotificationSource.CUSTOM, str(notification.id))),
        resident_id=notification.resident_id,
        title=notification.title,
        message=notification.message,
        type=notification.type,
        program_id=notification.program_id,
        created_at=notification.created_at,
    )


__all__ = ["router"]
