"""Routes for managing program announcements."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status
from sqlalchemy.orm import Session

from barangay.application.use_cases.activity_logs import record_activity
from barangay.application.use_cases.notifications import (
    dispatch_program_announcement_notifications,
)
from barangay.application.use_cases.program_announcements import (
    create_announcement as create_announcement_uc,
    delete_announcement as delete_announcement_uc,
    get_announcement as get_announcement_uc,
    list_announcements as list_announcements_uc,
    list_resident_announcements as list_resident_announcements_uc,
    publish_announcement as publish_announcement_uc,
    update_announcement as update_announcement_uc,
)
from barangay.domain.entities import ProgramAnnouncement, User
from barangay.infrastructure.database import get_db
from barangay.interfaces.api.dependencies import get_current_active_user, require_staff
from barangay.interfaces.api.routes_helpers import audit_values, client_metadata
from barangay.interfaces.api.schemas import (
    ActionResponse,
    ProgramAnnouncementCreate,
    ProgramAnnouncementRead,
    ProgramAnnouncementResponse,
    ProgramAnnouncementUpdate,
)

router = APIRouter(prefix="/program-announcements", tags=["program_announcements"])
logger = logging.getLogger(__name__)

MODEL_TYPE = "ProgramAnnouncement"


def _to_read_model(announcement: ProgramAnnouncement) -> ProgramAnnouncementRead:
    return ProgramAnnouncementRead.model_validate(announcement)


def _log_activity(
    db: Session,
    request: Request,
    user: User,
    action: str,
    announcement: ProgramAnnouncement,
    *,
    old_values: dict | None = None,
    new_values: dict | None = None,
) -> None:
    record_activity(
        db,
        user_id=user.id,
        action=action,
        model_type=MODEL_TYPE,
        model_id=announcement.id,
        description=f"{action.capitalize()} program announcement '{announcement.title}'",
        old_values=old_values,
        new_values=new_values,
        **client_metadata(request),
    )


def _schedule_fan_out(background_tasks: BackgroundTasks, announcement: ProgramAnnouncement) -> None:
    logger.info("Scheduling notifications for program announcement %s", announcement.id)
    background_tasks.add_task(dispatch_program_announcement_notifications, announcement.id)


@router.get("/", response_model=list[ProgramAnnouncementRead])
def list_announcements(
    program_id: int | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    published_only: bool = False,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> list[ProgramAnnouncementRead]:
    """Return announcements, optionally filtered by program and status."""

    announcements = list_announcements_uc(
        db, program_id=program_id, status=status_filter, published_only=published_only
    )
    return [_to_read_model(announcement) for announcement in announcements]


@router.get("/residents", response_model=list[ProgramAnnouncementRead])
def list_resident_announcements(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
) -> list[ProgramAnnouncementRead]:
    """Return the announcements currently visible to residents."""

    return [_to_read_model(item) for item in list_resident_announcements_uc(db)]


@router.post(
    "/",
    response_model=ProgramAnnouncementResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_announcement(
    payload: ProgramAnnouncementCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> ProgramAnnouncementResponse:
    """Create an announcement; published ones notify every resident after the response."""

    announcement = create_announcement_uc(db, **payload.model_dump())
    _log_activity(
        db,
        request,
        current_user,
        "created",
        announcement,
        new_values=audit_values(announcement),
    )

    if announcement.is_published:
        _schedule_fan_out(background_tasks, announcement)
        message = (
            "Announcement created and published successfully! "
            "Notifications are being sent in the background."
        )
    else:
        message = "Announcement created successfully!"
    return ProgramAnnouncementResponse(message=message, data=_to_read_model(announcement))


@router.get("/{announcement_id}", response_model=ProgramAnnouncementRead)
def read_announcement(
    announcement_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> ProgramAnnouncementRead:
    return _to_read_model(get_announcement_uc(db, announcement_id))


@router.put("/{announcement_id}", response_model=ProgramAnnouncementResponse)
def update_announcement(
    announcement_id: int,
    payload: ProgramAnnouncementUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> ProgramAnnouncementResponse:
    """Update the fields present in the request body."""

    previous, announcement = update_announcement_uc(
        db,
        announcement_id=announcement_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    _log_activity(
        db,
        request,
        current_user,
        "updated",
        announcement,
        old_values=audit_values(previous),
        new_values=audit_values(announcement),
    )
    return ProgramAnnouncementResponse(
        message="Announcement updated successfully",
        data=_to_read_model(announcement),
    )


@router.delete("/{announcement_id}", response_model=ActionResponse)
def delete_announcement(
    announcement_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> ActionResponse:
    announcement = delete_announcement_uc(db, announcement_id)
    _log_activity(
        db,
        request,
        current_user,
        "deleted",
        announcement,
        old_values=audit_values(announcement),
    )
    return ActionResponse(message="Announcement deleted successfully")


@router.post("/{announcement_id}/publish", response_model=ProgramAnnouncementResponse)
def publish_announcement(
    announcement_id: int,
    request: Request,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> ProgramAnnouncementResponse:
    """Publish the announcement now and notify every resident after the response."""

    announcement = publish_announcement_uc(db, announcement_id)
    _log_activity(db, request, current_user, "published", announcement)
    _schedule_fan_out(background_tasks, announcement)
    return ProgramAnnouncementResponse(
        message="Announcement published successfully",
        data=_to_read_model(announcement),
    )


__all__ = ["router"]
