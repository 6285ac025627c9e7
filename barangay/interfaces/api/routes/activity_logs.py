"""Routes for inspecting and maintaining activity log entries."""

import math
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from barangay.application.use_cases.activity_logs import (
    ADMIN_ACTION_PREFIX,
    DEFAULT_RETENTION_DAYS,
    InactiveResident,
    cleanup_activity_logs as cleanup_activity_logs_uc,
    count_flagged_residents,
    flag_inactive_residents as flag_inactive_residents_uc,
    get_activity_filter_options,
    get_activity_log as get_activity_log_uc,
    get_activity_statistics,
    list_activity_logs as list_activity_logs_uc,
    list_inactive_residents as list_inactive_residents_uc,
    record_activity,
)
from barangay.domain.entities import User
from barangay.infrastructure.database import get_db
from barangay.infrastructure.repositories import ActivityLogFilters
from barangay.interfaces.api.dependencies import require_staff
from barangay.interfaces.api.routes_helpers import client_metadata
from barangay.interfaces.api.schemas import (
    ActionCount,
    ActiveUser,
    ActivityFilterOptionsRead,
    ActivityLogCleanupResponse,
    ActivityLogPage,
    ActivityLogRead,
    ActivityStatisticsRead,
    ActivityUserOption,
    FlagInactiveResidentsResponse,
    FlaggedResidentsCount,
    InactiveResidentPage,
    InactiveResidentRead,
)

router = APIRouter(prefix="/activity-logs", tags=["activity_logs"])


def _log_admin_action(
    db: Session, request: Request, user: User, action: str, description: str
) -> None:
    record_activity(
        db,
        user_id=user.id,
        action=f"{ADMIN_ACTION_PREFIX}{action}",
        description=description,
        **client_metadata(request),
    )


def _to_inactive_read(entry: InactiveResident) -> InactiveResidentRead:
    resident = entry.resident
    return InactiveResidentRead(
        id=resident.id,
        user_id=resident.user_id,
        first_name=resident.first_name,
        last_name=resident.last_name,
        full_name=resident.full_name,
        email=entry.email,
        user_name=entry.user_name,
        last_activity_date=entry.last_activity_date,
        days_inactive=entry.days_inactive,
        for_review=resident.for_review,
    )


@router.get("/", response_model=ActivityLogPage)
def list_activity_logs(
    user_id: int | None = None,
    action: str | None = None,
    model_type: str | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    search: str | None = None,
    user_type: str | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> ActivityLogPage:
    """Return one page of activity entries, newest first."""

    filters = ActivityLogFilters(
        user_id=user_id,
        action=action,
        model_type=model_type,
        date_from=date_from,
        date_to=date_to,
        search=search,
        user_type=user_type,
    )
    entries, total = list_activity_logs_uc(db, filters, page=page, per_page=per_page)
    return ActivityLogPage(
        data=[ActivityLogRead.model_validate(entry) for entry in entries],
        total=total,
        page=page,
        per_page=per_page,
        last_page=max(math.ceil(total / per_page), 1),
    )


@router.get("/statistics", response_model=ActivityStatisticsRead)
def read_statistics(
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> ActivityStatisticsRead:
    """Return activity figures for the range, by default the last 30 days."""

    stats = get_activity_statistics(db, date_from=date_from, date_to=date_to)
    return ActivityStatisticsRead(
        date_from=stats.date_from,
        date_to=stats.date_to,
        total_logs=stats.total_logs,
        login_count=stats.login_count,
        user_registrations=stats.user_registrations,
        admin_actions=stats.admin_actions,
        top_actions=[ActionCount(action=a, count=c) for a, c in stats.top_actions],
        active_users=[
            ActiveUser(user_id=user_id, name=name, activity_count=count)
            for user_id, name, count in stats.active_users
        ],
    )


@router.get("/filters", response_model=ActivityFilterOptionsRead)
def read_filter_options(
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> ActivityFilterOptionsRead:
    options = get_activity_filter_options(db)
    return ActivityFilterOptionsRead(
        actions=options.actions,
        model_types=options.model_types,
        users=[
            ActivityUserOption(id=user_id, name=name, email=email)
            for user_id, name, email in options.users
        ],
    )


@router.get("/inactive-residents", response_model=InactiveResidentPage)
def list_inactive_residents(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> InactiveResidentPage:
    """Return residents idle for over a year, longest inactive first."""

    entries, total = list_inactive_residents_uc(db, page=page, per_page=per_page)
    return InactiveResidentPage(
        inactive_residents=[_to_inactive_read(entry) for entry in entries],
        total=total,
        page=page,
        per_page=per_page,
        last_page=max(math.ceil(total / per_page), 1),
    )


@router.post("/flag-inactive-residents", response_model=FlagInactiveResidentsResponse)
def flag_inactive_residents(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> FlagInactiveResidentsResponse:
    flagged = flag_inactive_residents_uc(db)
    _log_admin_action(
        db,
        request,
        current_user,
        "flag_inactive_residents",
        f"Flagged {flagged} inactive residents for review",
    )
    return FlagInactiveResidentsResponse(
        message=f"Successfully flagged {flagged} residents for review",
        flagged_count=flagged,
    )


@router.get("/flagged-residents-count", response_model=FlaggedResidentsCount)
def read_flagged_residents_count(
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> FlaggedResidentsCount:
    return FlaggedResidentsCount(flagged_count=count_flagged_residents(db))


@router.delete("/cleanup", response_model=ActivityLogCleanupResponse)
def cleanup_activity_logs(
    request: Request,
    days: int = Query(DEFAULT_RETENTION_DAYS, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
) -> ActivityLogCleanupResponse:
    """Delete entries older than ``days`` days (90 by default)."""

    deleted = cleanup_activity_logs_uc(db, days=days)
    _log_admin_action(
        db,
        request,
        current_user,
        "cleanup_activity_logs",
        f"Deleted {deleted} activity logs older than {days} days",
    )
    return ActivityLogCleanupResponse(
        message=f"Successfully deleted {deleted} old activity logs",
        deleted_count=deleted,
    )


@router.get("/{entry_id}", response_model=ActivityLogRead)
def read_activity_log(
    entry_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_staff),
) -> ActivityLogRead:
    """Return the activity entry identified by ``entry_id``."""

    return ActivityLogRead.model_validate(get_activity_log_uc(db, entry_id))


__all__ = ["router"]
