"""Use cases for recording and reporting activity log entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from barangay.domain.entities import ActivityLog, Resident
from barangay.domain.exceptions import ActivityLogNotFoundError
from barangay.infrastructure.repositories import (
    ActivityLogFilters,
    ActivityLogRepository,
    ResidentRepository,
)
from barangay.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

STATISTICS_WINDOW = timedelta(days=30)
USER_MODEL_TYPE = "User"
INACTIVITY_WINDOW = timedelta(days=365)
ENGAGEMENT_ACTIONS = ("login", "Resident.Profile.Updated", "Resident.Updated")
DEFAULT_RETENTION_DAYS = 90
ADMIN_ACTION_PREFIX = "admin."


@dataclass
class ActivityStatistics:
    """Aggregated activity figures for a date range."""

    date_from: datetime
    date_to: datetime
    total_logs: int
    login_count: int
    user_registrations: int
    admin_actions: int
    top_actions: list[tuple[str, int]] = field(default_factory=list)
    active_users: list[tuple[int, str | None, int]] = field(default_factory=list)


@dataclass
class ActivityFilterOptions:
    actions: list[str]
    model_types: list[str]
    users: list[tuple[int, str, str | None]]


@dataclass
class InactiveResident:
    """A resident whose last login or profile update is older than a year."""

    resident: Resident
    user_name: str | None
    email: str | None
    last_activity_date: datetime
    days_inactive: int


def record_activity(
    session: Session,
    *,
    user_id: int | None,
    action: str,
    model_type: str | None = None,
    model_id: int | None = None,
    description: str | None = None,
    old_values: dict[str, Any] | None = None,
    new_values: dict[str, Any] | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> ActivityLog | None:
    """Persist an activity entry.

    Storage errors are rolled back and logged; ``None`` is returned instead.
    """

    entry = ActivityLog(
        id=None,
        user_id=user_id,
        action=action,
        model_type=model_type,
        model_id=model_id,
        description=description,
        old_values=old_values or {},
        new_values=new_values or {},
        ip_address=ip_address,
        user_agent=user_agent,
        created_at=now_in_app_timezone(),
    )
    try:
        return ActivityLogRepository(session).create(entry)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to record activity %s for user %s", action, user_id)
        return None


def list_activity_logs(
    session: Session,
    filters: ActivityLogFilters,
    *,
    page: int = 1,
    per_page: int = 15,
) -> tuple[list[ActivityLog], int]:
    return ActivityLogRepository(session).list(filters, page=page, per_page=per_page)


def get_activity_log(session: Session, entry_id: int) -> ActivityLog:
    """Return the entry identified by ``entry_id`` or raise an error."""

    entry = ActivityLogRepository(session).get(entry_id)
    if entry is None:
        raise ActivityLogNotFoundError(entry_id)
    return entry


def get_activity_statistics(
    session: Session,
    *,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
) -> ActivityStatistics:
    """Summarise activity between ``date_from`` and ``date_to``.

    The range defaults to the last 30 days.
    """

    date_to = date_to or now_in_app_timezone()
    date_from = date_from or date_to - STATISTICS_WINDOW
    repository = ActivityLogRepository(session)
    window = {"date_from": date_from, "date_to": date_to}

    return ActivityStatistics(
        date_from=date_from,
        date_to=date_to,
        total_logs=repository.count(**window),
        login_count=repository.count(action="login", **window),
        user_registrations=repository.count(
            action="created", model_type=USER_MODEL_TYPE, **window
        ),
        admin_actions=repository.count(action_prefix=ADMIN_ACTION_PREFIX, **window),
        top_actions=repository.top_actions(**window),
        active_users=repository.most_active_users(**window),
    )


def get_activity_filter_options(session: Session) -> ActivityFilterOptions:
    repository = ActivityLogRepository(session)
    return ActivityFilterOptions(
        actions=repository.distinct_actions(),
        model_types=repository.distinct_model_types(),
        users=repository.distinct_users(),
    )


def find_inactive_residents(
    session: Session, *, now: datetime | None = None
) -> list[InactiveResident]:
    """Return residents without a login or profile update in the last year.

    A resident with no such activity is measured from its ``created_at``.
    The result is ordered by ``days_inactive``, longest first.
    """

    now = now or now_in_app_timezone()
    threshold = now - INACTIVITY_WINDOW
    last_activity = ActivityLogRepository(session).last_activity_by_user(ENGAGEMENT_ACTIONS)

    inactive: list[InactiveResident] = []
    for resident, user_name, email in ResidentRepository(session).list_with_accounts():
        last_seen = last_activity.get(resident.user_id) or resident.created_at or now
        if last_seen >= threshold:
            continue
        inactive.append(
            InactiveResident(
                resident=resident,
                user_name=user_name,
                email=email,
                last_activity_date=last_seen,
                days_inactive=(now - last_seen).days,
            )
        )
    inactive.sort(key=lambda entry: entry.days_inactive, reverse=True)
    return inactive


def list_inactive_residents(
    session: Session,
    *,
    page: int = 1,
    per_page: int = 20,
    now: datetime | None = None,
) -> tuple[list[InactiveResident], int]:
    inactive = find_inactive_residents(session, now=now)
    start = max(page - 1, 0) * per_page
    return inactive[start : start + per_page], len(inactive)


def flag_inactive_residents(session: Session, *, now: datetime | None = None) -> int:
    """Mark inactive residents ``for_review``; returns how many were newly flagged."""

    candidates = [
        entry.resident.id
        for entry in find_inactive_residents(session, now=now)
        if not entry.resident.for_review
    ]
    flagged = ResidentRepository(session).flag_for_review(candidates)
    logger.info("Flagged %s inactive residents for review", flagged)
    return flagged


def count_flagged_residents(session: Session) -> int:
    return ResidentRepository(session).count_for_review()


def cleanup_activity_logs(
    session: Session,
    *,
    days: int = DEFAULT_RETENTION_DAYS,
    now: datetime | None = None,
) -> int:
    """Delete entries older than ``days`` days and return how many were removed."""

    cutoff = (now or now_in_app_timezone()) - timedelta(days=days)
    deleted = ActivityLogRepository(session).delete_older_than(cutoff)
    logger.info("Deleted %s activity log entries older than %s days", deleted, days)
    return deleted


__all__ = [
    "ActivityFilterOptions",
    "ADMIN_ACTION_PREFIX",
    "ActivityStatistics",
    "DEFAULT_RETENTION_DAYS",
    "ENGAGEMENT_ACTIONS",
    "InactiveResident",
    "cleanup_activity_logs",
    "count_flagged_residents",
    "find_inactive_residents",
    "flag_inactive_residents",
    "get_activity_filter_options",
    "get_activity_log",
    "get_activity_statistics",
    "list_activity_logs",
    "list_inactive_residents",
    "record_activity",
]
