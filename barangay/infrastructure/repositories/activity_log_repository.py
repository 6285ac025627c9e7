"""Persistence layer for activity log records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from barangay.domain.entities import ActivityLog
from barangay.infrastructure.models import ActivityLogModel, RoleModel, UserModel
from barangay.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


@dataclass
class ActivityLogFilters:
    """Criteria accepted when listing or counting activity log entries."""

    user_id: int | None = None
    action: str | None = None
    model_type: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    search: str | None = None
    user_type: str | None = None


class ActivityLogRepository:
    """Provide create, lookup and reporting helpers for :class:`ActivityLog`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: ActivityLog) -> ActivityLog:
        model = ActivityLogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, entry_id: int) -> ActivityLog | None:
        model = self.session.get(ActivityLogModel, entry_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list(
        self,
        filters: ActivityLogFilters,
        *,
        page: int = 1,
        per_page: int = 15,
    ) -> tuple[list[ActivityLog], int]:
        """Return one page of entries matching ``filters`` and the total match count."""

        query = self._filtered_query(filters)
        total = query.count()
        models = (
            query.order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
            .offset(max(page - 1, 0) * per_page)
            .limit(per_page)
            .all()
        )
        return [self._to_entity(model) for model in models], total

    def count_by_action(self, filters: ActivityLogFilters) -> dict[str, int]:
        query = self._filtered_query(filters).with_entities(
            ActivityLogModel.action, func.count(ActivityLogModel.id)
        )
        rows = query.group_by(ActivityLogModel.action).all()
        return {action: count for action, count in rows}

    def count(
        self,
        *,
        date_from: datetime,
        date_to: datetime,
        action: str | None = None,
        action_prefix: str | None = None,
        model_type: str | None = None,
    ) -> int:
        query = self._between(self.session.query(ActivityLogModel), date_from, date_to)
        if action is not None:
            query = query.filter(ActivityLogModel.action == action)
        if action_prefix is not None:
            query = query.filter(ActivityLogModel.action.like(f"{action_prefix}%"))
        if model_type is not None:
            query = query.filter(ActivityLogModel.model_type == model_type)
        return query.count()

    def top_actions(
        self, *, date_from: datetime, date_to: datetime, limit: int = 10
    ) -> list[tuple[str, int]]:
        count_column = func.count(ActivityLogModel.id).label("count")
        query = self._between(
            self.session.query(ActivityLogModel.action, count_column), date_from, date_to
        )
        rows = (
            query.group_by(ActivityLogModel.action)
            .order_by(count_column.desc())
            .limit(limit)
            .all()
        )
        return [(action, count) for action, count in rows]

    def most_active_users(
        self, *, date_from: datetime, date_to: datetime, limit: int = 10
    ) -> list[tuple[int, str | None, int]]:
        count_column = func.count(ActivityLogModel.id).label("activity_count")
        query = (
            self.session.query(ActivityLogModel.user_id, UserModel.name, count_column)
            .join(UserModel, ActivityLogModel.user_id == UserModel.id)
            .filter(ActivityLogModel.user_id.isnot(None))
        )
        rows = (
            self._between(query, date_from, date_to)
            .group_by(ActivityLogModel.user_id, UserModel.name)
            .order_by(count_column.desc())
            .limit(limit)
            .all()
        )
        return [(user_id, name, count) for user_id, name, count in rows]

    def distinct_actions(self) -> list[str]:
        rows = self.session.query(ActivityLogModel.action).distinct().all()
        return sorted(action for (action,) in rows if action)

    def distinct_model_types(self) -> list[str]:
        rows = (
            self.session.query(ActivityLogModel.model_type)
            .filter(ActivityLogModel.model_type.isnot(None))
            .distinct()
            .all()
        )
        return sorted(model_type for (model_type,) in rows if model_type)

    def distinct_users(self) -> list[tuple[int, str, str | None]]:
        rows = (
            self.session.query(UserModel.id, UserModel.name, UserModel.email)
            .join(ActivityLogModel, ActivityLogModel.user_id == UserModel.id)
            .distinct()
            .order_by(UserModel.id)
            .all()
        )
        return [(user_id, name, email) for user_id, name, email in rows]

    def last_activity_by_user(self, actions: Iterable[str]) -> dict[int, datetime]:
        """Map each user id to the time of its latest entry among ``actions``."""

        rows = (
            self.session.query(ActivityLogModel.user_id, func.max(ActivityLogModel.created_at))
            .filter(
                ActivityLogModel.action.in_(list(actions)),
                ActivityLogModel.user_id.isnot(None),
            )
            .group_by(ActivityLogModel.user_id)
            .all()
        )
        return {user_id: ensure_app_timezone(latest) for user_id, latest in rows}

    def delete_older_than(self, cutoff: datetime) -> int:
        deleted = (
            self.session.query(ActivityLogModel)
            .filter(ActivityLogModel.created_at < ensure_app_naive_datetime(cutoff))
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def _filtered_query(self, filters: ActivityLogFilters):
        query = self.session.query(ActivityLogModel)
        if filters.user_id is not None:
            query = query.filter(ActivityLogModel.user_id == filters.user_id)
        if filters.action:
            query = query.filter(ActivityLogModel.action == filters.action)
        if filters.model_type:
            query = query.filter(ActivityLogModel.model_type == filters.model_type)
        if filters.date_from is not None:
            query = query.filter(
                ActivityLogModel.created_at >= ensure_app_naive_datetime(filters.date_from)
            )
        if filters.date_to is not None:
            query = query.filter(
                ActivityLogModel.created_at <= ensure_app_naive_datetime(filters.date_to)
            )
        if filters.search:
            pattern = f"%{filters.search}%"
            query = query.filter(
                or_(
                    ActivityLogModel.description.ilike(pattern),
                    ActivityLogModel.action.ilike(pattern),
                    ActivityLogModel.model_type.ilike(pattern),
                )
            )
        if filters.user_type:
            query = (
                query.join(UserModel, ActivityLogModel.user_id == UserModel.id)
                .join(RoleModel, UserModel.role_id == RoleModel.id)
                .filter(func.lower(RoleModel.alias) == filters.user_type.lower())
            )
        return query

    @staticmethod
    def _between(query, date_from: datetime, date_to: datetime):
        return query.filter(
            ActivityLogModel.created_at >= ensure_app_naive_datetime(date_from),
            ActivityLogModel.created_at <= ensure_app_naive_datetime(date_to),
        )

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityLog:
        return ActivityLog(
            id=model.id,
            user_id=model.user_id,
            action=model.action,
            model_type=model.model_type,
            model_id=model.model_id,
            description=model.description,
            old_values=dict(model.old_values or {}),
            new_values=dict(model.new_values or {}),
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            created_at=ensure_app_timezone(model.created_at),
            user_name=model.user.name if model.user is not None else None,
        )

    @staticmethod
    def _apply_entity_to_model(model: ActivityLogModel, entry: ActivityLog) -> None:
        model.user_id = entry.user_id
        model.action = entry.action
        model.model_type = entry.model_type
        model.model_id = entry.model_id
        model.description = entry.description
        model.old_values = entry.old_values or None
        model.new_values = entry.new_values or None
        model.ip_address = entry.ip_address
        model.user_agent = (entry.user_agent or "")[:255] or None
        model.created_at = (
            ensure_app_naive_datetime(entry.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )


__all__ = ["ActivityLogFilters", "ActivityLogRepository"]
