"""Persistence helpers for the framework and resident notification stores."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from barangay.domain.entities import ResidentNotification, UserNotification
from barangay.infrastructure.models import (
    ResidentNotificationModel,
    UserNotificationModel,
)
from barangay.infrastructure.repositories.program_repository import ProgramRepository
from barangay.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class UserNotificationRepository:
    """Provide access to framework-native notifications keyed by user account."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[UserNotification]:
        query = self.session.query(UserNotificationModel)
        query = query.filter(UserNotificationModel.user_id == user_id)
        query = query.order_by(UserNotificationModel.created_at.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get_for_user(self, notification_id: str, *, user_id: int) -> UserNotification | None:
        model = self._get_model(notification_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def create(self, notification: UserNotification, *, commit: bool = True) -> UserNotification:
        model = UserNotificationModel(
            user_id=notification.user_id,
            type=notification.type,
            data=notification.data or {},
            read_at=ensure_app_naive_datetime(notification.read_at),
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        if notification.id is not None:
            model.id = notification.id
        self.session.add(model)
        if commit:
            self.session.commit()
            self.session.refresh(model)
        else:
            self.session.flush()
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str, *, user_id: int) -> bool:
        """Set ``read_at`` on an unread notification; return ``False`` if missing."""

        model = self._get_model(notification_id, user_id=user_id)
        if model is None:
            return False
        if model.read_at is None:
            model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
            self.session.add(model)
            self.session.commit()
        return True

    def mark_all_as_read(self, user_id: int, *, commit: bool = True) -> int:
        updated = (
            self.session.query(UserNotificationModel)
            .filter(
                UserNotificationModel.user_id == user_id,
                UserNotificationModel.read_at.is_(None),
            )
            .update(
                {
                    UserNotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    )
                },
                synchronize_session=False,
            )
        )
        if commit:
            self.session.commit()
        return updated

    def _get_model(self, notification_id: str, *, user_id: int) -> UserNotificationModel | None:
        return (
            self.session.query(UserNotificationModel)
            .filter(
                UserNotificationModel.id == str(notification_id),
                UserNotificationModel.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: UserNotificationModel) -> UserNotification:
        return UserNotification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            data=dict(model.data or {}),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


class ResidentNotificationRepository:
    """Provide access to application notifications keyed by resident profile."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_resident(
        self,
        resident_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[ResidentNotification]:
        query = (
            self.session.query(ResidentNotificationModel)
            .filter(ResidentNotificationModel.resident_id == resident_id)
            .order_by(ResidentNotificationModel.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get_for_resident(
        self, notification_id: int, *, resident_id: int
    ) -> ResidentNotification | None:
        model = self._get_model(notification_id, resident_id=resident_id)
        return self._to_entity(model) if model else None

    def create(self, notification: ResidentNotification) -> ResidentNotification:
        model = ResidentNotificationModel(
            resident_id=notification.resident_id,
            program_id=notification.program_id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            data=notification.data or {},
            is_read=notification.is_read,
            read_at=ensure_app_naive_datetime(notification.read_at),
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, resident_id: int) -> bool:
        model = self._get_model(notification_id, resident_id=resident_id)
        if model is None:
            return False
        model.is_read = True
        model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        return True

    def mark_all_as_read(self, resident_id: int, *, commit: bool = True) -> int:
        updated = (
            self.session.query(ResidentNotificationModel)
            .filter(
                ResidentNotificationModel.resident_id == resident_id,
                ResidentNotificationModel.is_read.is_(False),
            )
            .update(
                {
                    ResidentNotificationModel.is_read: True,
                    ResidentNotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    ),
                },
                synchronize_session=False,
            )
        )
        if commit:
            self.session.commit()
        return updated

    def _get_model(
        self, notification_id: int, *, resident_id: int
    ) -> ResidentNotificationModel | None:
        return (
            self.session.query(ResidentNotificationModel)
            .filter(
                ResidentNotificationModel.id == notification_id,
                ResidentNotificationModel.resident_id == resident_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: ResidentNotificationModel) -> ResidentNotification:
        return ResidentNotification(
            id=model.id,
            resident_id=model.resident_id,
            program_id=model.program_id,
            type=model.type,
            title=model.title,
            message=model.message,
            data=dict(model.data or {}),
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            program=ProgramRepository.to_entity(model.program),
        )


__all__ = ["UserNotificationRepository", "ResidentNotificationRepository"]
