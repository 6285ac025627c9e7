"""Persistence layer for program announcements."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from barangay.domain.entities import ANNOUNCEMENT_STATUS_PUBLISHED, ProgramAnnouncement
from barangay.infrastructure.models import ProgramAnnouncementModel
from barangay.infrastructure.repositories.program_repository import ProgramRepository
from barangay.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class ProgramAnnouncementRepository:
    """Provide CRUD operations for :class:`ProgramAnnouncement` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        program_id: int | None = None,
        status: str | None = None,
        published_only: bool = False,
    ) -> Sequence[ProgramAnnouncement]:
        query = self.session.query(ProgramAnnouncementModel)
        if program_id is not None:
            query = query.filter(ProgramAnnouncementModel.program_id == program_id)
        if status is not None:
            query = query.filter(ProgramAnnouncementModel.status == status)
        if published_only:
            query = self._published(query)
        query = query.order_by(
            ProgramAnnouncementModel.created_at.desc(), ProgramAnnouncementModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_residents(self) -> Sequence[ProgramAnnouncement]:
        """Return visible announcements, urgent ones first then the newest."""

        query = self._published(self.session.query(ProgramAnnouncementModel))
        query = query.order_by(
            ProgramAnnouncementModel.is_urgent.desc(),
            ProgramAnnouncementModel.published_at.desc(),
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, announcement_id: int) -> ProgramAnnouncement | None:
        model = self.session.get(ProgramAnnouncementModel, announcement_id)
        return self._to_entity(model) if model else None

    def create(self, announcement: ProgramAnnouncement) -> ProgramAnnouncement:
        model = ProgramAnnouncementModel()
        self._apply_entity_to_model(model, announcement)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, announcement: ProgramAnnouncement) -> ProgramAnnouncement:
        if announcement.id is None:
            raise ValueError("Announcement id is required for updates")
        model = self.session.get(ProgramAnnouncementModel, announcement.id)
        if model is None:
            msg = f"Announcement with id {announcement.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, announcement)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, announcement_id: int) -> bool:
        model = self.session.get(ProgramAnnouncementModel, announcement_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _published(query, *, now: datetime | None = None):
        current = ensure_app_naive_datetime(now or now_in_app_timezone())
        return query.filter(
            ProgramAnnouncementModel.status == ANNOUNCEMENT_STATUS_PUBLISHED,
            or_(
                ProgramAnnouncementModel.published_at.is_(None),
                ProgramAnnouncementModel.published_at <= current,
            ),
            or_(
                ProgramAnnouncementModel.expires_at.is_(None),
                ProgramAnnouncementModel.expires_at > current,
            ),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: ProgramAnnouncementModel, announcement: ProgramAnnouncement
    ) -> None:
        model.program_id = announcement.program_id
        model.title = announcement.title
        model.content = announcement.content
        model.status = announcement.status
        model.published_at = ensure_app_naive_datetime(announcement.published_at)
        model.expires_at = ensure_app_naive_datetime(announcement.expires_at)
        model.is_urgent = bool(announcement.is_urgent)
        model.target_audience = (
            list(announcement.target_audience)
            if announcement.target_audience is not None
            else None
        )

    @staticmethod
    def _to_entity(model: ProgramAnnouncementModel) -> ProgramAnnouncement:
        return ProgramAnnouncement(
            id=model.id,
            program_id=model.program_id,
            title=model.title,
            content=model.content,
            status=model.status,
            published_at=ensure_app_timezone(model.published_at),
            expires_at=ensure_app_timezone(model.expires_at),
            is_urgent=bool(model.is_urgent),
            target_audience=list(model.target_audience)
            if model.target_audience is not None
            else None,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            program=ProgramRepository.to_entity(model.program),
        )


__all__ = ["ProgramAnnouncementRepository"]
