"""Persistence layer for resident profiles."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from barangay.domain.entities import Resident
from barangay.infrastructure.models import ResidentModel, UserModel
from barangay.utils import ensure_app_naive_datetime, ensure_app_timezone


class ResidentRepository:
    """Look up, register and flag resident profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, resident_id: int) -> Resident | None:
        model = self.session.get(ResidentModel, resident_id)
        return self._to_entity(model) if model else None

    def get_by_user_id(self, user_id: int) -> Resident | None:
        model = self.session.query(ResidentModel).filter_by(user_id=user_id).first()
        return self._to_entity(model) if model else None

    def create(self, resident: Resident) -> Resident:
        model = ResidentModel(
            user_id=resident.user_id,
            first_name=resident.first_name,
            last_name=resident.last_name,
            for_review=resident.for_review,
        )
        if resident.created_at is not None:
            model.created_at = ensure_app_naive_datetime(resident.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_with_accounts(self) -> list[tuple[Resident, str | None, str | None]]:
        """Return every resident with the name and email of its user account."""

        rows = (
            self.session.query(ResidentModel, UserModel.name, UserModel.email)
            .join(UserModel, ResidentModel.user_id == UserModel.id)
            .order_by(ResidentModel.id)
            .all()
        )
        return [(self._to_entity(model), name, email) for model, name, email in rows]

    def flag_for_review(self, resident_ids: Iterable[int]) -> int:
        """Set ``for_review`` on the given residents that are not flagged yet."""

        ids = list(resident_ids)
        if not ids:
            return 0
        flagged = (
            self.session.query(ResidentModel)
            .filter(ResidentModel.id.in_(ids), ResidentModel.for_review.is_(False))
            .update({ResidentModel.for_review: True}, synchronize_session=False)
        )
        self.session.commit()
        return flagged

    def count_for_review(self) -> int:
        return self.session.query(ResidentModel).filter(ResidentModel.for_review.is_(True)).count()

    @staticmethod
    def _to_entity(model: ResidentModel) -> Resident:
        return Resident(
            id=model.id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            for_review=bool(model.for_review),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ResidentRepository"]
