"""Persistence layer for staff records."""

from sqlalchemy.orm import Session

from barangay.domain.entities import Staff
from barangay.infrastructure.models import StaffModel


class StaffRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_user_id(self, user_id: int) -> Staff | None:
        model = self.session.query(StaffModel).filter_by(user_id=user_id).first()
        return self._to_entity(model) if model else None

    def create(self, staff: Staff) -> Staff:
        model = StaffModel(user_id=staff.user_id, module_permissions=staff.module_permissions)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: StaffModel) -> Staff:
        return Staff(
            id=model.id,
            user_id=model.user_id,
            module_permissions=model.module_permissions,
        )


__all__ = ["StaffRepository"]
