"""Persistence layer for programs."""

from sqlalchemy.orm import Session

from barangay.domain.entities import Program
from barangay.infrastructure.models import ProgramModel


class ProgramRepository:
    """Provide read and create operations for :class:`Program` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, program_id: int) -> Program | None:
        model = self.session.get(ProgramModel, program_id)
        return self.to_entity(model)

    def create(self, program: Program) -> Program:
        model = ProgramModel(name=program.name, type=program.type, status=program.status)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    @staticmethod
    def to_entity(model: ProgramModel | None) -> Program | None:
        if model is None:
            return None
        return Program(id=model.id, name=model.name, type=model.type, status=model.status)


__all__ = ["ProgramRepository"]
