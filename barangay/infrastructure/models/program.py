"""SQLAlchemy model for social service programs."""

from sqlalchemy import Column, Integer, String

from barangay.infrastructure.database import Base


class ProgramModel(Base):
    """Database representation of a program."""

    __tablename__ = "program"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=True)
    status = Column(String(30), nullable=True)


__all__ = ["ProgramModel"]
