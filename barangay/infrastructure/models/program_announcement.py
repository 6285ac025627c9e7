"""SQLAlchemy model for program announcements."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from barangay.infrastructure.database import Base
from barangay.utils import now_in_app_naive_datetime


class ProgramAnnouncementModel(Base):
    """Database representation of an announcement attached to a program."""

    __tablename__ = "program_announcement"

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(Integer, ForeignKey("program.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="draft")
    published_at = Column(DateTime, nullable=True)
    expires_at = Column(DateTime, nullable=True)
    is_urgent = Column(Boolean, nullable=False, default=False)
    target_audience = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    program = relationship("ProgramModel", lazy="joined")


__all__ = ["ProgramAnnouncementModel"]
