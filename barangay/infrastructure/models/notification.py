"""SQLAlchemy models for the two notification stores."""

from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from barangay.infrastructure.database import Base
from barangay.utils import now_in_app_naive_datetime


def _new_notification_id() -> str:
    return str(uuid4())


class UserNotificationModel(Base):
    """Framework-native notifications addressed to a user account."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True, default=_new_notification_id)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(255), nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    user = relationship("UserModel", back_populates="notifications")


class ResidentNotificationModel(Base):
    """Application notifications addressed to a resident profile."""

    __tablename__ = "resident_notification"

    id = Column(Integer, primary_key=True, index=True)
    resident_id = Column(
        Integer, ForeignKey("resident.id", ondelete="CASCADE"), nullable=False, index=True
    )
    program_id = Column(Integer, ForeignKey("program.id"), nullable=True)
    type = Column(String(50), nullable=True)
    title = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    data = Column(JSON, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    program = relationship("ProgramModel", lazy="joined")


__all__ = ["UserNotificationModel", "ResidentNotificationModel"]
