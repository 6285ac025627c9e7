"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from barangay.infrastructure.database import Base
from barangay.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an authenticated account."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("role.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=True, unique=True, index=True)
    password = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    role = relationship("RoleModel", lazy="joined")
    notifications = relationship(
        "UserNotificationModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]
