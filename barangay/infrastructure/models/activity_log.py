"""SQLAlchemy model for activity log records."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from barangay.infrastructure.database import Base
from barangay.utils import now_in_app_naive_datetime

_activity_json_type = JSONB().with_variant(JSON(), "sqlite").with_variant(JSON(), "mysql")


class ActivityLogModel(Base):
    """Database representation of activity events."""

    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    action = Column(String(100), nullable=False, index=True)
    model_type = Column(String(100), nullable=True)
    model_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    old_values = Column(_activity_json_type, nullable=True)
    new_values = Column(_activity_json_type, nullable=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(255), nullable=True)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )

    user = relationship("UserModel", lazy="joined")


__all__ = ["ActivityLogModel"]
