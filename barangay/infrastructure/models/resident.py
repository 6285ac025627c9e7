"""SQLAlchemy model for resident profiles."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from barangay.infrastructure.database import Base
from barangay.utils import now_in_app_naive_datetime


class ResidentModel(Base):
    """Database representation of a resident linked to a user account."""

    __tablename__ = "resident"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    for_review = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ResidentModel"]
