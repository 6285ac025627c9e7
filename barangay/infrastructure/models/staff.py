"""SQLAlchemy model for staff members."""

from sqlalchemy import JSON, Column, ForeignKey, Integer

from barangay.infrastructure.database import Base


class StaffModel(Base):
    """Database representation of a staff record and its module permissions."""

    __tablename__ = "staff"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    module_permissions = Column(JSON, nullable=True)


__all__ = ["StaffModel"]
