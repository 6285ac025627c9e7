"""Repository implementations for infrastructure layer."""

from .activity_log_repository import ActivityLogFilters, ActivityLogRepository
from .notification_repository import (
    ResidentNotificationRepository,
    UserNotificationRepository,
)
from .program_announcement_repository import ProgramAnnouncementRepository
from .program_repository import ProgramRepository
from .resident_repository import ResidentRepository
from .role_repository import RoleRepository
from .staff_repository import StaffRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityLogFilters",
    "ActivityLogRepository",
    "ProgramAnnouncementRepository",
    "ProgramRepository",
    "ResidentNotificationRepository",
    "ResidentRepository",
    "RoleRepository",
    "StaffRepository",
    "UserNotificationRepository",
    "UserRepository",
]
