"""ORM models used by the application infrastructure."""

from .activity_log import ActivityLogModel
from .notification import ResidentNotificationModel, UserNotificationModel
from .program import ProgramModel
from .program_announcement import ProgramAnnouncementModel
from .resident import ResidentModel
from .role import RoleModel
from .staff import StaffModel
from .user import UserModel

__all__ = [
    "ActivityLogModel",
    "ProgramModel",
    "ProgramAnnouncementModel",
    "ResidentModel",
    "ResidentNotificationModel",
    "RoleModel",
    "StaffModel",
    "UserModel",
    "UserNotificationModel",
]
