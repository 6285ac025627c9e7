"""Domain entities exposed by the application."""

from .activity_log import ActivityLog
from .notification import (
    NotificationCategory,
    NotificationEntry,
    NotificationFeed,
    NotificationKey,
    NotificationSource,
    ResidentNotification,
    UserNotification,
)
from .program import Program
from .program_announcement import (
    ANNOUNCEMENT_STATUS_ARCHIVED,
    ANNOUNCEMENT_STATUS_DRAFT,
    ANNOUNCEMENT_STATUS_PUBLISHED,
    ANNOUNCEMENT_STATUSES,
    ProgramAnnouncement,
)
from .resident import Resident
from .role import ROLE_ADMIN, ROLE_RESIDENT, ROLE_STAFF, Role
from .staff import Staff
from .user import User

__all__ = [
    "ActivityLog",
    "NotificationCategory",
    "NotificationEntry",
    "NotificationFeed",
    "NotificationKey",
    "NotificationSource",
    "ResidentNotification",
    "UserNotification",
    "Program",
    "ProgramAnnouncement",
    "ANNOUNCEMENT_STATUS_ARCHIVED",
    "ANNOUNCEMENT_STATUS_DRAFT",
    "ANNOUNCEMENT_STATUS_PUBLISHED",
    "ANNOUNCEMENT_STATUSES",
    "Resident",
    "Role",
    "ROLE_ADMIN",
    "ROLE_RESIDENT",
    "ROLE_STAFF",
    "Staff",
    "User",
]
