from .activity_log import (
    ActionCount,
    ActiveUser,
    ActivityFilterOptionsRead,
    ActivityLogCleanupResponse,
    ActivityLogPage,
    ActivityLogRead,
    ActivityStatisticsRead,
    ActivityUserOption,
    FlagInactiveResidentsResponse,
    FlaggedResidentsCount,
    InactiveResidentPage,
    InactiveResidentRead,
)
from .auth import Token
from .common import ActionResponse, BulkActionResponse
from .notification import (
    CustomNotificationCreate,
    CustomNotificationRead,
    NotificationEntryRead,
    NotificationFeedRead,
)
from .program_announcement import (
    ProgramAnnouncementCreate,
    ProgramAnnouncementRead,
    ProgramAnnouncementResponse,
    ProgramAnnouncementUpdate,
    ProgramRead,
)
from .user import PermissionsRead

__all__ = [
    "ActionCount",
    "ActionResponse",
    "ActiveUser",
    "ActivityFilterOptionsRead",
    "ActivityLogCleanupResponse",
    "ActivityLogPage",
    "ActivityLogRead",
    "ActivityStatisticsRead",
    "ActivityUserOption",
    "BulkActionResponse",
    "CustomNotificationCreate",
    "CustomNotificationRead",
    "FlagInactiveResidentsResponse",
    "FlaggedResidentsCount",
    "InactiveResidentPage",
    "InactiveResidentRead",
    "NotificationEntryRead",
    "NotificationFeedRead",
    "PermissionsRead",
    "ProgramAnnouncementCreate",
    "ProgramAnnouncementRead",
    "ProgramAnnouncementResponse",
    "ProgramAnnouncementUpdate",
    "ProgramRead",
    "Token",
]
