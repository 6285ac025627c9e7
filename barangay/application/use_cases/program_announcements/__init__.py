"""Use cases for managing program announcements."""

from .create_announcement import create_announcement
from .delete_announcement import delete_announcement
from .get_announcement import (
    get_announcement,
    list_announcements,
    list_resident_announcements,
)
from .publish_announcement import publish_announcement
from .update_announcement import update_announcement
from .validators import coerce_is_urgent

__all__ = [
    "coerce_is_urgent",
    "create_announcement",
    "delete_announcement",
    "get_announcement",
    "list_announcements",
    "list_resident_announcements",
    "publish_announcement",
    "update_announcement",
]
