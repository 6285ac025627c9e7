"""Unified notification feed and notification producers."""

from .events import (
    dispatch_program_announcement_notifications,
    notify_program_announcement_published,
    send_resident_notification,
)
from .feed import (
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .messages import build_message, format_notification_date, notification_title
from .redirects import resolve_redirect

__all__ = [
    "build_message",
    "dispatch_program_announcement_notifications",
    "format_notification_date",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notification_title",
    "notify_program_announcement_published",
    "resolve_redirect",
    "send_resident_notification",
]
