"""Exceptions raised by the application layer and rendered by the API."""


class BarangayError(Exception):
    """Base error carrying a stable code and the HTTP status to report."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ResidentProfileNotFoundError(BarangayError):
    """The authenticated user has no resident profile."""

    def __init__(self, user_id: int | None = None) -> None:
        super().__init__("PROFILE_NOT_FOUND", "Resident profile not found", status_code=404)
        self.user_id = user_id


class NotificationNotFoundError(BarangayError):
    """No notification source holds the requested id for the resident."""

    def __init__(self, notification_id: str) -> None:
        super().__init__("NOT_FOUND", "Notification not found", status_code=404)
        self.notification_id = notification_id


class ResidentNotFoundError(BarangayError):
    def __init__(self, resident_id: int) -> None:
        super().__init__("NOT_FOUND", "Resident not found", status_code=404)
        self.resident_id = resident_id


class ProgramNotFoundError(BarangayError):
    def __init__(self, program_id: int) -> None:
        super().__init__("NOT_FOUND", "Program not found", status_code=404)
        self.program_id = program_id


class ProgramAnnouncementNotFoundError(BarangayError):
    def __init__(self, announcement_id: int) -> None:
        super().__init__("NOT_FOUND", "Announcement not found", status_code=404)
        self.announcement_id = announcement_id


class ActivityLogNotFoundError(BarangayError):
    def __init__(self, entry_id: int) -> None:
        super().__init__("NOT_FOUND", "Activity log not found", status_code=404)
        self.entry_id = entry_id


class ValidationFailedError(BarangayError):
    """Input rejected by a business rule; ``errors`` maps field names to messages."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__("VALIDATION_ERROR", "Validation failed", status_code=422)
        self.errors = errors


class InvalidAnnouncementError(ValidationFailedError):
    """Announcement input failed validation."""


__all__ = [
    "BarangayError",
    "ResidentProfileNotFoundError",
    "NotificationNotFoundError",
    "ResidentNotFoundError",
    "ProgramNotFoundError",
    "ProgramAnnouncementNotFoundError",
    "ActivityLogNotFoundError",
    "ValidationFailedError",
    "InvalidAnnouncementError",
]
