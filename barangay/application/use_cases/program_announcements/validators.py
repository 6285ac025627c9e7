"""Validation helpers for program announcement use cases."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from barangay.domain.entities import ANNOUNCEMENT_STATUSES
from barangay.domain.exceptions import InvalidAnnouncementError, ProgramNotFoundError
from barangay.infrastructure.repositories import ProgramRepository
from barangay.utils import ensure_app_timezone

TITLE_MAX_LENGTH = 255
_TRUTHY_STRINGS = frozenset({"1", "true", "on", "yes"})


def coerce_is_urgent(value: Any) -> bool:
    """Interpret form-style flags such as ``"on"`` or ``"yes"`` as booleans."""

    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    return bool(value)


def ensure_program_exists(session: Session, program_id: int) -> None:
    if ProgramRepository(session).get(program_id) is None:
        raise ProgramNotFoundError(program_id)


def validate_announcement_fields(
    *,
    title: str | None,
    content: str | None,
    status: str | None,
    published_at: datetime | None,
    expires_at: datetime | None,
) -> None:
    """Raise :class:`InvalidAnnouncementError` listing every rejected field."""

    errors: dict[str, list[str]] = {}
    if title is not None:
        if not title.strip():
            errors.setdefault("title", []).append("The title field is required.")
        elif len(title) > TITLE_MAX_LENGTH:
            errors.setdefault("title", []).append(
                f"The title may not be greater than {TITLE_MAX_LENGTH} characters."
            )
    if content is not None and not content.strip():
        errors.setdefault("content", []).append("The content field is required.")
    if status is not None and status not in ANNOUNCEMENT_STATUSES:
        errors.setdefault("status", []).append(
            "The status must be one of: " + ", ".join(ANNOUNCEMENT_STATUSES) + "."
        )
    if published_at is not None and expires_at is not None:
        if ensure_app_timezone(expires_at) <= ensure_app_timezone(published_at):
            errors.setdefault("expires_at", []).append(
                "The expires at must be a date after published at."
            )
    if errors:
        raise InvalidAnnouncementError(errors)


__all__ = [
    "coerce_is_urgent",
    "ensure_program_exists",
    "validate_announcement_fields",
]
