"""Helper utilities shared across API route handlers."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any

from fastapi import Request


def client_metadata(request: Request) -> dict[str, str | None]:
    """Return the ``ip_address`` and ``user_agent`` of the calling client."""

    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


def audit_values(entity: Any) -> dict[str, Any]:
    """Return a JSON-friendly snapshot of a dataclass entity for the activity log."""

    if not is_dataclass(entity):
        return {}
    values = asdict(entity)
    values.pop("program", None)
    return {
        key: value.isoformat() if isinstance(value, (date, datetime)) else value
        for key, value in values.items()
    }
