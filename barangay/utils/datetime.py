"""Timezone helpers.

The database stores naive ``DATETIME`` values expressed in the barangay's
local time (``APP_TIMEZONE``, Asia/Manila unless configured otherwise). The
domain layer and the API only ever see timezone-aware datetimes.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from barangay.config import get_settings

DEFAULT_TIMEZONE: Final[str] = "Asia/Manila"

# Accepts "UTC+8", "GMT-03:30" and "UTC+0800".
_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


def parse_utc_offset(value: str) -> timezone | None:
    """Return a fixed-offset timezone for ``value`` or ``None`` if it is not one."""

    match = _UTC_OFFSET.match(value.strip())
    if match is None:
        return None
    offset = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"] or 0))
    return timezone(-offset if match["sign"] == "-" else offset)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured timezone, falling back to Asia/Manila when unknown."""

    name = (get_settings().app_timezone or "").strip() or DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return parse_utc_offset(name) or ZoneInfo(DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the app timezone to naive values and convert aware ones."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` as local wall-clock time without ``tzinfo``, ready to store."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def now_in_app_naive_datetime() -> datetime:
    """Column default: the current local wall-clock time."""

    return now_in_app_timezone().replace(tzinfo=None)
