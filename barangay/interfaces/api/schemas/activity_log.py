"""Schemas for activity log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from .common import ActionResponse


class ActivityLogRead(BaseModel):
    """Representation of an activity log entry returned by the API."""

    id: int
    user_id: int | None
    user_name: str | None
    action: str
    model_type: str | None
    model_id: int | None
    description: str | None
    old_values: dict[str, Any]
    new_values: dict[str, Any]
    ip_address: str | None
    user_agent: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ActivityLogPage(BaseModel):
    data: list[ActivityLogRead]
    total: int
    page: int
    per_page: int
    last_page: int


class ActionCount(BaseModel):
    action: str
    count: int


class ActiveUser(BaseModel):
    user_id: int
    name: str | None
    activity_count: int


class ActivityStatisticsRead(BaseModel):
    date_from: datetime
    date_to: datetime
    total_logs: int
    login_count: int
    user_registrations: int
    admin_actions: int
    top_actions: list[ActionCount]
    active_users: list[ActiveUser]


class ActivityUserOption(BaseModel):
    id: int
    name: str
    email: str | None


class ActivityFilterOptionsRead(BaseModel):
    actions: list[str]
    model_types: list[str]
    users: list[ActivityUserOption]



class InactiveResidentRead(BaseModel):
    """A resident with no recent login or profile update."""

    id: int
    user_id: int
    first_name: str
    last_name: str
    full_name: str
    email: str | None
    user_name: str | None
    last_activity_date: datetime
    days_inactive: int
    for_review: bool


class InactiveResidentPage(BaseModel):
    inactive_residents: list[InactiveResidentRead]
    total: int
    page: int
    per_page: int
    last_page: int


class FlaggedResidentsCount(BaseModel):
    flagged_count: int


class FlagInactiveResidentsResponse(ActionResponse):
    flagged_count: int


class ActivityLogCleanupResponse(ActionResponse):
    deleted_count: int


__all__ = [
    "ActionCount",
    "ActiveUser",
    "ActivityFilterOptionsRead",
    "ActivityLogCleanupResponse",
    "ActivityLogPage",
    "ActivityLogRead",
    "ActivityStatisticsRead",
    "ActivityUserOption",
    "FlagInactiveResidentsResponse",
    "FlaggedResidentsCount",
    "InactiveResidentPage",
    "InactiveResidentRead",
]
