"""Schemas for program announcement endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProgramRead(BaseModel):
    id: int
    name: str
    type: str | None = None
    status: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProgramAnnouncementBase(BaseModel):
    title: str
    content: str
    status: str | None = None
    published_at: datetime | None = None
    expires_at: datetime | None = None
    target_audience: list[str] | None = None


class ProgramAnnouncementCreate(ProgramAnnouncementBase):
    program_id: int = Field(..., ge=1)
    is_urgent: bool | str | int | None = Field(
        default=False, description="Accepts booleans and '1'/'true'/'on'/'yes'"
    )


class ProgramAnnouncementUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
    status: str | None = None
    published_at: datetime | None = None
    expires_at: datetime | None = None
    is_urgent: bool | str | int | None = None
    target_audience: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class ProgramAnnouncementRead(BaseModel):
    id: int
    program_id: int
    title: str
    content: str
    status: str
    published_at: datetime | None
    expires_at: datetime | None
    is_urgent: bool
    target_audience: list[str] | None
    created_at: datetime | None
    updated_at: datetime | None
    program: ProgramRead | None = None

    model_config = ConfigDict(from_attributes=True)


class ProgramAnnouncementResponse(BaseModel):
    success: bool = True
    message: str
    data: ProgramAnnouncementRead


__all__ = [
    "ProgramAnnouncementCreate",
    "ProgramAnnouncementRead",
    "ProgramAnnouncementResponse",
    "ProgramAnnouncementUpdate",
    "ProgramRead",
]
