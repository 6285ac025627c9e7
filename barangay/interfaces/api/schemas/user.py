"""User schemas."""

from typing import Any

from pydantic import BaseModel


class PermissionsRead(BaseModel):
    role: str
    permissions: dict[str, Any]
