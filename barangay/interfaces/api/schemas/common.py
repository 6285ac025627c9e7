"""Envelope schemas shared by several endpoints."""

from pydantic import BaseModel


class ActionResponse(BaseModel):
    """Outcome of a command endpoint."""

    success: bool = True
    message: str


class BulkActionResponse(ActionResponse):
    updated: int = 0


__all__ = ["ActionResponse", "BulkActionResponse"]
