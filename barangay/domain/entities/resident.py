"""Domain entity representing a resident profile."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Resident:
    """Municipal resident linked one-to-one with a user account."""

    id: int | None
    user_id: int
    first_name: str
    last_name: str
    for_review: bool = False
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["Resident"]
