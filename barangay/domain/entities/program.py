"""Domain entity representing a social service program."""

from dataclasses import dataclass


@dataclass
class Program:
    """Program residents can enroll in or receive benefits from."""

    id: int | None
    name: str
    type: str | None = None
    status: str | None = None


__all__ = ["Program"]
