"""Credential check behind the token endpoint."""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple

from sqlalchemy.orm import Session

from barangay.domain.entities import User
from barangay.infrastructure.repositories import UserRepository
from barangay.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


class AuthenticationResult(NamedTuple):
    user: User | None
    status: AuthenticationStatus


def authenticate_user(session: Session, email: str, password: str) -> AuthenticationResult:
    """Check ``email``/``password``; emails are matched case-insensitively.

    Inactive accounts with valid credentials are returned with ``INACTIVE`` so
    the caller can tell them apart from a wrong password.
    """

    user = UserRepository(session).get_by_email(email.strip().lower())
    if user is None or not verify_password(password, user.password):
        return AuthenticationResult(None, AuthenticationStatus.INVALID_CREDENTIALS)
    if not user.is_active:
        return AuthenticationResult(user, AuthenticationStatus.INACTIVE)
    return AuthenticationResult(user, AuthenticationStatus.SUCCESS)
