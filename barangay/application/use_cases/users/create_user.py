"""Use case for registering user accounts and resident profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from barangay.application.use_cases.activity_logs import USER_MODEL_TYPE, record_activity
from barangay.domain.entities import ROLE_RESIDENT, Resident, User
from barangay.infrastructure.repositories import (
    ResidentRepository,
    RoleRepository,
    UserRepository,
)
from barangay.infrastructure.security import get_password_hash
from barangay.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str,
    is_active: bool = True,
    created_by: int | None = None,
) -> User:
    """Create a user with ``role_alias``, creating the role if needed.

    The registration is written to the activity log with ``created_by`` as the
    acting user (``None`` for self-registration and scripts).
    """

    normalized_email = email.strip().lower()
    if not normalized_email or "@" not in normalized_email:
        raise ValueError("A valid email address is required")

    users = UserRepository(session)
    if users.get_by_email(normalized_email) is not None:
        raise ValueError("Email address is already registered")

    role = RoleRepository(session).get_or_create(role_alias)
    user = User(
        id=None,
        role=role,
        name=name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
        is_active=is_active,
        created_at=now_in_app_timezone(),
    )
    created = users.create(user)
    record_activity(
        session,
        user_id=created_by,
        action="created",
        model_type=USER_MODEL_TYPE,
        model_id=created.id,
        description=f"Registered {role.alias} account {created.email}",
        new_values={"name": created.name, "email": created.email, "role": role.alias},
    )
    return created


def register_resident(
    session: Session,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
) -> tuple[User, Resident]:
    """Create a resident account together with its resident profile."""

    user = create_user(
        session,
        name=f"{first_name} {last_name}".strip(),
        email=email,
        password=password,
        role_alias=ROLE_RESIDENT,
    )
    resident = ResidentRepository(session).create(
        Resident(id=None, user_id=user.id, first_name=first_name, last_name=last_name)
    )
    return user, resident
