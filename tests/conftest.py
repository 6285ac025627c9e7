"""Shared fixtures: a throwaway SQLite database and factories for its records."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "barangay_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["NOTIFICATION_SOURCE_LIMIT"] = "50"
os.environ["APP_TIMEZONE"] = "Asia/Manila"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from barangay.config import get_settings  # noqa: E402

get_settings.cache_clear()

from barangay.domain.entities import (  # noqa: E402
    ROLE_ADMIN,
    ROLE_RESIDENT,
    ROLE_STAFF,
    ActivityLog,
    Program,
    ResidentNotification,
    Staff,
    UserNotification,
)
from barangay.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from barangay.infrastructure.models import ResidentModel  # noqa: E402
from barangay.infrastructure.repositories import (  # noqa: E402
    ActivityLogRepository,
    ProgramRepository,
    ResidentNotificationRepository,
    StaffRepository,
    UserNotificationRepository,
)
from barangay.application.use_cases.users import (  # noqa: E402
    create_user,
    register_resident,
)
from barangay.utils import now_in_app_naive_datetime, now_in_app_timezone  # noqa: E402

BASE_TIME = datetime(2024, 3, 5, 14, 7, 9)
DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_resident(session):
    """Create a resident account with its profile; returns ``(user, resident)``."""

    counter = {"value": 0}

    def _make(email: str | None = None, first_name: str = "Juan", last_name: str = "Dela Cruz"):
        counter["value"] += 1
        return register_resident(
            session,
            first_name=first_name,
            last_name=last_name,
            email=email or f"resident{counter['value']}@example.com",
            password=DEFAULT_PASSWORD,
        )

    return _make


@pytest.fixture()
def make_user(session):
    """Create an account with the given role alias."""

    def _make(email: str, role: str = ROLE_ADMIN, name: str = "Test User", module_permissions=None):
        user = create_user(
            session,
            name=name,
            email=email,
            password=DEFAULT_PASSWORD,
            role_alias=role,
        )
        if module_permissions is not None:
            StaffRepository(session).create(
                Staff(id=None, user_id=user.id, module_permissions=module_permissions)
            )
        return user

    return _make


@pytest.fixture()
def make_program(session):
    def _make(name: str = "Senior Citizen Aid", program_type: str = "financial"):
        return ProgramRepository(session).create(
            Program(id=None, name=name, type=program_type, status="ongoing")
        )

    return _make


@pytest.fixture()
def add_framework_notification(session):
    """Store a framework notification ``minutes`` after :data:`BASE_TIME`."""

    def _add(user_id: int, data: dict, *, minutes: int = 0, read: bool = False):
        created_at = BASE_TIME + timedelta(minutes=minutes)
        return UserNotificationRepository(session).create(
            UserNotification(
                id=None,
                user_id=user_id,
                type="App\\Notifications\\StatusUpdated",
                data=data,
                read_at=created_at if read else None,
                created_at=created_at,
            )
        )

    return _add


@pytest.fixture()
def add_custom_notification(session):
    """Store a resident notification ``minutes`` after :data:`BASE_TIME`."""

    def _add(
        resident_id: int,
        *,
        minutes: int = 0,
        read: bool = False,
        message: str | None = None,
        title: str | None = None,
        program_id: int | None = None,
        data: dict | None = None,
        notification_type: str | None = None,
    ):
        created_at = BASE_TIME + timedelta(minutes=minutes)
        return ResidentNotificationRepository(session).create(
            ResidentNotification(
                id=None,
                resident_id=resident_id,
                type=notification_type,
                title=title,
                message=message,
                data=data or {},
                program_id=program_id,
                is_read=read,
                read_at=created_at if read else None,
                created_at=created_at,
            )
        )

    return _add


@pytest.fixture()
def auth_headers(client):
    """Log in through ``/auth/token`` and return the bearer header."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post("/auth/token", data={"username": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


__all__ = [
    "BASE_TIME",
    "DEFAULT_PASSWORD",
    "ROLE_ADMIN",
    "ROLE_RESIDENT",
    "ROLE_STAFF",
]


@pytest.fixture()
def add_activity(session):
    """Store an activity entry dated ``days_ago`` days before now."""

    def _add(user_id: int | None, action: str, *, days_ago: int = 0, model_type: str | None = None):
        return ActivityLogRepository(session).create(
            ActivityLog(
                id=None,
                user_id=user_id,
                action=action,
                model_type=model_type,
                created_at=now_in_app_timezone() - timedelta(days=days_ago),
            )
        )

    return _add


@pytest.fixture()
def backdate_resident(session):
    """Move a resident's ``created_at`` ``days`` days into the past."""

    def _backdate(resident_id: int, days: int) -> None:
        model = session.get(ResidentModel, resident_id)
        model.created_at = now_in_app_naive_datetime() - timedelta(days=days)
        session.commit()

    return _backdate
