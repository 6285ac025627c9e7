"""Tests for the authentication token endpoint and the current user routes."""

from __future__ import annotations

from barangay.infrastructure.repositories import UserRepository
from barangay.infrastructure.security import decode_access_token


def test_login_returns_token_and_records_login(client, make_user, session):
    user = make_user("admin@example.com")

    response = client.post(
        "/auth/token", data={"username": "admin@example.com", "password": "Secret123"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "admin"
    claims = decode_access_token(body["access_token"])
    assert claims["sub"] == "admin@example.com"
    assert claims["pwd_sig"]

    session.expire_all()
    assert UserRepository(session).get(user.id).last_login is not None


def test_login_rejects_bad_credentials(client, make_user):
    make_user("admin@example.com")

    response = client.post(
        "/auth/token", data={"username": "admin@example.com", "password": "wrong"}
    )

    assert response.status_code == 401


def test_login_rejects_inactive_users(client, make_user, session):
    user = make_user("admin@example.com")
    repository = UserRepository(session)
    user.is_active = False
    repository.update(user)

    response = client.post(
        "/auth/token", data={"username": "admin@example.com", "password": "Secret123"}
    )

    assert response.status_code == 403


def test_password_change_invalidates_tokens(client, auth_headers, make_user, session):
    user = make_user("admin@example.com")
    headers = auth_headers("admin@example.com")
    user.password = "changed-hash"
    UserRepository(session).update(user)

    response = client.get("/users/me/permissions", headers=headers)

    assert response.status_code == 401


def test_admin_permissions_cover_every_module(client, auth_headers, make_user):
    make_user("admin@example.com")

    response = client.get("/users/me/permissions", headers=auth_headers("admin@example.com"))

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "admin"
    assert len(body["permissions"]) == 14
    assert all(body["permissions"].values())


def test_staff_permissions_from_list(client, auth_headers, make_user):
    make_user(
        "staff@example.com",
        role="staff",
        module_permissions=["dashboard", "residentsRecords"],
    )

    response = client.get("/users/me/permissions", headers=auth_headers("staff@example.com"))

    assert response.json()["permissions"] == {"dashboard": True, "residentsRecords": True}


def test_staff_permissions_from_mapping(client, auth_headers, make_user):
    make_user(
        "staff@example.com",
        role="staff",
        module_permissions={"dashboard": True, "blotterRecords": False},
    )

    response = client.get("/users/me/permissions", headers=auth_headers("staff@example.com"))

    assert response.json()["permissions"] == {"dashboard": True, "blotterRecords": False}


def test_users_without_staff_record_only_see_dashboard(client, auth_headers, make_resident):
    resident_user, _ = make_resident()

    response = client.get("/users/me/permissions", headers=auth_headers(resident_user.email))

    assert response.json() == {"role": "resident", "permissions": {"dashboard": True}}
