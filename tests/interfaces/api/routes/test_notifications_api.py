"""Integration tests for the notification endpoints."""

from __future__ import annotations

import pytest

from barangay.application.use_cases.notifications import feed as feed_module
from barangay.domain.entities import NotificationSource


def test_list_notifications_returns_feed(
    client, auth_headers, make_resident, add_framework_notification, add_custom_notification
):
    user, resident = make_resident(email="juan@example.com")
    add_framework_notification(
        user.id, {"type": "asset_request", "asset_request_id": 42, "status": "approved"}
    )
    add_custom_notification(resident.id, minutes=5, data={"program_id": 7}, message=None)

    response = client.get("/notifications/", headers=auth_headers("juan@example.com"))

    assert response.status_code == 200
    assert response.headers.get("X-Refreshed-Token")
    body = response.json()
    assert body["unread_count"] == 2
    custom, framework = body["notifications"]

    assert custom["source"] == NotificationSource.CUSTOM.value
    assert custom["key"] == f"custom_notification:{custom['id']}"
    assert custom["category"] == "generic_program"
    assert custom["redirect_path"] == "/residents/enrolledPrograms?program=7"

    assert framework["category"] == "asset_request"
    assert framework["title"] == "Asset Request Notification"
    assert framework["message"].startswith("Your request for Asset has been approved.")
    assert framework["redirect_path"] == "/residents/statusassetrequests?id=42"
    assert framework["is_read"] is False


def test_list_requires_authentication(client):
    assert client.get("/notifications/").status_code == 401


def test_list_without_resident_profile_returns_404(client, auth_headers, make_user):
    make_user("admin@example.com")

    response = client.get("/notifications/", headers=auth_headers("admin@example.com"))

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Resident profile not found",
        "error_code": "PROFILE_NOT_FOUND",
    }


@pytest.mark.parametrize("method", ["patch", "post"])
def test_mark_one_as_read(
    client, auth_headers, make_resident, add_custom_notification, method
):
    _, resident = make_resident(email="juan@example.com")
    notification = add_custom_notification(resident.id, message="Hello")
    headers = auth_headers("juan@example.com")

    response = getattr(client, method)(
        f"/notifications/{notification.id}/read", headers=headers
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Notification marked as read"}
    assert client.get("/notifications/", headers=headers).json()["unread_count"] == 0


def test_mark_one_by_composite_key_and_source(
    client, auth_headers, make_resident, add_framework_notification
):
    user, _ = make_resident(email="juan@example.com")
    notification = add_framework_notification(user.id, {"project_id": 3})
    headers = auth_headers("juan@example.com")

    response = client.patch(
        f"/notifications/framework_notification:{notification.id}/read", headers=headers
    )
    assert response.status_code == 200

    response = client.patch(
        f"/notifications/{notification.id}/read",
        params={"source": "custom_notification"},
        headers=headers,
    )
    assert response.status_code == 404


def test_mark_unknown_notification_returns_404(client, auth_headers, make_resident):
    make_resident(email="juan@example.com")

    response = client.patch("/notifications/999/read", headers=auth_headers("juan@example.com"))

    assert response.status_code == 404
    assert response.json()["message"] == "Notification not found"
    assert response.json()["success"] is False


def test_mark_all_as_read(
    client, auth_headers, make_resident, add_framework_notification, add_custom_notification
):
    user, resident = make_resident(email="juan@example.com")
    add_framework_notification(user.id, {"project_id": 1})
    add_custom_notification(resident.id, message="one")
    add_custom_notification(resident.id, message="two", read=True)
    headers = auth_headers("juan@example.com")

    response = client.post("/notifications/read-all", headers=headers)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "All notifications marked as read",
        "updated": 2,
    }
    assert client.get("/notifications/", headers=headers).json()["unread_count"] == 0


def test_unexpected_errors_are_sanitised(
    auth_headers, client, make_resident, monkeypatch, caplog
):
    from fastapi.testclient import TestClient

    from main import create_app

    make_resident(email="juan@example.com")
    headers = auth_headers("juan@example.com")

    def explode(*args, **kwargs):
        raise RuntimeError("connection string postgres://secret@db")

    monkeypatch.setattr(feed_module, "merge_entries", explode)

    with TestClient(create_app(), raise_server_exceptions=False) as failing_client:
        response = failing_client.get("/notifications/", headers=headers)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "INTERNAL_ERROR"
    assert body["error_id"]
    assert "secret" not in response.text
    assert "secret" in caplog.text


def test_staff_can_send_custom_notification(
    client, auth_headers, make_user, make_resident, make_program
):
    make_user("staff@example.com", role="staff")
    resident_user, resident = make_resident(email="juan@example.com")
    program = make_program(name="Scholarship")

    response = client.post(
        f"/notifications/residents/{resident.id}",
        json={"message": "Your stipend is ready", "program_id": program.id},
        headers=auth_headers("staff@example.com"),
    )

    assert response.status_code == 201
    created = response.json()
    assert created["key"] == f"custom_notification:{created['id']}"

    feed = client.get("/notifications/", headers=auth_headers("juan@example.com")).json()
    (entry,) = feed["notifications"]
    assert entry["data"]["program_name"] == "Scholarship"
    assert entry["message"].startswith("Your stipend is ready\n\n")


def test_residents_cannot_send_custom_notifications(client, auth_headers, make_resident):
    _, resident = make_resident(email="juan@example.com")

    response = client.post(
        f"/notifications/residents/{resident.id}",
        json={"message": "Hi"},
        headers=auth_headers("juan@example.com"),
    )

    assert response.status_code == 403


def test_custom_notification_for_unknown_resident(client, auth_headers, make_user):
    make_user("staff@example.com", role="staff")

    response = client.post(
        "/notifications/residents/404",
        json={"message": "Hi"},
        headers=auth_headers("staff@example.com"),
    )

    assert response.status_code == 404
    assert response.json()["message"] == "Resident not found"
