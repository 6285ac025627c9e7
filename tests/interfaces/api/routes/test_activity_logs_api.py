"""Integration tests for the activity log endpoints."""

from __future__ import annotations

from datetime import timedelta

from barangay.application.use_cases.activity_logs import record_activity
from barangay.infrastructure.repositories import ActivityLogFilters, ActivityLogRepository
from barangay.utils import now_in_app_timezone


def _seed(session, admin, resident_user):
    record_activity(session, user_id=admin.id, action="admin.backup", description="Backup run")
    record_activity(
        session,
        user_id=resident_user.id,
        action="updated",
        model_type="Resident",
        model_id=1,
        description="Updated contact number",
    )
    record_activity(
        session, user_id=admin.id, action="created", model_type="User", model_id=resident_user.id
    )


def test_list_filters_and_paginates(client, auth_headers, make_user, make_resident, session):
    admin = make_user("admin@example.com")
    resident_user, _ = make_resident()
    headers = auth_headers("admin@example.com")
    _seed(session, admin, resident_user)

    response = client.get("/activity-logs/", params={"per_page": 2}, headers=headers)

    assert response.status_code == 200
    page = response.json()
    # Both registrations and the login above are recorded too.
    assert page["total"] == 6
    assert page["last_page"] == 3
    assert len(page["data"]) == 2

    filtered = client.get(
        "/activity-logs/", params={"search": "contact"}, headers=headers
    ).json()
    assert [entry["action"] for entry in filtered["data"]] == ["updated"]
    assert filtered["data"][0]["user_name"] == resident_user.name

    by_role = client.get(
        "/activity-logs/", params={"user_type": "resident"}, headers=headers
    ).json()
    assert by_role["total"] == 1


def test_read_single_entry(client, auth_headers, make_user, session):
    admin = make_user("admin@example.com")
    headers = auth_headers("admin@example.com")
    entry = record_activity(session, user_id=admin.id, action="admin.export")

    response = client.get(f"/activity-logs/{entry.id}", headers=headers)
    assert response.status_code == 200
    assert response.json()["action"] == "admin.export"

    missing = client.get("/activity-logs/9999", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Activity log not found"


def test_statistics(client, auth_headers, make_user, make_resident, session):
    admin = make_user("admin@example.com")
    resident_user, _ = make_resident()
    headers = auth_headers("admin@example.com")
    _seed(session, admin, resident_user)

    stats = client.get("/activity-logs/statistics", headers=headers).json()

    assert stats["total_logs"] == 6
    assert stats["login_count"] == 1
    assert stats["admin_actions"] == 1
    assert stats["user_registrations"] == 3
    assert stats["active_users"][0] == {
        "user_id": admin.id,
        "name": admin.name,
        "activity_count": 3,
    }

    future = now_in_app_timezone() + timedelta(days=1)
    empty = client.get(
        "/activity-logs/statistics",
        params={
            "date_from": future.isoformat(),
            "date_to": (future + timedelta(days=1)).isoformat(),
        },
        headers=headers,
    ).json()
    assert empty["total_logs"] == 0
    assert empty["top_actions"] == []


def test_filter_options(client, auth_headers, make_user, make_resident, session):
    admin = make_user("admin@example.com")
    resident_user, _ = make_resident()
    headers = auth_headers("admin@example.com")
    _seed(session, admin, resident_user)

    options = client.get("/activity-logs/filters", headers=headers).json()

    assert options["actions"] == ["admin.backup", "created", "login", "updated"]
    assert options["model_types"] == ["Resident", "User"]
    assert {user["id"] for user in options["users"]} == {admin.id, resident_user.id}


def test_residents_cannot_read_activity_logs(client, auth_headers, make_resident):
    resident_user, _ = make_resident()

    response = client.get("/activity-logs/", headers=auth_headers(resident_user.email))

    assert response.status_code == 403


def test_registration_is_recorded(session, make_resident):
    user, _ = make_resident(email="maria@example.com")

    entries, total = ActivityLogRepository(session).list(
        ActivityLogFilters(action="created", model_type="User")
    )

    assert total == 1
    assert entries[0].model_id == user.id
    assert entries[0].user_id is None
    assert entries[0].new_values == {
        "name": user.name,
        "email": "maria@example.com",
        "role": "resident",
    }


def _seed_idle_residents(make_resident, backdate_resident, add_activity):
    """Create two inactive residents and two active ones."""

    make_resident(email="newcomer@example.com")

    _, never_seen = make_resident(email="never@example.com", first_name="Ana", last_name="Reyes")
    backdate_resident(never_seen.id, 400)

    long_gone_user, long_gone = make_resident(email="gone@example.com", first_name="Ben")
    backdate_resident(long_gone.id, 800)
    add_activity(long_gone_user.id, "login", days_ago=500)
    # Other actions do not count as engagement.
    add_activity(long_gone_user.id, "viewed", days_ago=1)

    returning_user, returning = make_resident(email="back@example.com")
    backdate_resident(returning.id, 900)
    add_activity(returning_user.id, "Resident.Profile.Updated", days_ago=10)

    return never_seen, long_gone


def test_inactive_residents_are_listed_longest_idle_first(
    client, auth_headers, make_user, make_resident, backdate_resident, add_activity
):
    make_user("admin@example.com")
    headers = auth_headers("admin@example.com")
    never_seen, long_gone = _seed_idle_residents(make_resident, backdate_resident, add_activity)

    response = client.get("/activity-logs/inactive-residents", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["last_page"] == 1
    first, second = body["inactive_residents"]
    assert (first["id"], first["days_inactive"]) == (long_gone.id, 500)
    assert (second["id"], second["days_inactive"]) == (never_seen.id, 400)
    assert second["full_name"] == "Ana Reyes"
    assert second["email"] == "never@example.com"
    assert second["for_review"] is False

    paged = client.get(
        "/activity-logs/inactive-residents",
        params={"page": 2, "per_page": 1},
        headers=headers,
    ).json()
    assert [entry["id"] for entry in paged["inactive_residents"]] == [never_seen.id]
    assert paged["last_page"] == 2


def test_flag_inactive_residents_marks_each_once(
    client, auth_headers, make_user, make_resident, backdate_resident, add_activity, session
):
    admin = make_user("admin@example.com")
    headers = auth_headers("admin@example.com")
    _seed_idle_residents(make_resident, backdate_resident, add_activity)

    assert client.get("/activity-logs/flagged-residents-count", headers=headers).json() == {
        "flagged_count": 0
    }

    response = client.post("/activity-logs/flag-inactive-residents", headers=headers)
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Successfully flagged 2 residents for review",
        "flagged_count": 2,
    }

    again = client.post("/activity-logs/flag-inactive-residents", headers=headers).json()
    assert again["flagged_count"] == 0

    count = client.get("/activity-logs/flagged-residents-count", headers=headers).json()
    assert count["flagged_count"] == 2

    listed = client.get("/activity-logs/inactive-residents", headers=headers).json()
    assert all(entry["for_review"] for entry in listed["inactive_residents"])

    entries, total = ActivityLogRepository(session).list(
        ActivityLogFilters(action="admin.flag_inactive_residents")
    )
    assert total == 2
    assert entries[0].user_id == admin.id


def test_cleanup_deletes_entries_older_than_retention(
    client, auth_headers, make_user, add_activity, session
):
    admin = make_user("admin@example.com")
    headers = auth_headers("admin@example.com")
    add_activity(admin.id, "exported", days_ago=120)
    add_activity(admin.id, "exported", days_ago=30)

    response = client.delete("/activity-logs/cleanup", headers=headers)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Successfully deleted 1 old activity logs",
        "deleted_count": 1,
    }

    narrower = client.delete(
        "/activity-logs/cleanup", params={"days": 7}, headers=headers
    ).json()
    assert narrower["deleted_count"] == 1

    _, remaining = ActivityLogRepository(session).list(ActivityLogFilters(action="exported"))
    assert remaining == 0
    _, cleanups = ActivityLogRepository(session).list(
        ActivityLogFilters(action="admin.cleanup_activity_logs")
    )
    assert cleanups == 2

    invalid = client.delete("/activity-logs/cleanup", params={"days": 0}, headers=headers)
    assert invalid.status_code == 422


def test_residents_cannot_use_maintenance_endpoints(client, auth_headers, make_resident):
    resident_user, _ = make_resident()
    headers = auth_headers(resident_user.email)

    assert client.get("/activity-logs/inactive-residents", headers=headers).status_code == 403
    assert client.post("/activity-logs/flag-inactive-residents", headers=headers).status_code == 403
    assert client.get("/activity-logs/flagged-residents-count", headers=headers).status_code == 403
    assert client.delete("/activity-logs/cleanup", headers=headers).status_code == 403
