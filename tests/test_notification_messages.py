"""Unit tests for notification titles and messages."""

from datetime import datetime

import pytest

from barangay.application.use_cases.notifications.messages import (
    build_message,
    format_notification_date,
    notification_title,
)
from barangay.domain.entities import NotificationCategory

CREATED_AT = datetime(2024, 3, 5, 14, 7, 9)


def test_format_notification_date():
    assert format_notification_date(CREATED_AT) == "03/05/2024, 2:07:09 PM"
    assert format_notification_date(datetime(2024, 1, 2, 0, 5, 0)) == "01/02/2024, 12:05:00 AM"
    assert format_notification_date("Yesterday") == "Yesterday"
    assert format_notification_date(None) is None


def test_asset_request_approved_message():
    message = build_message(
        {"type": "asset_request", "asset_request_id": 42, "status": "approved"}, CREATED_AT
    )

    assert message.startswith("Your request for Asset has been approved.")
    assert "Status: Approved" in message
    assert "Request #: 42" in message
    assert message.endswith("Date: 03/05/2024, 2:07:09 PM")


def test_custom_message_is_kept_and_augmented():
    payload = {
        "message": "Please bring a valid ID.",
        "document_type": "Barangay Clearance",
        "status": "approved",
        "document_request_id": 9,
        "asset_request_id": 3,
    }

    message = build_message(payload, CREATED_AT)

    assert message == (
        "Please bring a valid ID.\n\n"
        "Document Type: Barangay Clearance\n"
        "Status: Approved\n"
        "Request #: 9\n"
        "Date: 03/05/2024, 2:07:09 PM"
    )


def test_custom_message_without_details_still_gets_the_date():
    message = build_message({"message": "Hello"}, "03/01/2024, 9:00:00 AM")

    assert message == "Hello\n\nDate: 03/01/2024, 9:00:00 AM"


def test_document_request_denied_includes_reason():
    message = build_message(
        {"document_type": "Residency", "status": "denied", "reason": "Incomplete"},
        CREATED_AT,
    )

    assert message.startswith("Your Residency request has been denied. Reason: Incomplete")
    assert "Document Type: Residency" in message


def test_asset_payment_formats_amount():
    message = build_message({"type": "asset_payment", "amount": 1500}, CREATED_AT)

    assert "₱1,500.00" in message


def test_unclassified_payload_uses_generic_message():
    assert build_message({}, None) == "New notification"


def test_titles_follow_category():
    assert notification_title(NotificationCategory.ASSET_REQUEST) == "Asset Request Notification"
    assert notification_title(NotificationCategory.UNCLASSIFIED) == "Notification"


@pytest.mark.parametrize(
    ("payload", "headline"),
    [
        (
            {"document_type": "Clearance", "status": "approved"},
            "Great news! Your Clearance request has been approved and is ready for pickup.",
        ),
        (
            {"document_type": "Clearance", "status": "pending"},
            "Your Clearance request has been submitted and is pending review.",
        ),
        (
            {"document_type": "Clearance", "status": "processing"},
            "Your Clearance request is currently being processed.",
        ),
        ({"document_type": "Clearance", "status": "released"}, "Update on your Clearance request."),
        (
            {"certification_type": "Indigency", "status": "rejected"},
            "Your Indigency request has been denied.",
        ),
        ({"document_request_id": 4}, "Update on your Document request."),
        (
            {"asset_request_id": 1, "asset_name": "Tent", "status": "in_progress"},
            "Your request for Tent has been processed. Status: In Progress",
        ),
        (
            {"asset_request_id": 1, "asset_name": "Tent", "status": "processing"},
            "Your request for Tent has been processed. Status: In Progress",
        ),
        (
            {"asset_request_id": 1, "asset_name": "Tent", "status": "rejected"},
            "Your request for Tent has been denied.",
        ),
        (
            {"asset_request_id": 1, "asset_name": "Tent", "status": "pending"},
            "Your request for Tent has been submitted and is pending review.",
        ),
        ({"asset_request_id": 1}, "Update on your request for Asset."),
        ({"blotter_request_id": 2, "status": "approved"}, "Your blotter request has been approved."),
        ({"blotter_request_id": 2, "status": "denied"}, "Your blotter request has been denied."),
        ({"blotter_request_id": 2, "status": "pending"}, "Update on your blotter request."),
        ({"appointment_id": 5, "status": "scheduled"}, "Your blotter appointment has been confirmed."),
        ({"appointment_id": 5, "status": "canceled"}, "Your blotter appointment has been cancelled."),
        (
            {"appointment_id": 5, "status": "rescheduled"},
            "Your blotter appointment has been rescheduled.",
        ),
        (
            {"type": "announcement", "announcement_title": "Clean-up Drive"},
            "New announcement: Clean-up Drive",
        ),
        ({"announcement_id": 3}, "New announcement: Announcement"),
        (
            {"type": "program_announcement", "announcement_title": "Payout moved"},
            "New program announcement: Payout moved",
        ),
        (
            {"project_id": 3, "project_name": "Road Widening"},
            "New community Road Widening project has been posted. "
            "Check details in Projects page.",
        ),
        (
            {"type": "application_status", "status": "approved"},
            "Your application status: Approved",
        ),
        ({"benefit_id": 2}, "Update on your program application or benefit."),
        ({"program_id": 7, "program_name": "AICS"}, "Update regarding AICS program."),
        ({"program_id": 7}, "Update regarding Program program."),
        ({"program_name": "AICS"}, "Update regarding AICS program."),
    ],
)
def test_category_headlines(payload, headline):
    assert build_message(payload, None).split("\n\n")[0] == headline


def test_project_details_block():
    message = build_message({"project_id": 3, "project_name": "Road"}, CREATED_AT)

    assert message == (
        "New community Road project has been posted. Check details in Projects page.\n\n"
        "Project ID: 3\n"
        "Date: 03/05/2024, 2:07:09 PM"
    )


def test_benefit_update_details_block():
    message = build_message(
        {"type": "benefit_update", "status": "approved", "program_name": "4Ps"}, CREATED_AT
    )

    assert message == (
        "Your application status: Approved\n\n"
        "Program: 4Ps\n"
        "Status: Approved\n"
        "Date: 03/05/2024, 2:07:09 PM"
    )


def test_blotter_appointment_details_block():
    message = build_message({"appointment_id": 5, "status": "confirmed"}, CREATED_AT)

    assert message == (
        "Your blotter appointment has been confirmed.\n\n"
        "Status: Confirmed\n"
        "Appointment #: 5\n"
        "Date: 03/05/2024, 2:07:09 PM"
    )


def test_empty_document_type_does_not_fall_back_to_certification_type():
    payload = {"message": "Hi", "document_type": "", "certification_type": "Indigency"}

    assert build_message(payload, CREATED_AT) == "Hi\n\nDate: 03/05/2024, 2:07:09 PM"


def test_certification_type_is_used_when_document_type_is_missing():
    payload = {"message": "Hi", "certification_type": "Indigency"}

    assert build_message(payload, CREATED_AT) == (
        "Hi\n\nDocument Type: Indigency\nDate: 03/05/2024, 2:07:09 PM"
    )


def test_empty_asset_name_is_not_replaced():
    message = build_message({"asset_request_id": 1, "asset_name": "", "status": "approved"}, None)

    assert message.startswith("Your request for  has been approved.")
