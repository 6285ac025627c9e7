"""Display titles and messages for unified notifications."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from barangay.domain.entities import NotificationCategory
from barangay.domain.entities.notification_payload import (
    AnnouncementPayload,
    AssetPaymentPayload,
    AssetRequestPayload,
    BenefitUpdatePayload,
    BlotterAppointmentPayload,
    BlotterRequestPayload,
    DocumentRequestPayload,
    GenericProgramPayload,
    NotificationPayload,
    ProgramAnnouncementPayload,
    ProjectPayload,
    UnclassifiedPayload,
    has_value,
    parse_payload,
)

NOTIFICATION_TITLES: dict[NotificationCategory, str] = {
    NotificationCategory.DOCUMENT_REQUEST: "Document Request Notification",
    NotificationCategory.ASSET_REQUEST: "Asset Request Notification",
    NotificationCategory.ASSET_PAYMENT: "Asset Payment Notification",
    NotificationCategory.BLOTTER_REQUEST: "Blotter Request Notification",
    NotificationCategory.BLOTTER_APPOINTMENT: "Blotter Appointment Notification",
    NotificationCategory.ANNOUNCEMENT: "Announcement Notification",
    NotificationCategory.PROGRAM_ANNOUNCEMENT: "Program Announcement Notification",
    NotificationCategory.PROJECT: "Project Update Notification",
    NotificationCategory.BENEFIT_UPDATE: "Benefits Update Notification",
    NotificationCategory.GENERIC_PROGRAM: "Program Notification",
    NotificationCategory.UNCLASSIFIED: "Notification",
}

DateLike = datetime | str | None


def notification_title(category: NotificationCategory) -> str:
    return NOTIFICATION_TITLES[category]


def format_notification_date(value: DateLike) -> str | None:
    """Render ``value`` as ``MM/DD/YYYY, H:MM:SS AM``; strings pass through."""

    if value is None:
        return None
    if isinstance(value, str):
        return value
    hour = value.hour % 12 or 12
    return f"{value:%m/%d/%Y}, {hour}:{value:%M:%S %p}"


def capitalize_first(value: Any) -> str:
    text = str(value)
    return text[:1].upper() + text[1:]


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def build_message(
    payload: Mapping[str, Any] | None,
    created_at: DateLike,
    *,
    parsed: NotificationPayload | None = None,
) -> str:
    """Return the long-form message for a notification.

    A caller-supplied ``payload["message"]`` is kept verbatim and always
    followed by a details block; otherwise the category template is used.
    """

    payload = payload or {}
    custom_message = payload.get("message")
    if custom_message:
        details = _custom_message_details(payload, created_at)
        return f"{custom_message}\n\n" + "\n".join(details)

    parsed = parsed if parsed is not None else parse_payload(payload)
    template = _TEMPLATES[type(parsed)]
    message, details = template(parsed, created_at)
    if not details:
        return message
    return f"{message}\n\n" + "\n".join(details)


def _custom_message_details(payload: Mapping[str, Any], created_at: DateLike) -> list[str]:
    details: list[str] = []
    document_type = _default(payload.get("document_type"), payload.get("certification_type"))
    if document_type:
        details.append(f"Document Type: {document_type}")
    if has_value(payload, "status"):
        details.append(f"Status: {capitalize_first(payload['status'])}")
    for key in ("document_request_id", "asset_request_id", "blotter_request_id"):
        if has_value(payload, key):
            details.append(f"Request #: {payload[key]}")
            break
    _append_date(details, created_at)
    return details


def _append_date(details: list[str], created_at: DateLike) -> None:
    date = format_notification_date(created_at)
    if date:
        details.append(f"Date: {date}")


def _status_details(status: Any, request_id: Any, created_at: DateLike) -> list[str]:
    details: list[str] = []
    if status:
        details.append(f"Status: {capitalize_first(status)}")
    if request_id:
        details.append(f"Request #: {request_id}")
    _append_date(details, created_at)
    return details


def _document_request(payload: DocumentRequestPayload, created_at: DateLike):
    document_type = _default(payload.document_type, "Document")
    status = payload.status
    if status == "approved":
        message = (
            f"Great news! Your {document_type} request has been approved "
            "and is ready for pickup."
        )
    elif status in ("denied", "rejected"):
        message = f"Your {document_type} request has been denied."
        if payload.reason is not None:
            message += f" Reason: {payload.reason}"
    elif status == "processing":
        message = f"Your {document_type} request is currently being processed."
    elif status == "pending":
        message = f"Your {document_type} request has been submitted and is pending review."
    else:
        message = f"Update on your {document_type} request."

    details = [f"Document Type: {document_type}"]
    details.extend(_status_details(status, payload.document_request_id, created_at))
    return message, details


def _asset_request(payload: AssetRequestPayload, created_at: DateLike):
    asset_name = _default(payload.asset_name, "Asset")
    status = payload.status
    if status == "approved":
        message = f"Your request for {asset_name} has been approved."
    elif status in ("denied", "rejected"):
        message = f"Your request for {asset_name} has been denied."
    elif status in ("processing", "in_progress"):
        message = f"Your request for {asset_name} has been processed. Status: In Progress"
    elif status == "pending":
        message = f"Your request for {asset_name} has been submitted and is pending review."
    else:
        message = f"Update on your request for {asset_name}."
    return message, _status_details(status, payload.asset_request_id, created_at)


def _asset_payment(payload: AssetPaymentPayload, created_at: DateLike):
    asset_name = _default(payload.asset_name, "Asset")
    message = f"Payment for your {asset_name} request"
    if payload.amount is not None:
        message += f" of ₱{float(payload.amount):,.2f}"
    message += " has been processed successfully."
    return message, _status_details(None, payload.asset_request_id, created_at)


def _blotter_request(payload: BlotterRequestPayload, created_at: DateLike):
    status = payload.status
    if status == "approved":
        message = "Your blotter request has been approved."
    elif status in ("denied", "rejected"):
        message = "Your blotter request has been denied."
    else:
        message = "Update on your blotter request."
    return message, _status_details(status, payload.blotter_request_id, created_at)


def _blotter_appointment(payload: BlotterAppointmentPayload, created_at: DateLike):
    status = payload.status
    if status in ("approved", "confirmed", "scheduled"):
        message = "Your blotter appointment has been confirmed."
    elif status in ("cancelled", "canceled"):
        message = "Your blotter appointment has been cancelled."
    elif status in ("rescheduled",):
        message = "Your blotter appointment has been rescheduled."
    else:
        message = "Update on your blotter appointment."

    details: list[str] = []
    if status:
        details.append(f"Status: {capitalize_first(status)}")
    if payload.appointment_id:
        details.append(f"Appointment #: {payload.appointment_id}")
    _append_date(details, created_at)
    return message, details


def _announcement(payload: AnnouncementPayload, created_at: DateLike):
    title = _default(payload.announcement_title, "Announcement")
    details: list[str] = []
    _append_date(details, created_at)
    return f"New announcement: {title}", details


def _program_announcement(payload: ProgramAnnouncementPayload, created_at: DateLike):
    title = _default(payload.announcement_title, "Program Announcement")
    message = f"New program announcement: {title}"
    details: list[str] = []
    if payload.program_name:
        details.append(f"Program: {payload.program_name}")
    _append_date(details, created_at)
    return message, details


def _project(payload: ProjectPayload, created_at: DateLike):
    project_name = _default(payload.project_name, "Project")
    message = (
        f"New community {project_name} project has been posted. "
        "Check details in Projects page."
    )
    details: list[str] = []
    if payload.project_id is not None:
        details.append(f"Project ID: {payload.project_id}")
    _append_date(details, created_at)
    return message, details


def _program_details(program_name: Any, status: Any, created_at: DateLike) -> list[str]:
    details: list[str] = []
    if program_name is not None:
        details.append(f"Program: {program_name}")
    if status:
        details.append(f"Status: {capitalize_first(status)}")
    _append_date(details, created_at)
    return details


def _benefit_update(payload: BenefitUpdatePayload, created_at: DateLike):
    if payload.status:
        message = f"Your application status: {capitalize_first(payload.status)}"
    else:
        message = "Update on your program application or benefit."
    return message, _program_details(payload.program_name, payload.status, created_at)


def _generic_program(payload: GenericProgramPayload, created_at: DateLike):
    program_name = _default(payload.program_name, "Program")
    message = f"Update regarding {program_name} program."
    return message, _program_details(payload.program_name, payload.status, created_at)


def _unclassified(payload: UnclassifiedPayload, created_at: DateLike):
    if payload.program_name is not None:
        message = f"Update regarding {payload.program_name} program."
        return message, _program_details(payload.program_name, payload.status, created_at)
    details: list[str] = []
    _append_date(details, created_at)
    return "New notification", details


_TEMPLATES: dict[type, Callable[[Any, DateLike], tuple[str, list[str]]]] = {
    DocumentRequestPayload: _document_request,
    AssetRequestPayload: _asset_request,
    AssetPaymentPayload: _asset_payment,
    BlotterRequestPayload: _blotter_request,
    BlotterAppointmentPayload: _blotter_appointment,
    AnnouncementPayload: _announcement,
    ProgramAnnouncementPayload: _program_announcement,
    ProjectPayload: _project,
    BenefitUpdatePayload: _benefit_update,
    GenericProgramPayload: _generic_program,
    UnclassifiedPayload: _unclassified,
}


__all__ = [
    "NOTIFICATION_TITLES",
    "build_message",
    "capitalize_first",
    "format_notification_date",
    "notification_title",
]
