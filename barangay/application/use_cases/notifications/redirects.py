"""Client-side redirect targets for notifications."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from barangay.domain.entities import NotificationSource
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

DOCUMENT_STATUS_PATH = "/residents/requestDocuments?status"
ASSET_REQUESTS_PATH = "/residents/statusassetrequests"
BLOTTER_REQUESTS_PATH = "/residents/statusBlotterRequests"
DASHBOARD_PATH = "/residents/dashboard"
PROJECTS_PATH = "/residents/projects"
BENEFITS_PATH = "/residents/myBenefits"
ENROLLED_PROGRAMS_PATH = "/residents/enrolledPrograms"

LEGACY_DOCUMENT_PATHS = frozenset(
    {"/residents/documents/status", "/residents/statusDocumentRequests"}
)


def _with_id(path: str, value: Any) -> str:
    return f"{path}?id={value}" if value else path


def enrolled_programs_path(program_id: Any, beneficiary_id: Any = None) -> str:
    if not program_id:
        return ENROLLED_PROGRAMS_PATH
    path = f"{ENROLLED_PROGRAMS_PATH}?program={program_id}"
    if beneficiary_id:
        path += f"&beneficiary={beneficiary_id}"
    return path


def _document_request(payload: DocumentRequestPayload) -> str:
    return DOCUMENT_STATUS_PATH


def _asset_request(payload: AssetRequestPayload) -> str:
    return _with_id(ASSET_REQUESTS_PATH, payload.asset_request_id)


def _asset_payment(payload: AssetPaymentPayload) -> str:
    return _with_id(ASSET_REQUESTS_PATH, payload.asset_request_id)


def _blotter_request(payload: BlotterRequestPayload) -> str:
    return _with_id(BLOTTER_REQUESTS_PATH, payload.blotter_request_id)


def _blotter_appointment(payload: BlotterAppointmentPayload) -> str:
    return _with_id(BLOTTER_REQUESTS_PATH, payload.appointment_id)


def _announcement(payload: AnnouncementPayload) -> str:
    if payload.announcement_id:
        return f"{DASHBOARD_PATH}?tab=announcements&id={payload.announcement_id}"
    return f"{DASHBOARD_PATH}?tab=announcements"


def _program_announcement(payload: ProgramAnnouncementPayload) -> str:
    announcement_id = payload.program_announcement_id
    if announcement_id:
        return (
            f"{DASHBOARD_PATH}?section=programs&announcement={announcement_id}"
            f"#announcement-{announcement_id}"
        )
    if payload.program_id:
        return (
            f"{DASHBOARD_PATH}?section=programs&program={payload.program_id}"
            f"#program-{payload.program_id}"
        )
    return f"{DASHBOARD_PATH}?section=programs#available-programs"


def _project(payload: ProjectPayload) -> str:
    return _with_id(PROJECTS_PATH, payload.project_id)


def _benefit_update(payload: BenefitUpdatePayload) -> str:
    if payload.submission_id:
        return f"{BENEFITS_PATH}?submission={payload.submission_id}"
    if payload.benefit_id:
        return f"{BENEFITS_PATH}?benefit={payload.benefit_id}"
    return BENEFITS_PATH


def _generic_program(payload: GenericProgramPayload) -> str:
    return enrolled_programs_path(payload.program_id, payload.beneficiary_id)


def _unclassified(payload: UnclassifiedPayload) -> None:
    return None


_ROUTES: dict[type, Callable[[Any], str | None]] = {
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


def resolve_redirect(
    payload: Mapping[str, Any] | None,
    source: NotificationSource = NotificationSource.FRAMEWORK,
    *,
    parsed: NotificationPayload | None = None,
) -> str | None:
    """Return the portal route a notification should open, or ``None``.

    Explicit ``action_url`` wins (legacy document status URLs are rewritten),
    then ``redirect_path``, then the route computed from the payload category.
    Custom notifications that match no category fall back to the enrolled
    programs page.
    """

    payload = payload or {}
    if has_value(payload, "action_url"):
        action_url = payload["action_url"]
        if action_url in LEGACY_DOCUMENT_PATHS:
            return DOCUMENT_STATUS_PATH
        return action_url

    if has_value(payload, "redirect_path"):
        return payload["redirect_path"]

    parsed = parsed if parsed is not None else parse_payload(payload)
    path = _ROUTES[type(parsed)](parsed)
    if path is not None:
        return path

    if source is NotificationSource.CUSTOM:
        return enrolled_programs_path(payload.get("program_id"), payload.get("beneficiary_id"))
    return None


__all__ = [
    "DOCUMENT_STATUS_PATH",
    "ENROLLED_PROGRAMS_PATH",
    "LEGACY_DOCUMENT_PATHS",
    "enrolled_programs_path",
    "resolve_redirect",
]
