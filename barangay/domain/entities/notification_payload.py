"""Typed views over the loosely structured notification payload.

Notifications are produced by several subsystems (document requests, asset
bookings, blotter reports, announcements, programs...) and each of them stores
an arbitrary JSON mapping in ``data``. :func:`parse_payload` inspects that
mapping once and turns it into exactly one variant class per
:class:`NotificationCategory`; the message and redirect helpers only ever work
with those variants.

Classification is an ordered, first-match-wins rule table: a payload carrying
``document_request_id`` is a document request even when it also carries an
``asset_request_id`` or ``program_id``. A key only counts as present when its
value is not ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .notification import NotificationCategory

Payload = Mapping[str, Any]


def has_value(payload: Payload, key: str) -> bool:
    """Return ``True`` when ``key`` exists in ``payload`` with a non-null value."""

    return payload.get(key) is not None


def _type_is(payload: Payload, *values: str) -> bool:
    return payload.get("type") in values


def _first_present(payload: Payload, *keys: str) -> Any:
    for key in keys:
        if has_value(payload, key):
            return payload[key]
    return None


@dataclass(frozen=True)
class DocumentRequestPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.DOCUMENT_REQUEST

    document_type: Any = None
    document_request_id: Any = None
    status: Any = None
    reason: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "DocumentRequestPayload":
        return cls(
            document_type=_first_present(payload, "document_type", "certification_type"),
            document_request_id=payload.get("document_request_id"),
            status=payload.get("status"),
            reason=payload.get("reason"),
        )


@dataclass(frozen=True)
class AssetRequestPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.ASSET_REQUEST

    asset_request_id: Any = None
    asset_name: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "AssetRequestPayload":
        return cls(
            asset_request_id=payload.get("asset_request_id"),
            asset_name=payload.get("asset_name"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class AssetPaymentPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.ASSET_PAYMENT

    asset_request_id: Any = None
    asset_name: Any = None
    amount: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "AssetPaymentPayload":
        return cls(
            asset_request_id=payload.get("asset_request_id"),
            asset_name=payload.get("asset_name"),
            amount=payload.get("amount"),
        )


@dataclass(frozen=True)
class BlotterRequestPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.BLOTTER_REQUEST

    blotter_request_id: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "BlotterRequestPayload":
        return cls(
            blotter_request_id=payload.get("blotter_request_id"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class BlotterAppointmentPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.BLOTTER_APPOINTMENT

    appointment_id: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "BlotterAppointmentPayload":
        return cls(
            appointment_id=payload.get("appointment_id"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class AnnouncementPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.ANNOUNCEMENT

    announcement_id: Any = None
    announcement_title: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "AnnouncementPayload":
        return cls(
            announcement_id=payload.get("announcement_id"),
            announcement_title=payload.get("announcement_title"),
        )


@dataclass(frozen=True)
class ProgramAnnouncementPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.PROGRAM_ANNOUNCEMENT

    program_announcement_id: Any = None
    program_id: Any = None
    program_name: Any = None
    announcement_title: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "ProgramAnnouncementPayload":
        return cls(
            program_announcement_id=payload.get("program_announcement_id"),
            program_id=payload.get("program_id"),
            program_name=payload.get("program_name"),
            announcement_title=payload.get("announcement_title"),
        )


@dataclass(frozen=True)
class ProjectPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.PROJECT

    project_id: Any = None
    project_name: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "ProjectPayload":
        return cls(
            project_id=payload.get("project_id"),
            project_name=payload.get("project_name"),
        )


@dataclass(frozen=True)
class BenefitUpdatePayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.BENEFIT_UPDATE

    submission_id: Any = None
    benefit_id: Any = None
    program_name: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "BenefitUpdatePayload":
        return cls(
            submission_id=payload.get("submission_id"),
            benefit_id=payload.get("benefit_id"),
            program_name=payload.get("program_name"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class GenericProgramPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.GENERIC_PROGRAM

    program_id: Any = None
    program_name: Any = None
    beneficiary_id: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "GenericProgramPayload":
        return cls(
            program_id=payload.get("program_id"),
            program_name=payload.get("program_name"),
            beneficiary_id=payload.get("beneficiary_id"),
            status=payload.get("status"),
        )


@dataclass(frozen=True)
class UnclassifiedPayload:
    category: ClassVar[NotificationCategory] = NotificationCategory.UNCLASSIFIED

    program_name: Any = None
    status: Any = None

    @classmethod
    def from_payload(cls, payload: Payload) -> "UnclassifiedPayload":
        return cls(
            program_name=payload.get("program_name"),
            status=payload.get("status"),
        )


NotificationPayload = Union[
    DocumentRequestPayload,
    AssetRequestPayload,
    AssetPaymentPayload,
    BlotterRequestPayload,
    BlotterAppointmentPayload,
    AnnouncementPayload,
    ProgramAnnouncementPayload,
    ProjectPayload,
    BenefitUpdatePayload,
    GenericProgramPayload,
    UnclassifiedPayload,
]

# Priority order matters: earlier rules dominate later ones.
CLASSIFICATION_RULES: tuple[tuple[NotificationCategory, Callable[[Payload], bool]], ...] = (
    (
        NotificationCategory.DOCUMENT_REQUEST,
        lambda p: has_value(p, "document_request_id")
        or _type_is(p, "document_request_status")
        or has_value(p, "document_type")
        or has_value(p, "certification_type"),
    ),
    (
        NotificationCategory.ASSET_REQUEST,
        lambda p: has_value(p, "asset_request_id") or _type_is(p, "asset_request"),
    ),
    (NotificationCategory.ASSET_PAYMENT, lambda p: _type_is(p, "asset_payment")),
    (
        NotificationCategory.BLOTTER_REQUEST,
        lambda p: has_value(p, "blotter_request_id") or _type_is(p, "blotter_request"),
    ),
    (
        NotificationCategory.BLOTTER_APPOINTMENT,
        lambda p: has_value(p, "appointment_id") or _type_is(p, "blotter_appointment"),
    ),
    (
        NotificationCategory.ANNOUNCEMENT,
        lambda p: _type_is(p, "announcement") or has_value(p, "announcement_id"),
    ),
    (
        NotificationCategory.PROGRAM_ANNOUNCEMENT,
        lambda p: _type_is(p, "program_announcement")
        or has_value(p, "program_announcement_id"),
    ),
    (
        NotificationCategory.PROJECT,
        lambda p: _type_is(p, "project") or has_value(p, "project_id"),
    ),
    (
        NotificationCategory.BENEFIT_UPDATE,
        lambda p: _type_is(p, "benefit_update", "application_status")
        or has_value(p, "submission_id")
        or has_value(p, "benefit_id"),
    ),
    (NotificationCategory.GENERIC_PROGRAM, lambda p: has_value(p, "program_id")),
)

PAYLOAD_VARIANTS: dict[NotificationCategory, type] = {
    variant.category: variant
    for variant in (
        DocumentRequestPayload,
        AssetRequestPayload,
        AssetPaymentPayload,
        BlotterRequestPayload,
        BlotterAppointmentPayload,
        AnnouncementPayload,
        ProgramAnnouncementPayload,
        ProjectPayload,
        BenefitUpdatePayload,
        GenericProgramPayload,
        UnclassifiedPayload,
    )
}


def classify(payload: Payload | None) -> NotificationCategory:
    """Return the first category whose rule matches ``payload``."""

    payload = payload or {}
    for category, matches in CLASSIFICATION_RULES:
        if matches(payload):
            return category
    return NotificationCategory.UNCLASSIFIED


def parse_payload(payload: Payload | None) -> NotificationPayload:
    """Map the raw ``payload`` mapping into its typed variant."""

    payload = payload or {}
    variant = PAYLOAD_VARIANTS[classify(payload)]
    return variant.from_payload(payload)


__all__ = [
    "AnnouncementPayload",
    "AssetPaymentPayload",
    "AssetRequestPayload",
    "BenefitUpdatePayload",
    "BlotterAppointmentPayload",
    "BlotterRequestPayload",
    "CLASSIFICATION_RULES",
    "DocumentRequestPayload",
    "GenericProgramPayload",
    "NotificationPayload",
    "PAYLOAD_VARIANTS",
    "ProgramAnnouncementPayload",
    "ProjectPayload",
    "UnclassifiedPayload",
    "classify",
    "has_value",
    "parse_payload",
]
