"""Unit tests for notification payload classification."""

import pytest

from barangay.domain.entities import NotificationCategory
from barangay.domain.entities.notification_payload import (
    AssetRequestPayload,
    DocumentRequestPayload,
    GenericProgramPayload,
    UnclassifiedPayload,
    classify,
    parse_payload,
)


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"document_request_id": 1}, NotificationCategory.DOCUMENT_REQUEST),
        ({"type": "document_request_status"}, NotificationCategory.DOCUMENT_REQUEST),
        ({"certification_type": "Residency"}, NotificationCategory.DOCUMENT_REQUEST),
        ({"type": "asset_request"}, NotificationCategory.ASSET_REQUEST),
        ({"type": "asset_payment", "amount": 100}, NotificationCategory.ASSET_PAYMENT),
        ({"blotter_request_id": 3}, NotificationCategory.BLOTTER_REQUEST),
        ({"appointment_id": 4}, NotificationCategory.BLOTTER_APPOINTMENT),
        ({"announcement_id": 5}, NotificationCategory.ANNOUNCEMENT),
        ({"type": "program_announcement"}, NotificationCategory.PROGRAM_ANNOUNCEMENT),
        ({"project_id": 6}, NotificationCategory.PROJECT),
        ({"type": "application_status"}, NotificationCategory.BENEFIT_UPDATE),
        ({"benefit_id": 7}, NotificationCategory.BENEFIT_UPDATE),
        ({"program_id": 8}, NotificationCategory.GENERIC_PROGRAM),
        ({}, NotificationCategory.UNCLASSIFIED),
    ],
)
def test_classify_recognises_each_category(payload, expected):
    assert classify(payload) is expected


def test_earlier_rules_dominate_later_ones():
    """A document id wins over asset, blotter and program keys present together."""

    payload = {
        "document_request_id": 10,
        "asset_request_id": 11,
        "blotter_request_id": 12,
        "program_id": 13,
        "type": "project",
    }

    assert classify(payload) is NotificationCategory.DOCUMENT_REQUEST


def test_asset_request_beats_asset_payment_type():
    assert classify({"asset_request_id": 1, "type": "asset_payment"}) is (
        NotificationCategory.ASSET_REQUEST
    )


def test_announcement_beats_program_announcement():
    payload = {"announcement_id": 1, "program_announcement_id": 2}

    assert classify(payload) is NotificationCategory.ANNOUNCEMENT


def test_null_values_do_not_count_as_present():
    payload = {"document_request_id": None, "program_id": None}

    assert classify(payload) is NotificationCategory.UNCLASSIFIED
    assert classify(None) is NotificationCategory.UNCLASSIFIED


def test_parse_payload_returns_the_matching_variant():
    parsed = parse_payload({"certification_type": "Indigency", "status": "pending"})

    assert isinstance(parsed, DocumentRequestPayload)
    assert parsed.document_type == "Indigency"
    assert parsed.category is NotificationCategory.DOCUMENT_REQUEST

    assert isinstance(parse_payload({"asset_request_id": 42}), AssetRequestPayload)
    assert isinstance(parse_payload({"program_id": 7}), GenericProgramPayload)
    assert isinstance(parse_payload({"foo": "bar"}), UnclassifiedPayload)
