"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json
import types

import pytest

from barangay.infrastructure import email as email_module


class DummySettings:
    sendgrid_api_key = "SG.fake"
    sendgrid_sender = "sender@example.com"


class RecordingClient:
    """Stand-in for ``SendGridAPIClient`` that records sent messages."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        RecordingClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    class Unconfigured:
        sendgrid_api_key = None
        sendgrid_sender = None

    monkeypatch.setattr(email_module, "get_settings", lambda: Unconfigured())

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False


def test_send_email_success(monkeypatch: pytest.MonkeyPatch) -> None:
    RecordingClient.sent = []
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is True
    assert len(RecordingClient.sent) == 1


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog):
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class ForbiddenClient(RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(
                status_code=403,
                body=json.dumps(
                    {"errors": [{"message": "The provided authorization grant is invalid."}]}
                ),
            )

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", ForbiddenClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_extract_error_details_handles_plain_text():
    assert email_module._extract_sendgrid_error_details(b"  oops  ") == "oops"
    assert email_module._extract_sendgrid_error_details("") is None


def test_program_announcement_email_escapes_content(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def fake_send(subject, html_content, recipient):
        captured.update(subject=subject, html=html_content, recipient=recipient)
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send)

    assert email_module.send_program_announcement_email(
        "juan@example.com",
        announcement_title="<b>Payout</b>",
        announcement_content="Bring ID & proof",
        program_name=None,
        link="http://localhost:3000/residents/dashboard?section=programs",
    )
    assert captured["subject"] == "New announcement: <b>Payout</b>"
    assert "&lt;b&gt;Payout&lt;/b&gt;" in captured["html"]
    assert "Bring ID &amp; proof" in captured["html"]
    assert "a barangay program" in captured["html"]
    assert captured["recipient"] == "juan@example.com"
