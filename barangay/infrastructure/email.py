"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from barangay.config import get_settings

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Summarise a SendGrid error body, preferring its ``errors[].message`` list."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except ValueError:
            return body
    if body is None:
        return None
    if not isinstance(body, dict):
        return str(body)

    reported = [
        str(error["message"])
        for error in body.get("errors") or ()
        if isinstance(error, dict) and error.get("message")
    ]
    if reported:
        return "; ".join(reported)
    return json.dumps(body, default=str)


def _log_sendgrid_failure(status_code: Any, body: Any) -> None:
    parts = ["SendGrid request failed"]
    if status_code:
        parts.append(f"with status {status_code}")
    details = _extract_sendgrid_error_details(body)
    logger.error("%s: %s", " ".join(parts), details or "no details returned")


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Deliver one HTML message; returns ``False`` when skipped or rejected."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("Email to %s skipped: SendGrid is not configured", recipient)
        return False

    mail = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )
    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(mail)
    except Exception as exc:
        # python-http-client raises HTTPError subclasses carrying status and body.
        _log_sendgrid_failure(getattr(exc, "status_code", None), getattr(exc, "body", None))
        return False

    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int) and 200 <= status_code < 300:
        return True
    _log_sendgrid_failure(status_code, getattr(response, "body", None))
    return False


def send_program_announcement_email(
    email: str,
    *,
    announcement_title: str,
    announcement_content: str,
    program_name: str | None,
    link: str,
) -> bool:
    """Tell a resident about a newly published program announcement."""

    program_label = escape(program_name or "a barangay program")
    subject = f"New announcement: {announcement_title}"
    html_content = "".join(
        (
            "<p>Hello,</p>",
            f"<p>A new announcement was published for {program_label}.</p>",
            f"<h3>{escape(announcement_title)}</h3>",
            f"<p>{escape(announcement_content)}</p>",
            f'<p><a href="{escape(link, quote=True)}">View it in the resident portal</a></p>',
        )
    )
    return send_email(subject, html_content, email)
