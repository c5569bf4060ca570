# travel_admin/services/notifications.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, NamedTuple, Optional

import requests
from jinja2 import Environment, FileSystemLoader, select_autoescape

from travel_admin.core.config import settings

logger = logging.getLogger(__name__)

BREVO_API = "https://api.brevo.com/v3/smtp/email"


class Sender(NamedTuple):
    email: str
    name: str


def default_sender() -> Sender:
    return Sender(email=settings.MAIL_FROM_EMAIL, name=settings.MAIL_FROM_NAME)


templates = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent.parent / "templates"),
    autoescape=select_autoescape(["html"]),
)


def send_email_brevo(
    to_email: str,
    subject: str,
    html_content: str,
    reply_to: str | None = None,
    sender: Optional[Sender] = None,
) -> dict:
    key = settings.BREVO_API_KEY
    if not key:
        raise RuntimeError("BREVO_API_KEY missing")

    sender = sender or default_sender()
    payload: dict[str, Any] = {
        "sender": {"email": sender.email, "name": sender.name},
        "to": [{"email": to_email}],
        "subject": subject,
        "htmlContent": html_content,
    }
    if reply_to:
        payload["replyTo"] = {"email": reply_to}

    r = requests.post(
        BREVO_API,
        json=payload,
        headers={
            "api-key": key,
            "accept": "application/json",
            "content-type": "application/json",
        },
        timeout=20,
    )

    if r.status_code >= 400:
        raise RuntimeError(f"Brevo error {r.status_code} body={r.text}")

    return r.json()


def _notify_admin(template: str, subject: str, data: Mapping[str, Any], sender: Optional[Sender] = None) -> None:
    """
    Email the admin inbox. Runs as a background task after the response,
    so failures are logged and never reach the submitter.
    """
    sender = sender or default_sender()
    to_email = settings.ADMIN_NOTIFICATION_EMAIL or sender.email
    if not settings.BREVO_API_KEY:
        logger.warning("BREVO_API_KEY not configured; %r email not sent", subject)
        return

    html = templates.get_template(template).render(
        data=data,
        logo_url=f"{settings.public_base_url}/assets/images/logo.webp",
    )
    try:
        send_email_brevo(to_email, subject, html, reply_to=data.get("email"), sender=sender)
    except (requests.RequestException, RuntimeError) as e:
        logger.warning("Failed to send %r email: %s", subject, e)


def notify_new_enquiry(enquiry: Mapping[str, Any], sender: Optional[Sender] = None) -> None:
    topic = enquiry.get("tour") or enquiry.get("destination") or "Travel Package"
    _notify_admin("email/enquiry.html", f"New Enquiry: {topic}", enquiry, sender)


def notify_new_contact(contact: Mapping[str, Any], sender: Optional[Sender] = None) -> None:
    _notify_admin("email/contact.html", f"Contact Form: {contact.get('subject')}", contact, sender)
