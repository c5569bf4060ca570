"""API tests for the admin-editable email sender."""

from unittest.mock import patch

from travel_admin.core.config import settings
from travel_admin.services.notifications import Sender

CONTACT = {"name": "Ben", "email": "ben@example.com", "subject": "Visa", "message": "Do I need one?"}


def test_email_settings_require_auth(client):
    assert client.get("/api/email-settings").status_code == 401
    assert client.post("/api/email-settings", json={"from_email": "a@b.test", "from_name": "A"}).status_code == 401


def test_no_settings_saved_yet(client, auth_headers):
    assert client.get("/api/email-settings", headers=auth_headers).json() == {"settings": None}


def test_save_and_update_settings(client, auth_headers):
    r = client.post(
        "/api/email-settings",
        json={"from_email": "bookings@site.test", "from_name": "Bookings"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["settings"]["from_email"] == "bookings@site.test"

    client.post(
        "/api/email-settings",
        json={"from_email": "hello@site.test", "from_name": "Hello Team"},
        headers=auth_headers,
    )
    stored = client.get("/api/email-settings", headers=auth_headers).json()["settings"]
    assert stored["id"] == 1
    assert (stored["from_email"], stored["from_name"]) == ("hello@site.test", "Hello Team")


def test_settings_validation(client, auth_headers):
    assert client.post(
        "/api/email-settings", json={"from_email": "not-an-email", "from_name": "X"}, headers=auth_headers
    ).status_code == 422
    assert client.post(
        "/api/email-settings", json={"from_email": "a@b.test", "from_name": ""}, headers=auth_headers
    ).status_code == 422


def test_notification_uses_stored_sender(client, auth_headers):
    client.post(
        "/api/email-settings",
        json={"from_email": "bookings@site.test", "from_name": "Bookings"},
        headers=auth_headers,
    )
    with patch("travel_admin.api.v1.contacts.notify_new_contact") as notify:
        client.post("/api/contacts", json=CONTACT)
    assert notify.call_args.args[1] == Sender("bookings@site.test", "Bookings")


def test_notification_falls_back_to_configured_sender(client):
    with patch("travel_admin.api.v1.enquiries.notify_new_enquiry") as notify:
        client.post("/api/enquiries", json={"name": "Asha", "email": "asha@example.com"})
    assert notify.call_args.args[1] == Sender(settings.MAIL_FROM_EMAIL, settings.MAIL_FROM_NAME)
