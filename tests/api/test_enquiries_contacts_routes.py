"""API tests for the public enquiry / contact forms and their admin views."""

from unittest.mock import patch

import pytest

ENQUIRY = {
    "tour": "Select Tour Country",
    "name": "Asha",
    "email": "asha@example.com",
    "mobile": "+44 7000 000000",
    "livingCountry": "UK",
    "destination": "Sri Lanka",
    "arrivalDate": "2026-03-01",
    "departureDate": "",
    "adults": "2",
    "children": "",
    "flightStatus": "Booked",
    "message": "Honeymoon",
}

CONTACT = {"name": "Ben", "email": "ben@example.com", "subject": "Visa", "message": "Do I need one?"}


@pytest.fixture(autouse=True)
def no_email():
    with patch("travel_admin.api.v1.enquiries.notify_new_enquiry") as enquiry, \
            patch("travel_admin.api.v1.contacts.notify_new_contact") as contact:
        yield enquiry, contact


def test_submit_enquiry(client, auth_headers, no_email):
    r = client.post("/api/enquiries", json=ENQUIRY)
    assert r.status_code == 201
    assert r.json() == {"success": True, "message": "Enquiry submitted successfully"}

    enquiries = client.get("/api/enquiries", headers=auth_headers).json()["enquiries"]
    assert len(enquiries) == 1
    e = enquiries[0]
    assert e["tour"] is None
    assert e["destination"] == "Sri Lanka"
    assert e["living_country"] == "UK"
    assert e["arrival_date"] == "2026-03-01"
    assert e["departure_date"] is None
    assert e["adults"] == 2 and e["children"] is None
    assert e["status"] == "pending"

    sent = no_email[0].call_args.args[0]
    assert sent["email"] == "asha@example.com"


@pytest.mark.parametrize("missing", ["name", "email"])
def test_enquiry_requires_name_and_email(client, missing):
    data = dict(ENQUIRY)
    del data[missing]
    assert client.post("/api/enquiries", json=data).status_code == 422


def test_enquiry_admin_endpoints_need_auth(client):
    assert client.get("/api/enquiries").status_code == 401
    assert client.get("/api/enquiries/1").status_code == 401
    assert client.put("/api/enquiries/1", json={"status": "done"}).status_code == 401
    assert client.delete("/api/enquiries/1").status_code == 401


def test_enquiry_status_filter_update_delete(client, auth_headers):
    client.post("/api/enquiries", json=ENQUIRY)
    client.post("/api/enquiries", json={**ENQUIRY, "name": "Second"})
    first_id = client.get("/api/enquiries", headers=auth_headers).json()["enquiries"][-1]["id"]

    r = client.put(f"/api/enquiries/{first_id}", json={"status": "contacted"}, headers=auth_headers)
    assert r.json()["success"] is True

    contacted = client.get("/api/enquiries", params={"status": "contacted"}, headers=auth_headers).json()
    assert [e["id"] for e in contacted["enquiries"]] == [first_id]

    assert client.get(f"/api/enquiries/{first_id}", headers=auth_headers).json()["enquiry"]["status"] == "contacted"
    assert client.put(f"/api/enquiries/{first_id}", json={"status": ""}, headers=auth_headers).status_code == 422

    assert client.delete(f"/api/enquiries/{first_id}", headers=auth_headers).json() == {"success": True}
    assert client.get(f"/api/enquiries/{first_id}", headers=auth_headers).status_code == 404


def test_submit_contact(client, auth_headers, no_email):
    r = client.post("/api/contacts", json=CONTACT)
    assert r.status_code == 201
    assert r.json()["message"] == "Contact submitted successfully"
    no_email[1].assert_called_once()
    assert no_email[1].call_args.args[0] == CONTACT

    contacts = client.get("/api/contacts", headers=auth_headers).json()["contacts"]
    assert contacts[0]["subject"] == "Visa"
    assert contacts[0]["status"] == "pending"


@pytest.mark.parametrize("missing", ["name", "email", "subject", "message"])
def test_contact_required_fields(client, missing):
    data = dict(CONTACT)
    del data[missing]
    assert client.post("/api/contacts", json=data).status_code == 422


def test_contact_update_and_delete(client, auth_headers):
    client.post("/api/contacts", json=CONTACT)
    contact_id = client.get("/api/contacts", headers=auth_headers).json()["contacts"][0]["id"]

    client.put(f"/api/contacts/{contact_id}", json={"status": "replied"}, headers=auth_headers)
    assert client.get(f"/api/contacts/{contact_id}", headers=auth_headers).json()["contact"]["status"] == "replied"
    assert client.get("/api/contacts", params={"status": "pending"}, headers=auth_headers).json()["contacts"] == []

    client.delete(f"/api/contacts/{contact_id}", headers=auth_headers)
    assert client.get(f"/api/contacts/{contact_id}", headers=auth_headers).status_code == 404


def test_email_failure_does_not_fail_submission(client, monkeypatch):
    from travel_admin.core.config import settings
    from travel_admin.services import notifications

    monkeypatch.setattr(settings, "BREVO_API_KEY", "test-key")
    with patch("travel_admin.api.v1.contacts.notify_new_contact", notifications.notify_new_contact), \
            patch.object(notifications, "send_email_brevo", side_effect=RuntimeError("Brevo error 500")):
        r = client.post("/api/contacts", json=CONTACT)
    assert r.status_code == 201
