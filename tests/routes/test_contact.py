"""
Tests for POST /api/contact.

- Happy path: valid submission → 200 + one admin email
- Content-Type check → 415 before any field validation
- Malformed body → 400
- Field errors → 400 with localized field map
- Notification failure → 500 with generic message (language from Accept-Language)
"""

import logging

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.services.email_client import get_email_transport
from backend.utils.messages import CONTACT_MESSAGES


VALID_CONTACT = {
    "name": "Alice",
    "email": "a@b.com",
    "message": "Hello, this is a real inquiry.",
    "lang": "en",
}


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_transport(mock_transport):
    """Override the email transport dependency with the mock transport."""
    app.dependency_overrides[get_email_transport] = lambda: mock_transport

    yield mock_transport

    # Clean up after test
    app.dependency_overrides.clear()


@pytest.fixture
def override_failing_transport(failing_transport):
    app.dependency_overrides[get_email_transport] = lambda: failing_transport

    yield failing_transport

    app.dependency_overrides.clear()


class TestContactHappyPath:
    """Valid submissions are forwarded and confirmed."""

    def test_valid_submission_returns_success(self, client, admin_email, override_transport):
        response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": CONTACT_MESSAGES["en"]["success"],
        }

    def test_sends_exactly_one_email_to_admin(self, client, admin_email, override_transport):
        client.post("/api/contact", json=VALID_CONTACT)

        override_transport.send.assert_awaited_once()
        sender, params = override_transport.send.call_args.args
        assert params["to"] == ["admin@example.com"]
        assert params["subject"] == "New Contact: Alice"
        assert "Hello, this is a real inquiry." in params["text"]
        assert "Contact" in sender

    def test_missing_lang_defaults_to_french(self, client, admin_email, override_transport):
        body = {k: v for k, v in VALID_CONTACT.items() if k != "lang"}

        response = client.post("/api/contact", json=body)

        assert response.status_code == 200
        assert response.json()["message"] == CONTACT_MESSAGES["fr"]["success"]

    def test_user_input_is_escaped_in_email(self, client, admin_email, override_transport):
        body = {**VALID_CONTACT, "name": "<b>Bob</b>"}

        client.post("/api/contact", json=body)

        _, params = override_transport.send.call_args.args
        assert "<b>Bob</b>" not in params["html"]
        assert "&lt;b&gt;Bob&lt;/b&gt;" in params["html"]

    def test_content_type_with_charset_is_accepted(self, client, admin_email, override_transport):
        import json

        response = client.post(
            "/api/contact",
            content=json.dumps(VALID_CONTACT),
            headers={"Content-Type": "application/json; charset=utf-8"},
        )

        assert response.status_code == 200


class TestContactContentType:
    """The contact form only accepts JSON bodies."""

    def test_text_plain_returns_415(self, client, admin_email, override_transport):
        response = client.post(
            "/api/contact",
            content="name=Alice",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 415
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert data["error"]["message"] == "Content-Type must be application/json"
        # Rejected before any field validation
        assert data["error"]["fields"] == {}
        override_transport.send.assert_not_called()


class TestContactMalformedBody:

    def test_invalid_json_returns_400(self, client, override_transport):
        response = client.post(
            "/api/contact",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert data["error"]["message"] == CONTACT_MESSAGES["fr"]["invalid_body"]
        override_transport.send.assert_not_called()

    def test_json_array_returns_400_in_header_language(self, client, override_transport):
        response = client.post(
            "/api/contact",
            json=["Alice"],
            headers={"Accept-Language": "en-US,en;q=0.9"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == CONTACT_MESSAGES["en"]["invalid_body"]


class TestContactValidation:

    def test_field_errors_return_400_with_field_map(self, client, override_transport):
        response = client.post(
            "/api/contact",
            json={"name": "A", "email": "not-an-email", "message": "short", "lang": "en"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == CONTACT_MESSAGES["en"]["validation_error"]
        assert error["fields"] == {
            "name": CONTACT_MESSAGES["en"]["name_min"],
            "email": CONTACT_MESSAGES["en"]["email_invalid"],
            "message": CONTACT_MESSAGES["en"]["message_min"],
        }
        override_transport.send.assert_not_called()

    def test_email_with_trailing_newline_rejected(self, client, admin_email, override_transport):
        response = client.post("/api/contact", json={**VALID_CONTACT, "email": "a@b.com\n"})

        assert response.status_code == 400
        assert response.json()["error"]["fields"] == {
            "email": CONTACT_MESSAGES["en"]["email_invalid"],
        }
        override_transport.send.assert_not_called()

    def test_empty_body_reports_required_fields_in_french(self, client, override_transport):
        response = client.post("/api/contact", json={})

        assert response.status_code == 400
        fields = response.json()["error"]["fields"]
        assert fields["name"] == CONTACT_MESSAGES["fr"]["name_required"]
        assert fields["email"] == CONTACT_MESSAGES["fr"]["email_required"]
        assert fields["message"] == CONTACT_MESSAGES["fr"]["message_required"]

    def test_wrong_field_types_are_treated_as_missing(self, client, override_transport):
        response = client.post(
            "/api/contact",
            json={"name": 42, "email": ["a@b.com"], "message": None, "lang": "en"},
        )

        assert response.status_code == 400
        fields = response.json()["error"]["fields"]
        assert fields["name"] == CONTACT_MESSAGES["en"]["name_required"]
        assert fields["email"] == CONTACT_MESSAGES["en"]["email_required"]


class TestContactServerError:

    def test_unconfigured_admin_returns_500(self, client, no_admin_email, override_transport):
        response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {
                "code": "SERVER_ERROR",
                "message": CONTACT_MESSAGES["fr"]["server_error"],
            },
        }
        override_transport.send.assert_not_called()

    def test_provider_failure_returns_generic_message(
        self, client, admin_email, override_failing_transport
    ):
        response = client.post("/api/contact", json=VALID_CONTACT)

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "SERVER_ERROR"
        # Internal detail never reaches the client
        assert "re_test_key" not in response.text
        assert "fields" not in error

    def test_server_error_language_follows_accept_language_header(
        self, client, admin_email, override_failing_transport
    ):
        # Body says French, header says English: the header wins
        response = client.post(
            "/api/contact",
            json={**VALID_CONTACT, "lang": "fr"},
            headers={"Accept-Language": "en-GB"},
        )

        assert response.status_code == 500
        assert response.json()["error"]["message"] == CONTACT_MESSAGES["en"]["server_error"]

    def test_provider_failure_logs_only_error_type(
        self, client, admin_email, override_failing_transport, caplog
    ):
        with caplog.at_level(logging.ERROR):
            client.post("/api/contact", json=VALID_CONTACT)

        assert "Contact form error at" in caplog.text
        assert "NotificationError" in caplog.text
        assert "re_test_key" not in caplog.text
        assert "a@b.com" not in caplog.text
