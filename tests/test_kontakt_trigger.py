"""Tests for the POST /api/kontakt trigger."""

import json
from unittest.mock import MagicMock

import azure.functions as func
import pytest

from content_api.models import KontaktRecord
from content_api.triggers import (
    KontaktSubmitTrigger,
    MSG_FAILURE,
    MSG_INVALID_EMAIL,
    MSG_MISSING_FIELDS,
    MSG_SUCCESS,
    get_content_triggers,
    is_valid_email,
)
from services.directus_client import DirectusError

VALID = {
    "name": "Anna Schmidt",
    "email": "anna@example.de",
    "phone": "",
    "subject": "Frage zum Sortiment",
    "message": "Führt ihr auch Tee?",
}


def _request(body) -> func.HttpRequest:
    raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return func.HttpRequest(
        method="POST",
        url="/api/kontakt",
        headers={"Content-Type": "application/json"},
        params={},
        route_params={},
        body=raw,
    )


def _payload(response: func.HttpResponse) -> dict:
    return json.loads(response.get_body().decode("utf-8"))


@pytest.fixture
def trigger(service):
    return KontaktSubmitTrigger(service=service)


class TestRegistry:
    def test_single_post_route(self):
        triggers = get_content_triggers()
        assert [(t['route'], t['methods']) for t in triggers] == [('kontakt', ['POST'])]


class TestEmailPattern:
    @pytest.mark.parametrize("email", ["anna@example.de", "a.b+c@sub.example.org", "x@y.z"])
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", [
        "not-an-email", "a@b", "a @b.com", "a@b .com", "@example.de", "a@@b.de",
        "anna@example.de\n", "a@b.com\n",
    ])
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestValidation:
    @pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
    def test_missing_field(self, trigger, fake_cms, field):
        body = {k: v for k, v in VALID.items() if k != field}

        response = trigger.handle(_request(body))

        assert response.status_code == 400
        assert _payload(response) == {"success": False, "message": MSG_MISSING_FIELDS}
        assert fake_cms.requests == []

    @pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_field(self, trigger, fake_cms, field, blank):
        response = trigger.handle(_request({**VALID, field: blank}))

        assert response.status_code == 400
        assert _payload(response)["message"] == MSG_MISSING_FIELDS
        assert fake_cms.requests == []

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a @b.com", "anna@example.de\n"])
    def test_invalid_email(self, trigger, fake_cms, email):
        response = trigger.handle(_request({**VALID, "email": email}))

        assert response.status_code == 400
        assert _payload(response) == {"success": False, "message": MSG_INVALID_EMAIL}
        assert fake_cms.requests == []

    def test_missing_fields_checked_before_email(self, trigger):
        response = trigger.handle(_request({"email": "kaputt"}))
        assert _payload(response)["message"] == MSG_MISSING_FIELDS


class TestSubmission:
    def test_success_returns_created_record(self, trigger, fake_cms):
        response = trigger.handle(_request({**VALID, "status": "archived", "id": 42}))

        assert response.status_code == 200
        assert response.mimetype == "application/json"
        payload = _payload(response)
        assert payload["success"] is True
        assert payload["message"] == MSG_SUCCESS
        assert payload["data"] == {
            "id": 1,
            "name": "Anna Schmidt",
            "email": "anna@example.de",
            "subject": "Frage zum Sortiment",
            "message": "Führt ihr auch Tee?",
            "status": "new",
            "date_created": "2026-10-19T10:00:00.000Z",
        }
        sent = fake_cms.created[0]
        assert sent["status"] == "new"
        assert "id" not in sent
        assert "phone" not in sent

    def test_phone_forwarded_when_given(self, trigger, fake_cms):
        trigger.handle(_request({**VALID, "phone": "02801 98765"}))
        assert fake_cms.created[0]["phone"] == "02801 98765"

    def test_each_submission_creates_a_record(self, trigger, fake_cms):
        first = _payload(trigger.handle(_request(VALID)))
        second = _payload(trigger.handle(_request(VALID)))
        assert first["data"]["id"] != second["data"]["id"]
        assert len(fake_cms.created) == 2

    def test_no_content_from_backend(self):
        service = MagicMock()
        service.submit_kontakt_form.return_value = None
        response = KontaktSubmitTrigger(service=service).handle(_request(VALID))
        assert response.status_code == 200
        assert "data" not in _payload(response)

    def test_extra_backend_fields_are_passed_through(self):
        service = MagicMock()
        service.submit_kontakt_form.return_value = KontaktRecord.model_validate(
            {"id": "k-1", "status": "new", "user_created": None}
        )
        response = KontaktSubmitTrigger(service=service).handle(_request(VALID))
        assert _payload(response)["data"] == {"id": "k-1", "status": "new", "user_created": None}


class TestFailures:
    def test_backend_failure_is_500_without_details(self, trigger, fake_cms):
        fake_cms.fail["kontakt"] = 500

        response = trigger.handle(_request(VALID))

        assert response.status_code == 500
        payload = _payload(response)
        assert payload == {"success": False, "message": MSG_FAILURE}
        assert "boom" not in response.get_body().decode("utf-8")

    def test_service_exception_is_500(self):
        service = MagicMock()
        service.submit_kontakt_form.side_effect = DirectusError("secret internal detail", 502)

        response = KontaktSubmitTrigger(service=service).handle(_request(VALID))

        assert response.status_code == 500
        assert "secret internal detail" not in response.get_body().decode("utf-8")

    def test_unparseable_body_is_500(self, trigger, fake_cms):
        response = trigger.handle(_request(b"{kein json"))

        assert response.status_code == 500
        assert _payload(response) == {"success": False, "message": MSG_FAILURE}
        assert fake_cms.requests == []

    def test_non_object_body_is_500(self, trigger, fake_cms):
        response = trigger.handle(_request(["Anna"]))
        assert response.status_code == 500
        assert fake_cms.requests == []

    def test_write_failure_is_not_logged_again(self):
        service = MagicMock()
        service.submit_kontakt_form.side_effect = DirectusError("down", 503)
        logger = MagicMock()

        response = KontaktSubmitTrigger(service=service, logger=logger).handle(_request(VALID))

        assert response.status_code == 500
        logger.error.assert_not_called()

    def test_unparseable_body_logged_on_injected_logger(self):
        service = MagicMock()
        logger = MagicMock()

        response = KontaktSubmitTrigger(service=service, logger=logger).handle(_request(b"{kein json"))

        assert response.status_code == 500
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["exc_info"] is True
        service.submit_kontakt_form.assert_not_called()

    def test_backend_failure_logged_once_by_service(self, service, service_logger, fake_cms):
        fake_cms.fail["kontakt"] = 500
        trigger_logger = MagicMock()

        KontaktSubmitTrigger(service=service, logger=trigger_logger).handle(_request(VALID))

        service_logger.error.assert_called_once()
        trigger_logger.error.assert_not_called()
