"""Tests for the HTTP surface and DomainError rendering."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from goformx.api.errors import (
    domain_error_handler,
    sanitize_request_id,
    unhandled_exception_handler,
)
from goformx.errors import DomainError, ErrorCode, new
from goformx.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestFormsApi:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_valid_fields_form(self, client, fields_schema):
        response = client.post(
            "/api/v1/forms/validate",
            json={"title": "Contact Us", "description": "", "schema": fields_schema},
        )

        assert response.status_code == 200
        assert response.json() == {"valid": True, "dialect": "fields", "message": "form is valid"}

    def test_valid_json_schema_form(self, client, json_schema):
        response = client.post(
            "/api/v1/forms/validate",
            json={"title": "Profile", "schema": json_schema},
        )

        assert response.status_code == 200
        assert response.json()["dialect"] == "json_schema"

    def test_short_title(self, client, fields_schema):
        response = client.post(
            "/api/v1/forms/validate",
            json={"title": "Hi", "schema": fields_schema},
            headers={"X-Trace-Id": "trace-1"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["field"] == "title"
        assert body["request_id"] == "trace-1"
        assert body["user_id"] == ""

    def test_missing_title(self, client, fields_schema):
        response = client.post("/api/v1/forms/validate", json={"schema": fields_schema})

        assert response.status_code == 400
        assert response.json()["code"] == "FORM_INVALID"

    def test_collect_all(self, client):
        response = client.post(
            "/api/v1/forms/validate",
            json={"title": "Hi", "schema": {"type": "object"}, "collect_all": True},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "FORM_VALIDATION_ERROR"
        assert len(body["details"]["errors"]) == 2

    def test_error_code_table(self, client):
        response = client.get("/api/v1/errors/codes")

        assert response.status_code == 200
        rows = {row["code"]: row for row in response.json()}
        assert len(rows) == len(ErrorCode)
        assert rows["FORM_ACCESS_DENIED"]["http_status"] == 403


class TestSubmissionsApi:
    def test_valid_submission(self, client):
        response = client.post(
            "/api/v1/forms/submissions/validate",
            json={"form_id": "form-1", "data": {"email": "a@b.c"}},
        )

        assert response.status_code == 200
        assert response.json() == {"valid": True, "form_id": "form-1", "status": "pending"}

    def test_missing_form_id(self, client):
        response = client.post("/api/v1/forms/submissions/validate", json={"data": {}})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "form_id"

    def test_required_field_from_schema(self, client):
        response = client.post(
            "/api/v1/forms/submissions/validate",
            json={
                "form_id": "form-1",
                "data": {"email": ""},
                "schema": {"email": {"validate": "required"}},
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "REQUIRED_FIELD"
        assert body["details"] == {"field": "email", "form_id": "form-1"}


@pytest.fixture
def error_client():
    """Minimal app whose route raises a DomainError."""
    error_app = FastAPI()
    error_app.add_exception_handler(DomainError, domain_error_handler)

    @error_app.get("/forms/{form_id}")
    async def get_form(form_id: str, request: Request):
        request.state.user_id = "user-7"
        raise new(ErrorCode.FORM_NOT_FOUND, "form not found").with_context("form_id", form_id)

    return TestClient(error_app)


class TestDomainErrorRendering:
    def test_ajax_request_gets_json(self, error_client):
        response = error_client.get(
            "/forms/abc",
            headers={"X-Requested-With": "XMLHttpRequest"},
        )

        assert response.status_code == 404
        assert response.json() == {
            "code": "FORM_NOT_FOUND",
            "message": "form not found",
            "details": {"form_id": "abc"},
            "request_id": "",
            "user_id": "user-7",
        }

    def test_browser_request_is_redirected(self, error_client):
        response = error_client.get("/forms/abc", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/error?code=FORM_NOT_FOUND&message=form+not+found"

    def test_trace_id_is_sanitized(self, error_client):
        response = error_client.get(
            "/forms/abc",
            headers={"X-Requested-With": "XMLHttpRequest", "X-Trace-Id": "trace\t\t1"},
        )

        assert response.json()["request_id"] == "trace 1"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("trace-1", "trace-1"),
        ("trace-1\nforged log line", "trace-1 forged log line"),
        ("\r\ntrace\x00-1\x7f", "trace -1"),
        ("", ""),
    ],
)
def test_sanitize_request_id(value, expected):
    assert sanitize_request_id(value) == expected


@pytest.fixture
def crash_client():
    """Minimal app whose route fails with an unexpected exception."""
    crash_app = FastAPI()
    crash_app.add_exception_handler(Exception, unhandled_exception_handler)

    @crash_app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    return TestClient(crash_app, raise_server_exceptions=False)


class TestUnhandledExceptionRendering:
    def test_api_request_gets_opaque_500(self, crash_client):
        response = crash_client.get(
            "/boom",
            headers={"X-Requested-With": "XMLHttpRequest", "X-Trace-Id": "trace-9"},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "INTERNAL_ERROR"
        assert body["request_id"] == "trace-9"
        assert "secret" not in response.text

    def test_browser_request_is_redirected(self, crash_client):
        response = crash_client.get("/boom", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"].startswith("/error?message=")
        assert "secret" not in response.headers["location"]
