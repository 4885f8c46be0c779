"""Tests for response classification."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from gafeed.client.response import classify, is_success, parse_error, response_body
from gafeed.exceptions import (
    BackendError,
    BadRequestError,
    ClientError,
    GenericClientError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
)
from gafeed.result import Failure, Success

URI = "https://example.com/data?ids=ga:123"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str | None = None,
) -> httpx.Response:
    """Build an httpx.Response with a JSON or text body."""
    request = httpx.Request("GET", URI)
    if json_data is not None:
        return httpx.Response(status_code=status_code, json=json_data, request=request)
    return httpx.Response(status_code=status_code, text=text or "", request=request)


def _error_body(code: Any, message: str = "msg", errors: Any = None) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, "errors": errors or []}}


# ---------------------------------------------------------------------------
# Success detection
# ---------------------------------------------------------------------------


class TestIsSuccess:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_status_code(self, status: int) -> None:
        assert is_success(_make_response(status))

    @pytest.mark.parametrize("status", [199, 301, 400, 500])
    def test_non_2xx_status_code(self, status: int) -> None:
        assert not is_success(_make_response(status))

    def test_status_field_200(self, oauth_response) -> None:
        assert is_success(oauth_response(200, "{}"))

    def test_status_field_other_than_200(self, oauth_response) -> None:
        assert not is_success(oauth_response(201, "{}"))
        assert not is_success(oauth_response(403, "{}"))


class TestResponseBody:
    def test_text_attribute(self) -> None:
        assert response_body(_make_response(500, text="boom")) == "boom"

    def test_bytes_body(self, oauth_response) -> None:
        assert response_body(oauth_response(500, b"raw bytes")) == "raw bytes"

    def test_missing_body(self, oauth_response) -> None:
        assert response_body(oauth_response(500, None)) == ""


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassifySuccess:
    def test_success_wraps_response(self) -> None:
        response = _make_response(200, json_data={"feed": {}})
        result = classify(response, URI)
        assert result == Success(response=response, uri=URI)
        assert result.ok
        assert result.unwrap() is response

    def test_oauth_success(self, oauth_response) -> None:
        response = oauth_response(200, "<feed/>")
        assert isinstance(classify(response, URI), Success)


class TestClassifyStructuredErrors:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (400, BadRequestError),
            (401, InvalidCredentialsError),
            (403, InsufficientPermissionsError),
            (503, BackendError),
        ],
    )
    def test_code_selects_variant(self, code: int, expected: type[ClientError]) -> None:
        result = classify(_make_response(code, json_data=_error_body(code)), URI)
        assert isinstance(result, Failure)
        assert type(result.error) is expected
        assert result.error.code == code

    @pytest.mark.parametrize("code", [404, 409, 500, 502])
    def test_other_codes_are_generic(self, code: int) -> None:
        result = classify(_make_response(code, json_data=_error_body(code)), URI)
        assert type(result.error) is GenericClientError
        assert result.error.code == code

    def test_variant_follows_body_code_not_status(self) -> None:
        result = classify(_make_response(500, json_data=_error_body(401)), URI)
        assert type(result.error) is InvalidCredentialsError

    def test_forbidden_example(self) -> None:
        body = '{"error":{"code":403,"message":"Forbidden","errors":[]}}'
        result = classify(_make_response(403, text=body), URI)
        assert isinstance(result.error, InsufficientPermissionsError)
        assert result.error.message == "Forbidden"
        assert result.error.code == 403
        assert result.error.errors == []
        assert result.error.uri == URI

    def test_sub_errors_are_carried(self) -> None:
        errors = [{"domain": "global", "reason": "invalidParameter"}, "plain"]
        result = classify(_make_response(400, json_data=_error_body(400, "Bad", errors)), URI)
        assert result.error.errors == errors

    def test_oauth_shaped_error(self, oauth_response) -> None:
        body = json.dumps(_error_body(401, "Token expired"))
        result = classify(oauth_response(401, body), URI)
        assert type(result.error) is InvalidCredentialsError
        assert result.error.message == "Token expired"

    def test_string_code_is_generic_without_code(self) -> None:
        result = classify(_make_response(403, json_data=_error_body("403")), URI)
        assert type(result.error) is GenericClientError
        assert result.error.code is None

    def test_missing_errors_field_defaults_to_empty(self) -> None:
        body = {"error": {"code": 400, "message": "Bad"}}
        result = classify(_make_response(400, json_data=body), URI)
        assert result.error.errors == []


class TestClassifyUnstructuredErrors:
    def test_not_json(self) -> None:
        result = classify(_make_response(500, text="not json"), URI)
        assert type(result.error) is GenericClientError
        assert result.error.message == "not json"
        assert result.error.code is None
        assert result.error.uri == URI

    def test_json_without_error_field(self) -> None:
        response = _make_response(404, json_data={"detail": "missing"})
        result = classify(response, URI)
        assert type(result.error) is GenericClientError
        assert result.error.message == response.text

    def test_error_field_is_a_string(self) -> None:
        body = '{"error": "Forbidden"}'
        result = classify(_make_response(403, text=body), URI)
        assert type(result.error) is GenericClientError
        assert result.error.message == body

    def test_json_array_body(self) -> None:
        result = classify(_make_response(500, text="[1, 2]"), URI)
        assert result.error.message == "[1, 2]"

    def test_empty_body(self) -> None:
        result = classify(_make_response(502, text=""), URI)
        assert type(result.error) is GenericClientError
        assert result.error.message == ""

    def test_deeply_nested_body(self, oauth_response) -> None:
        body = "[" * 100000
        result = classify(oauth_response(500, body), URI)
        assert type(result.error) is GenericClientError
        assert result.error.message == body

    def test_failure_unwrap_raises(self) -> None:
        result = classify(_make_response(500, text="boom"), URI)
        assert not result.ok
        with pytest.raises(GenericClientError, match="boom"):
            result.unwrap()


class TestIdempotence:
    @pytest.mark.parametrize(
        "response",
        [
            _make_response(200, json_data={"ok": True}),
            _make_response(403, text='{"error":{"code":403,"message":"Forbidden","errors":[]}}'),
            _make_response(500, text="not json"),
        ],
    )
    def test_reclassification_is_equal(self, response: httpx.Response) -> None:
        assert classify(response, URI) == classify(response, URI)


class TestParseError:
    def test_parse_error_direct(self) -> None:
        error = parse_error(json.dumps(_error_body(503, "Backend")), URI)
        assert error == BackendError("Backend", code=503, errors=[], uri=URI)
