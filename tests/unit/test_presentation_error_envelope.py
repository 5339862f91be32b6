"""Unit tests for ErrorEnvelopeBuilder status mapping and timestamps."""

import json
from unittest.mock import patch

import pytest
from starlette.requests import Request

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    DeliveryError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors import ErrorEnvelopeBuilder

NOW_PATH = "src.presentation.routers.api.v1.errors.error_envelope.now_millis"


def make_request(path="/api/1.0/users/password", language=None, started_at_ms=None):
    headers = [(b"accept-language", language.encode())] if language else []
    scope = {
        "type": "http",
        "method": "POST",
        "path": path,
        "headers": headers,
        "query_string": b"",
        "state": {},
    }
    request = Request(scope)
    if started_at_ms is not None:
        request.state.started_at_ms = started_at_ms
    return request


@pytest.mark.unit
class TestStatusMapping:
    """Test get_status_code."""

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (ValidationError(code=ErrorCode.EMAIL_INVALID, message="m", field="email"), 400),
            (AuthenticationError(code=ErrorCode.AUTHENTICATION_FAILURE, message="m"), 401),
            (ForbiddenError(code=ErrorCode.INVALID_TOKEN, message="m"), 403),
            (
                NotFoundError(
                    code=ErrorCode.EMAIL_NOT_IN_USE,
                    message="m",
                    resource_type="User",
                    resource_id="x",
                ),
                404,
            ),
            (
                DeliveryError(code=ErrorCode.EMAIL_FAILURE, message="m", service_name="smtp"),
                502,
            ),
            (DomainError(code=ErrorCode.INTERNAL_ERROR, message="m"), 500),
        ],
    )
    def test_error_type_to_status(self, error, status_code):
        assert ErrorEnvelopeBuilder.get_status_code(error) == status_code


@pytest.mark.unit
class TestEnvelope:
    """Test envelope content."""

    def test_forbidden_envelope(self):
        request = make_request(language="br", started_at_ms=1_000)
        error = ForbiddenError(code=ErrorCode.UNAUTHORIZED_PASSWORD_RESET, message="m")

        response = ErrorEnvelopeBuilder.from_domain_error(error, request)
        body = json.loads(response.body)

        assert response.status_code == 403
        assert body["path"] == "/api/1.0/users/password"
        assert body["timestamp"] > 1_000
        assert body["message"].startswith("Você não está autorizado")
        assert "validationErrors" not in body

    def test_validation_envelope_has_field_messages(self):
        request = make_request()
        error = ValidationError(
            code=ErrorCode.PASSWORD_SIZE, message="m", field="password"
        )

        response = ErrorEnvelopeBuilder.from_domain_error(error, request)
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["message"] == "Validation Failure"
        assert body["validationErrors"] == {
            "password": "Must have at least 8 characters"
        }

    def test_timestamp_is_after_request_start_even_with_coarse_clock(self):
        request = make_request(started_at_ms=5_000)

        with patch(NOW_PATH, return_value=5_000):
            assert ErrorEnvelopeBuilder.timestamp(request) == 5_001

    def test_timestamp_without_middleware_is_now(self):
        with patch(NOW_PATH, return_value=7_000):
            assert ErrorEnvelopeBuilder.timestamp(make_request()) == 7_000
