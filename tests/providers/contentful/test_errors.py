import httpx
import pytest

from contentform.core.contracts.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PayloadValidationError,
    ProviderError,
    TransportError,
)
from contentform.core.providers.contentful.errors import error_from_response


def _response(status_code: int, **kwargs: object) -> httpx.Response:
    request = httpx.Request("PUT", "https://api.contentful.com/spaces/s/environments/master/entries/e1")
    return httpx.Response(status_code, request=request, **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("status_code", "error_type"),
    [
        (400, PayloadValidationError),
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, PayloadValidationError),
        (429, TransportError),
        (500, TransportError),
    ],
)
def test_status_codes_map_to_error_types(status_code: int, error_type: type[ProviderError]) -> None:
    assert type(error_from_response(_response(status_code))) is error_type


def test_error_body_fills_message_and_detail() -> None:
    body = {
        "sys": {"type": "Error", "id": "VersionMismatch"},
        "message": "Version mismatch",
        "details": {"expected": 3, "actual": 2},
        "requestId": "req-123",
    }

    error = error_from_response(_response(409, json=body))

    assert isinstance(error, ConflictError)
    assert str(error) == (
        "PUT /spaces/s/environments/master/entries/e1 failed (409 VersionMismatch): Version mismatch"
    )
    assert error.detail == '{"actual": 2, "expected": 3}\nrequest id: req-123'


def test_non_json_body_falls_back_to_text() -> None:
    error = error_from_response(_response(502, text="bad gateway"))

    assert isinstance(error, TransportError)
    assert str(error).endswith("failed (502 Bad Gateway): bad gateway")
    assert error.detail == ""
