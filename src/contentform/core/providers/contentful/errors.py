"""Translation of Content Management API error responses into the exception taxonomy."""

from __future__ import annotations

import json

import httpx

from contentform.core.contracts.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PayloadValidationError,
    ProviderError,
    TransportError,
)

_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    400: PayloadValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    422: PayloadValidationError,
}


def error_from_response(response: httpx.Response) -> ProviderError:
    """Build the typed error for a non-2xx response.

    Contentful error bodies look like
    ``{"sys": {"type": "Error", "id": "VersionMismatch"}, "message": ..., "details": ..., "requestId": ...}``.
    """
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    error_id = (body.get("sys") or {}).get("id") or response.reason_phrase
    message = body.get("message") or response.text or "no error message"
    detail_parts: list[str] = []
    if body.get("details"):
        detail_parts.append(json.dumps(body["details"], sort_keys=True))
    if body.get("requestId"):
        detail_parts.append(f"request id: {body['requestId']}")

    error_type = _STATUS_ERRORS.get(response.status_code, TransportError)
    return error_type(
        f"{response.request.method} {response.request.url.path} failed ({response.status_code} {error_id}): {message}",
        detail="\n".join(detail_parts),
    )
