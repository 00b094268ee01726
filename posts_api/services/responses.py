"""Mapping of service outcomes to status codes and JSON payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from posts_api.core.constants import POST_NOT_FOUND, STORE_ERROR_STATUS
from posts_api.core.errors import NotFoundError, PostsApiError, StoreError, ValidationError

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class ServiceResponse:
    """Outcome of a post operation: HTTP status plus JSON-able payload."""
    status_code: int
    payload: Any


def ok(payload: Any, status_code: int = 200) -> ServiceResponse:
    return ServiceResponse(status_code=status_code, payload=payload)


def error_response(exc: PostsApiError) -> ServiceResponse:
    """Map a service error to its response.

    Validation failures give 400 and a missing post 404, both with
    ``{"error": message}``.  Store failures use the status of their kind and
    add ``code`` so clients can tell kinds apart.
    """
    if isinstance(exc, ValidationError):
        return ServiceResponse(400, {"error": exc.message})
    if isinstance(exc, NotFoundError):
        return ServiceResponse(404, {"error": POST_NOT_FOUND})
    if isinstance(exc, StoreError):
        return ServiceResponse(
            STORE_ERROR_STATUS[exc.kind],
            {"error": exc.message, "code": exc.kind.value},
        )
    raise TypeError(f"No response mapping for {type(exc).__name__}")


def to_envelope(response: ServiceResponse) -> dict[str, Any]:
    """Return the serverless response envelope with a JSON-encoded body."""
    return {
        "statusCode": response.status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(response.payload),
    }
