"""Unit tests for recency ordering and response mapping."""

from __future__ import annotations

import json

import pytest

from posts_api.core.errors import NotFoundError, StoreError, ValidationError
from posts_api.models.enums import ErrorKind
from posts_api.services.responses import ServiceResponse, error_response, to_envelope
from posts_api.services.sorting import sort_by_recency


class TestSortByRecency:
    def test_newest_first(self) -> None:
        records = [
            {"id": "old", "createdAt": "2023-01-01T00:00:00+00:00"},
            {"id": "new", "createdAt": "2024-01-01T00:00:00+00:00"},
            {"id": "mid", "createdAt": "2023-06-01T00:00:00+00:00"},
        ]
        assert [r["id"] for r in sort_by_recency(records)] == ["new", "mid", "old"]

    def test_missing_created_at_sorts_last(self) -> None:
        records = [{"id": "none"}, {"id": "dated", "createdAt": "2024-01-01T00:00:00+00:00"}]
        assert [r["id"] for r in sort_by_recency(records)] == ["dated", "none"]

    def test_does_not_mutate_input(self) -> None:
        records = [{"createdAt": "a"}, {"createdAt": "b"}]
        sort_by_recency(records)
        assert records == [{"createdAt": "a"}, {"createdAt": "b"}]


class TestErrorResponse:
    def test_validation_error(self) -> None:
        response = error_response(ValidationError("bad region"))
        assert response == ServiceResponse(400, {"error": "bad region"})

    def test_not_found(self) -> None:
        assert error_response(NotFoundError()) == ServiceResponse(404, {"error": "Post not found"})

    @pytest.mark.parametrize(
        ("kind", "status"),
        [
            (ErrorKind.conditional_check_failed, 400),
            (ErrorKind.access_denied, 403),
            (ErrorKind.throttled, 429),
            (ErrorKind.store_failure, 502),
            (ErrorKind.store_unavailable, 503),
        ],
    )
    def test_store_error_kinds(self, kind: ErrorKind, status: int) -> None:
        response = error_response(StoreError(kind, "message", detail="internal"))
        assert response.status_code == status
        assert response.payload == {"error": "message", "code": kind.value}

    def test_envelope_body_is_json_string(self) -> None:
        envelope = to_envelope(ServiceResponse(201, {"id": "a"}))
        assert envelope["statusCode"] == 201
        assert json.loads(envelope["body"]) == {"id": "a"}
