"""Post operations shared by the event handlers and the HTTP routes.

Each operation runs one request end to end: parse and validate the input,
make a single call to ``PostStore`` and map the outcome to a
``ServiceResponse``.  Expected failures (``PostsApiError``) never escape;
anything else propagates to the caller's runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from posts_api.core.constants import POST_DELETED
from posts_api.core.errors import PostsApiError, ValidationError
from posts_api.services.builder import build_post
from posts_api.services.responses import ServiceResponse, error_response, ok
from posts_api.services.sequence import get_post_id_sequence
from posts_api.services.sorting import sort_by_recency
from posts_api.services.store import PostStore
from posts_api.services.validation import (
    parse_body,
    parse_limit,
    parse_update,
    validate_post_request,
)

logger = logging.getLogger(__name__)

RawBody = str | bytes | Mapping[str, Any] | None


def _require_id(post_id: str | None) -> str:
    if not isinstance(post_id, str) or not post_id:
        raise ValidationError("id path parameter is required")
    return post_id


def create_post(raw_body: RawBody, store: PostStore | None = None) -> ServiceResponse:
    """Validate a create request, persist the new post and return it (201)."""
    store = store or PostStore()
    try:
        body = parse_body(raw_body)
        validate_post_request(body)
        post = build_post(body, get_post_id_sequence())
        stored = store.put(post.to_record())
    except ValidationError as exc:
        logger.info("post_validation_failed", extra={"error_message": exc.message})
        return error_response(exc)
    except PostsApiError as exc:
        return error_response(exc)

    logger.info(
        "post_created",
        extra={"post_id": stored.get("id"), "post_number": stored.get("postId")},
    )
    return ok(stored, status_code=201)


def list_posts(store: PostStore | None = None) -> ServiceResponse:
    """Return every post, newest first."""
    store = store or PostStore()
    try:
        items = store.scan_all()
    except PostsApiError as exc:
        return error_response(exc)
    return ok(sort_by_recency(items))


def list_recent_posts(number: str | int | None, store: PostStore | None = None) -> ServiceResponse:
    """Return up to *number* posts, newest first.

    *number* is the raw path segment; see ``parse_limit`` for the accepted
    values.
    """
    store = store or PostStore()
    try:
        limit = parse_limit(number)
        items = store.scan_limited(limit)
    except PostsApiError as exc:
        return error_response(exc)
    return ok(sort_by_recency(items))


def get_post(post_id: str | None, store: PostStore | None = None) -> ServiceResponse:
    """Return a single post, or 404 when it does not exist."""
    store = store or PostStore()
    try:
        item = store.get(_require_id(post_id))
    except PostsApiError as exc:
        return error_response(exc)
    return ok(item)


def update_post(post_id: str | None, raw_body: RawBody, store: PostStore | None = None) -> ServiceResponse:
    """Overwrite title and body of an existing post and return the result."""
    store = store or PostStore()
    try:
        post_id = _require_id(post_id)
        changes = parse_update(parse_body(raw_body))
        item = store.update(post_id, changes.title, changes.body)
    except PostsApiError as exc:
        return error_response(exc)

    logger.info("post_updated", extra={"post_id": post_id})
    return ok(item)


def delete_post(post_id: str | None, store: PostStore | None = None) -> ServiceResponse:
    """Delete a post; succeeds whether or not it existed."""
    store = store or PostStore()
    try:
        store.delete(_require_id(post_id))
    except PostsApiError as exc:
        return error_response(exc)

    logger.info("post_deleted", extra={"post_id": post_id})
    return ok({"message": POST_DELETED})
