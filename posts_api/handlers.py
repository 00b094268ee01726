"""Serverless event handlers for the posts API.

Each handler receives the platform event (``pathParameters`` and a JSON
``body`` string) plus the invocation context, and returns the response
envelope ``{"statusCode", "headers", "body"}`` with a JSON-encoded body.
``handle`` dispatches on ``event["operation"]`` for runtimes that route
every operation to one entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from posts_api.core.logging import setup_logging
from posts_api.services import posts
from posts_api.services.responses import ServiceResponse, to_envelope

setup_logging()
logger = logging.getLogger(__name__)

Event = dict[str, Any]
Envelope = dict[str, Any]


def _path_param(event: Event, name: str) -> Any:
    return (event.get("pathParameters") or {}).get(name)


def _respond(operation: str, call: Callable[[], ServiceResponse]) -> Envelope:
    try:
        response = call()
    except Exception:
        logger.exception("handler_failed", extra={"operation": operation})
        raise
    return to_envelope(response)


def create_post(event: Event, context: Any = None) -> Envelope:
    return _respond("create", lambda: posts.create_post(event.get("body")))


def get_all_posts(event: Event, context: Any = None) -> Envelope:
    return _respond("list_all", posts.list_posts)


def get_posts(event: Event, context: Any = None) -> Envelope:
    number = _path_param(event, "number")
    return _respond("list_recent", lambda: posts.list_recent_posts(number))


def get_post(event: Event, context: Any = None) -> Envelope:
    post_id = _path_param(event, "id")
    return _respond("get", lambda: posts.get_post(post_id))


def update_post(event: Event, context: Any = None) -> Envelope:
    post_id = _path_param(event, "id")
    return _respond("update", lambda: posts.update_post(post_id, event.get("body")))


def delete_post(event: Event, context: Any = None) -> Envelope:
    post_id = _path_param(event, "id")
    return _respond("delete", lambda: posts.delete_post(post_id))


HANDLERS: dict[str, Callable[[Event, Any], Envelope]] = {
    "createPost": create_post,
    "getAllPosts": get_all_posts,
    "getPosts": get_posts,
    "getPost": get_post,
    "updatePost": update_post,
    "deletePost": delete_post,
}


def handle(event: Event, context: Any = None) -> Envelope:
    """Route *event* to the handler named by ``event["operation"]``."""
    operation = event.get("operation")
    handler = HANDLERS.get(operation) if isinstance(operation, str) else None
    if handler is None:
        logger.warning("unknown_operation", extra={"operation": operation})
        return to_envelope(
            ServiceResponse(400, {"error": f"Unknown operation: {operation}"})
        )
    return handler(event, context)
