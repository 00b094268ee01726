"""Exception hierarchy for the posts service.

Services raise these; ``posts_api.services.responses`` turns them into
status codes and JSON bodies.
"""

from __future__ import annotations

from posts_api.models.enums import ErrorKind


class PostsApiError(Exception):
    """Base class for every error the service maps to a response."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PostsApiError):
    """Client input failed a check (enumerated fields, body shape, limit)."""


class NotFoundError(PostsApiError):
    """A single-record lookup found nothing."""

    def __init__(self, message: str = "Post not found") -> None:
        super().__init__(message)


class StoreError(PostsApiError):
    """A datastore call failed.

    ``kind`` is the stable classification sent to clients; ``detail`` keeps
    the store's own message for logs only.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.detail = detail


class ConfigurationError(Exception):
    """Settings do not describe a usable deployment; not sent to clients."""
