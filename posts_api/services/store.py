"""Record store gateway for the posts table.

``PostStore`` is the only code that talks to the datastore.  Each method
performs a single logical operation against the Supabase table named by
``settings.POSTS_TABLE`` and translates every client failure into a
``StoreError`` with a stable ``ErrorKind``, so raw store messages stay in
the logs.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError

from posts_api.core.config import settings
from posts_api.core.constants import STORE_ERROR_MESSAGES
from posts_api.core.errors import NotFoundError, StoreError
from posts_api.db.supabase import get_supabase
from posts_api.models.enums import ErrorKind

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for insufficient_privilege (row level security, grants)
_PG_INSUFFICIENT_PRIVILEGE = "42501"


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def _classify(exc: Exception) -> ErrorKind:
    if isinstance(exc, APIError):
        if exc.code == _PG_INSUFFICIENT_PRIVILEGE:
            return ErrorKind.access_denied
        return ErrorKind.store_failure
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == 429:
            return ErrorKind.throttled
        if status in (401, 403):
            return ErrorKind.access_denied
        if status in (502, 503, 504):
            return ErrorKind.store_unavailable
        return ErrorKind.store_failure
    if isinstance(exc, httpx.TransportError):
        return ErrorKind.store_unavailable
    return ErrorKind.store_failure


def translate_store_error(exc: Exception, operation: str) -> StoreError:
    """Wrap a Supabase/PostgREST/httpx failure in a ``StoreError``."""
    kind = _classify(exc)
    detail = exc.message if isinstance(exc, APIError) else str(exc)
    logger.error(
        "store_operation_failed",
        extra={
            "operation": operation,
            "error_kind": kind.value,
            "error_message": detail,
        },
    )
    return StoreError(kind, STORE_ERROR_MESSAGES[kind], detail=detail)


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------

class PostStore:
    """Single-table gateway for post records keyed by ``id``."""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or settings.POSTS_TABLE

    def _table(self) -> Any:
        return get_supabase().table(self.table_name)

    def _execute(self, operation: str, query: Any) -> list[dict[str, Any]]:
        try:
            result = query.execute()
        except (APIError, httpx.HTTPError) as exc:
            raise translate_store_error(exc, operation) from exc
        return result.data or []

    def put(self, record: dict[str, Any]) -> dict[str, Any]:
        """Insert or overwrite *record* by ``id``; return the stored row."""
        rows = self._execute(
            "put", self._table().upsert(record, on_conflict="id")
        )
        return rows[0] if rows else record

    def scan_all(self) -> list[dict[str, Any]]:
        """Return every post, newest first.

        Reads in pages of ``settings.SCAN_PAGE_SIZE`` until a short page so
        tables larger than one response are returned whole.  ``id`` breaks
        ties between equal timestamps so page boundaries stay stable.
        """
        page_size = settings.SCAN_PAGE_SIZE
        items: list[dict[str, Any]] = []
        start = 0
        while True:
            page = self._execute(
                "scan_all",
                self._table()
                .select("*")
                .order("createdAt", desc=True)
                .order("id")
                .range(start, start + page_size - 1),
            )
            items.extend(page)
            if len(page) < page_size:
                break
            start += page_size
        return items

    def scan_limited(self, limit: int) -> list[dict[str, Any]]:
        """Return at most *limit* posts, newest first."""
        return self._execute(
            "scan_limited",
            self._table()
            .select("*")
            .order("createdAt", desc=True)
            .limit(limit),
        )

    def get(self, post_id: str) -> dict[str, Any]:
        """Return the post with *post_id*; raise ``NotFoundError`` if absent."""
        rows = self._execute(
            "get",
            self._table().select("*").eq("id", post_id).limit(1),
        )
        if not rows:
            raise NotFoundError()
        return rows[0]

    def update(self, post_id: str, title: str | None, body: str | None) -> dict[str, Any]:
        """Overwrite ``title`` and ``body`` of an existing post.

        The update only matches an existing ``id``; when nothing matched a
        ``StoreError`` of kind ``conditional_check_failed`` is raised.
        Returns the full record after the update.
        """
        rows = self._execute(
            "update",
            self._table().update({"title": title, "body": body}).eq("id", post_id),
        )
        if not rows:
            logger.info("post_update_missing", extra={"post_id": post_id})
            raise StoreError(
                ErrorKind.conditional_check_failed,
                STORE_ERROR_MESSAGES[ErrorKind.conditional_check_failed],
            )
        return rows[0]

    def delete(self, post_id: str) -> None:
        """Delete the post with *post_id*; absent ids are not an error."""
        self._execute("delete", self._table().delete().eq("id", post_id))
