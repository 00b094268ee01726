"""Sources for the human-friendly ``postId`` sequence number.

Two implementations share the ``next_value()`` interface:

* ``StorePostIdSequence`` asks the database for the next value through an
  atomic increment function, so numbers stay unique across every running
  instance.  This is the default.
* ``LocalPostIdCounter`` counts in process memory.  Each instance starts
  again at 1, so values repeat across instances and cold starts.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

import httpx
from postgrest.exceptions import APIError

from posts_api.core.config import settings
from posts_api.core.errors import StoreError
from posts_api.db.supabase import get_supabase
from posts_api.models.enums import ErrorKind
from posts_api.services.store import translate_store_error

logger = logging.getLogger(__name__)


class PostIdSequence(Protocol):
    def next_value(self) -> int: ...


class LocalPostIdCounter:
    """Process-local counter guarded by a ``threading.Lock``."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value


class StorePostIdSequence:
    """Sequence backed by a database function.

    The function (``settings.POST_SEQUENCE_FUNCTION``) must increment and
    return the counter in one statement, e.g. ``select nextval(...)``.
    """

    def __init__(self, function_name: str | None = None) -> None:
        self.function_name = function_name or settings.POST_SEQUENCE_FUNCTION

    def next_value(self) -> int:
        try:
            result = get_supabase().rpc(self.function_name, {}).execute()
        except (APIError, httpx.HTTPError) as exc:
            raise translate_store_error(exc, self.function_name) from exc

        raw = result.data
        if isinstance(raw, list) and raw:
            raw = raw[0]
        if isinstance(raw, dict) and len(raw) == 1:
            raw = next(iter(raw.values()))
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            logger.error(
                "post_sequence_invalid",
                extra={"function": self.function_name, "value": repr(raw)},
            )
            raise StoreError(
                ErrorKind.store_failure,
                "Could not allocate a post number",
                detail=f"unexpected sequence value: {raw!r}",
            ) from exc


_local_counter = LocalPostIdCounter()


def get_post_id_sequence() -> PostIdSequence:
    """Return the sequence selected by ``settings.POST_SEQUENCE_BACKEND``."""
    if settings.POST_SEQUENCE_BACKEND == "local":
        return _local_counter
    return StorePostIdSequence()
