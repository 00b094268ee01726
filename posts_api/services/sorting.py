"""Recency ordering for lists of post records."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def sort_by_recency(records: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return *records* ordered by ``createdAt`` descending.

    Comparison is on the ISO-8601 strings, which matches chronological order
    for timestamps written in the same format.  The sort is stable, so equal
    timestamps keep their input order.  Records without ``createdAt`` go last.
    """
    return sorted(
        records,
        key=lambda record: (
            record.get("createdAt") is not None,
            record.get("createdAt") or "",
        ),
        reverse=True,
    )
