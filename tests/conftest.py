"""Shared test fixtures.

Provides an in-memory fake of the Supabase client (fluent table API and
``rpc``), fixtures that patch it into every module that calls
``get_supabase``, and a FastAPI ``TestClient``.
"""

from __future__ import annotations

import os

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

from collections.abc import Generator
from contextlib import ExitStack
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Modules that import ``get_supabase`` by name
SUPABASE_CALLERS = (
    "posts_api.services.store.get_supabase",
    "posts_api.services.sequence.get_supabase",
    "posts_api.routers.health.get_supabase",
)


# ---------------------------------------------------------------------------
# In-memory Supabase fake
# ---------------------------------------------------------------------------

class FakeQuery:
    """Records one fluent PostgREST query and runs it on ``execute()``."""

    def __init__(self, table: FakeTable) -> None:
        self.table = table
        self.action = "select"
        self.payload: Any = None
        self.filters: list[tuple[str, Any]] = []
        self.order_by: list[tuple[str, bool]] = []
        self.limit_count: int | None = None
        self.row_range: tuple[int, int] | None = None

    def select(self, columns: str = "*") -> FakeQuery:
        self.action = "select"
        return self

    def upsert(self, record: dict[str, Any], on_conflict: str = "") -> FakeQuery:
        self.action = "upsert"
        self.payload = record
        return self

    def update(self, values: dict[str, Any]) -> FakeQuery:
        self.action = "update"
        self.payload = values
        return self

    def delete(self) -> FakeQuery:
        self.action = "delete"
        return self

    def eq(self, column: str, value: Any) -> FakeQuery:
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> FakeQuery:
        self.order_by.append((column, desc))
        return self

    def limit(self, count: int) -> FakeQuery:
        self.limit_count = count
        return self

    def range(self, start: int, end: int) -> FakeQuery:
        self.row_range = (start, end)
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self) -> SimpleNamespace:
        self.table.queries.append(self)
        rows = self.table.rows

        if self.action == "upsert":
            rows[self.payload["id"]] = dict(self.payload)
            return SimpleNamespace(data=[dict(self.payload)])

        matched = [row for row in rows.values() if self._matches(row)]

        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self.action == "delete":
            for row in matched:
                del rows[row["id"]]
            return SimpleNamespace(data=[dict(row) for row in matched])

        # stable sorts, least significant key first
        for column, desc in reversed(self.order_by):
            matched.sort(key=lambda row: row.get(column) or "", reverse=desc)
        if self.row_range is not None:
            start, end = self.row_range
            matched = matched[start:end + 1]
        if self.limit_count is not None:
            matched = matched[: self.limit_count]
        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeTable:
    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.queries: list[FakeQuery] = []

    def __getattr__(self, name: str) -> Any:
        # Every fluent entry point starts a new query
        if name in ("select", "upsert", "update", "delete"):
            return getattr(FakeQuery(self), name)
        raise AttributeError(name)


class FakeSupabase:
    """Stand-in for ``supabase.Client`` backed by dicts."""

    def __init__(self) -> None:
        self.tables: dict[str, FakeTable] = {}
        self.sequence = 0
        self.rpc_calls: list[str] = []

    def table(self, name: str) -> FakeTable:
        return self.tables.setdefault(name, FakeTable())

    def rpc(self, name: str, params: dict[str, Any]) -> MagicMock:
        self.rpc_calls.append(name)
        self.sequence += 1
        call = MagicMock()
        call.execute.return_value = SimpleNamespace(data=self.sequence)
        return call


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_supabase() -> Generator[FakeSupabase, None, None]:
    """Patch every ``get_supabase`` caller to use one in-memory fake."""
    fake = FakeSupabase()
    with ExitStack() as stack:
        for target in SUPABASE_CALLERS:
            stack.enter_context(patch(target, return_value=fake))
        yield fake


@pytest.fixture()
def mock_supabase() -> Generator[MagicMock, None, None]:
    """Patch every ``get_supabase`` caller to return a ``MagicMock``."""
    mock_client = MagicMock()
    with ExitStack() as stack:
        for target in SUPABASE_CALLERS:
            stack.enter_context(patch(target, return_value=mock_client))
        yield mock_client


@pytest.fixture()
def posts_rows(fake_supabase: FakeSupabase) -> dict[str, dict[str, Any]]:
    """Rows of the fake posts table."""
    return fake_supabase.table("posts").rows


@pytest.fixture()
def valid_post_body() -> dict[str, Any]:
    return {
        "source": "motorsport.com",
        "author": "Jane Doe",
        "title": "Pole position at Pukekohe",
        "description": "Qualifying report",
        "url": "https://example.com/pole",
        "imageVer": "https://example.com/v.jpg",
        "imageHor": "https://example.com/h.jpg",
        "publishedAt": "2024-03-01T09:00:00Z",
        "body": "  Full report text  ",
        "appCategory": 1,
        "newsCategory": 3,
        "region": 2,
    }


@pytest.fixture()
def test_client(fake_supabase: FakeSupabase) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient wired to the fake Supabase client."""
    from posts_api.main import app

    with TestClient(app) as client:
        yield client
