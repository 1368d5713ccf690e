"""
Pytest Configuration and Fixtures

Every test gets its own store instance, so tests never share state.
HTTP tests drive the app in-process through httpx.ASGITransport.
"""

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Test environment defaults — MUST be before any blog_api imports.
#
# Load .env first, then setdefault so Settings always validates and the
# app module builds the in-memory backend unless told otherwise.
# ---------------------------------------------------------------------------
load_dotenv()

_test_env = {
    "STORE_BACKEND": "memory",
    "LOG_LEVEL": "WARNING",
    "ENVIRONMENT": "test",
}
for _key, _value in _test_env.items():
    os.environ.setdefault(_key, _value)

# ---------------------------------------------------------------------------
# Imports (safe now that env vars are set)
# ---------------------------------------------------------------------------
from collections.abc import AsyncGenerator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from blog_api.main import create_app  # noqa: E402
from blog_api.repositories import InMemoryPostStore, PostStore, SqlPostStore  # noqa: E402
from blog_api.services.seeding import PostSeeder  # noqa: E402


@pytest.fixture
def store() -> InMemoryPostStore:
    """Fresh in-memory store."""
    return InMemoryPostStore()


@pytest.fixture
async def sql_store(tmp_path) -> AsyncGenerator[SqlPostStore, None]:
    """SQL store backed by a throwaway SQLite file."""
    sql = SqlPostStore.from_url(f"sqlite+aiosqlite:///{tmp_path / 'posts.db'}")
    await sql.create_schema()
    yield sql
    await sql.dispose()


@pytest.fixture(params=["memory", "sql"])
async def any_store(request, tmp_path) -> AsyncGenerator[PostStore, None]:
    """Each store backend in turn, for contract tests."""
    if request.param == "memory":
        yield InMemoryPostStore()
        return
    sql = SqlPostStore.from_url(f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}")
    await sql.create_schema()
    yield sql
    await sql.dispose()


@pytest.fixture
async def seeder(store: InMemoryPostStore) -> AsyncGenerator[PostSeeder, None]:
    """Seeder bound to ``store``; wipes it on teardown."""
    harness = PostSeeder(store, seed=1234)
    yield harness
    await harness.reset()


@pytest.fixture
async def client(store: InMemoryPostStore) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    In-process HTTP client for an app bound to ``store``.

    Tests can inspect ``store`` directly alongside HTTP responses.
    """
    app = create_app(store=store)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def draft_payload() -> dict:
    return {
        "title": "T",
        "author": {"firstName": "A", "lastName": "B"},
        "content": "C",
    }
