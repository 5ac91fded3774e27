"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
import strawberry
from fastapi import Response

from menagerie.auth.context import RequestAuthContext
from menagerie.store.base import RecordStore


@pytest.fixture(scope="function")
def test_database_url(tmp_path: Path) -> str:
    """Return the URL of a throwaway SQLite database file."""
    return f"sqlite:///{tmp_path / 'menagerie.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(test_database_url: str) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at a fresh database with the schema created."""
    from menagerie.database.connection import (
        create_schema,
        dispose_database,
        init_database,
        reset_database,
    )

    reset_database()
    init_database(test_database_url, force_reinit=True)
    await create_schema()

    yield test_database_url

    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def sql_store(database: str) -> RecordStore:
    """Provide a SQL record store over the test database."""
    from menagerie.store.sql import SqlRecordStore

    _ = database
    return SqlRecordStore()


@pytest_asyncio.fixture(scope="function")
async def seeded_store(sql_store: RecordStore) -> RecordStore:
    """Provide a SQL record store holding the default records."""
    from menagerie.database.connection import get_async_session
    from menagerie.database.seed_data import ensure_seed_records

    async with get_async_session() as session:
        await ensure_seed_records(session)
    return sql_store


@pytest.fixture
def mock_store() -> AsyncMock:
    """Create a mock record store."""
    return AsyncMock(spec=RecordStore)


@pytest.fixture
def make_info(mock_store: AsyncMock):
    """Build mock GraphQL info objects with a given session credential."""

    def _make(credential: str | None = None, admin_identity: str | None = "Ralph") -> MagicMock:
        info = MagicMock(spec=strawberry.Info)
        info.context = {
            "store": mock_store,
            "response": Response(),
            "auth": RequestAuthContext(credential=credential, admin_identity=admin_identity),
        }
        return info

    return _make


def graphql_context(
    store: RecordStore,
    credential: str | None = None,
    admin_identity: str | None = "Ralph",
) -> dict[str, Any]:
    """Build a context dict for ``schema.execute``."""
    return {
        "store": store,
        "response": Response(),
        "auth": RequestAuthContext(credential=credential, admin_identity=admin_identity),
    }


@pytest.fixture
def context_factory():
    return graphql_context


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
