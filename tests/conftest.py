"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from library_graph.dbmodels import Base
from library_graph.store.base import AuthorRecord, BookRecord, EntityStore
from library_graph.store.memory import MemoryStore
from library_graph.store.sql import SqlStore


@pytest.fixture
def fixture_store() -> MemoryStore:
    """Read-only store holding the demo catalog."""
    return MemoryStore.from_fixtures()


@pytest.fixture
def memory_store() -> MemoryStore:
    """Writable store holding the demo catalog."""
    return MemoryStore.from_fixtures(read_only=False)


@pytest.fixture
def tiny_store() -> MemoryStore:
    """One author, one book written by them."""
    return MemoryStore(
        books=[BookRecord(id="1", title="Only Book", genre="Drama", author_id="1")],
        authors=[AuthorRecord(id="1", name="X", age=30)],
        read_only=False,
    )


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """File-backed SQLite engine with the catalog tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'library.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_store(sqlite_engine: AsyncEngine) -> SqlStore:
    """Empty database-backed store."""
    return SqlStore(async_sessionmaker(sqlite_engine, class_=AsyncSession, expire_on_commit=False))


@pytest.fixture
def make_info() -> Callable[[EntityStore], Any]:
    """Build a mock GraphQL info object whose context carries ``store``."""

    def _make(store: EntityStore) -> Any:
        info = MagicMock(spec=strawberry.Info)
        info.context = {"request": MagicMock(), "store": store}
        return info

    return _make


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
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
