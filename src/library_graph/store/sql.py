"""Entity store backed by SQLAlchemy async sessions."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..dbmodels import Authors, Books
from ..errors import StoreError
from ..logging import get_logger
from .base import AuthorRecord, BookRecord, EntityStore

logger = get_logger(__name__)


def book_record(row: Books) -> BookRecord:
    return BookRecord(id=row.id, title=row.title, genre=row.genre, author_id=row.author_id)


def author_record(row: Authors) -> AuthorRecord:
    return AuthorRecord(id=row.id, name=row.name, age=row.age)


class SqlStore(EntityStore):
    """Entity store over the ``Books`` and ``Authors`` tables.

    Every operation runs in its own session taken from the injected factory,
    committing on success and rolling back on failure. Driver and pool errors
    surface as ``StoreError``.
    """

    backend = "database"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except (SQLAlchemyError, OSError):
                    await session.rollback()
                    raise
        # OSError covers refused connections and timeouts raised by the driver
        except (SQLAlchemyError, OSError) as e:
            logger.error("Store operation failed", operation=operation, error=str(e))
            raise StoreError(f"{operation} failed: {e}", operation=operation) from e

    async def find_book_by_id(self, book_id: str) -> BookRecord | None:
        async with self._session("find_book_by_id") as session:
            row = await session.get(Books, book_id)
            return book_record(row) if row else None

    async def find_book_by_title(self, title: str) -> BookRecord | None:
        async with self._session("find_book_by_title") as session:
            stmt = select(Books).where(Books.title == title).limit(1)
            result = await session.execute(stmt)
            row = result.scalars().first()
            return book_record(row) if row else None

    async def list_books(self) -> list[BookRecord]:
        async with self._session("list_books") as session:
            result = await session.execute(select(Books))
            return [book_record(row) for row in result.scalars().all()]

    async def list_books_by_author(self, author_id: str) -> list[BookRecord]:
        async with self._session("list_books_by_author") as session:
            stmt = select(Books).where(Books.author_id == author_id)
            result = await session.execute(stmt)
            return [book_record(row) for row in result.scalars().all()]

    async def find_author_by_id(self, author_id: str) -> AuthorRecord | None:
        async with self._session("find_author_by_id") as session:
            row = await session.get(Authors, author_id)
            return author_record(row) if row else None

    async def find_author_by_name(self, name: str) -> AuthorRecord | None:
        async with self._session("find_author_by_name") as session:
            stmt = select(Authors).where(Authors.name == name).limit(1)
            result = await session.execute(stmt)
            row = result.scalars().first()
            return author_record(row) if row else None

    async def list_authors(self) -> list[AuthorRecord]:
        async with self._session("list_authors") as session:
            result = await session.execute(select(Authors))
            return [author_record(row) for row in result.scalars().all()]

    async def create_author(self, name: str, age: int) -> AuthorRecord:
        async with self._session("create_author") as session:
            row = Authors(name=name, age=age)
            session.add(row)
            await session.flush()
            logger.info("Author created", author_id=row.id)
            return author_record(row)

    async def create_book(self, title: str, genre: str | None, author_id: str) -> BookRecord:
        async with self._session("create_book") as session:
            row = Books(title=title, genre=genre, author_id=author_id)
            session.add(row)
            await session.flush()
            logger.info("Book created", book_id=row.id, author_id=author_id)
            return book_record(row)

    async def count_books(self) -> int:
        async with self._session("count_books") as session:
            result = await session.execute(select(func.count()).select_from(Books))
            return result.scalar_one()

    async def count_authors(self) -> int:
        async with self._session("count_authors") as session:
            result = await session.execute(select(func.count()).select_from(Authors))
            return result.scalar_one()
