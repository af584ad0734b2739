"""In-memory entity store backed by plain lists."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from ..errors import StoreError
from ..logging import get_logger
from .base import AuthorRecord, BookRecord, EntityStore
from .fixtures import fixture_authors, fixture_books

logger = get_logger(__name__)


class MemoryStore(EntityStore):
    """Entity store holding records in insertion order.

    Lookups are linear scans. A read-only instance rejects inserts with
    ``StoreError`` so demo data stays fixed for the life of the process.
    """

    backend = "memory"

    def __init__(
        self,
        books: Iterable[BookRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        read_only: bool = False,
    ):
        self._books: list[BookRecord] = list(books)
        self._authors: list[AuthorRecord] = list(authors)
        self.read_only = read_only

    @classmethod
    def from_fixtures(cls, read_only: bool = True) -> MemoryStore:
        """Create a store preloaded with the demo books and authors."""
        return cls(fixture_books(), fixture_authors(), read_only=read_only)

    async def find_book_by_id(self, book_id: str) -> BookRecord | None:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    async def find_book_by_title(self, title: str) -> BookRecord | None:
        for book in self._books:
            if book.title == title:
                return book
        return None

    async def list_books(self) -> list[BookRecord]:
        return list(self._books)

    async def list_books_by_author(self, author_id: str) -> list[BookRecord]:
        return [book for book in self._books if book.author_id == author_id]

    async def find_author_by_id(self, author_id: str) -> AuthorRecord | None:
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    async def find_author_by_name(self, name: str) -> AuthorRecord | None:
        for author in self._authors:
            if author.name == name:
                return author
        return None

    async def list_authors(self) -> list[AuthorRecord]:
        return list(self._authors)

    async def create_author(self, name: str, age: int) -> AuthorRecord:
        self._ensure_writable("create_author")
        author = AuthorRecord(id=self._new_id({a.id for a in self._authors}), name=name, age=age)
        self._authors.append(author)
        logger.debug("Author created", author_id=author.id, backend=self.backend)
        return author

    async def create_book(self, title: str, genre: str | None, author_id: str) -> BookRecord:
        self._ensure_writable("create_book")
        book = BookRecord(
            id=self._new_id({b.id for b in self._books}),
            title=title,
            genre=genre,
            author_id=author_id,
        )
        self._books.append(book)
        logger.debug("Book created", book_id=book.id, backend=self.backend)
        return book

    async def count_books(self) -> int:
        return len(self._books)

    async def count_authors(self) -> int:
        return len(self._authors)

    def _ensure_writable(self, operation: str) -> None:
        if self.read_only:
            raise StoreError("Fixture store is read-only", operation=operation)

    @staticmethod
    def _new_id(taken: set[str]) -> str:
        new_id = uuid.uuid4().hex
        while new_id in taken:
            new_id = uuid.uuid4().hex
        return new_id
