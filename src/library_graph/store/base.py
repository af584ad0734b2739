"""Entity store interface and the records it exchanges with the GraphQL layer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """A stored book. ``author_id`` may reference an author that does not exist."""

    id: str
    title: str
    genre: str | None
    author_id: str


@dataclass(frozen=True)
class AuthorRecord:
    """A stored author."""

    id: str
    name: str
    age: int


class EntityStore(ABC):
    """Abstract base class for Book/Author persistence.

    Point lookups return None when nothing matches. Backend failures raise
    ``StoreError``; they are never reported as a missing record.
    """

    backend: str = "abstract"

    @abstractmethod
    async def find_book_by_id(self, book_id: str) -> BookRecord | None:
        """Return the book with this id."""
        pass

    @abstractmethod
    async def find_book_by_title(self, title: str) -> BookRecord | None:
        """Return the first book whose title matches exactly."""
        pass

    @abstractmethod
    async def list_books(self) -> list[BookRecord]:
        """Return every book. Order is not guaranteed."""
        pass

    @abstractmethod
    async def list_books_by_author(self, author_id: str) -> list[BookRecord]:
        """Return all books referencing ``author_id``; empty if there are none."""
        pass

    @abstractmethod
    async def find_author_by_id(self, author_id: str) -> AuthorRecord | None:
        """Return the author with this id."""
        pass

    @abstractmethod
    async def find_author_by_name(self, name: str) -> AuthorRecord | None:
        """Return the first author whose name matches exactly."""
        pass

    @abstractmethod
    async def list_authors(self) -> list[AuthorRecord]:
        """Return every author. Order is not guaranteed."""
        pass

    @abstractmethod
    async def create_author(self, name: str, age: int) -> AuthorRecord:
        """Persist a new author under a fresh id and return it."""
        pass

    @abstractmethod
    async def create_book(self, title: str, genre: str | None, author_id: str) -> BookRecord:
        """Persist a new book under a fresh id and return it.

        The author reference is stored as given, without checking it resolves.
        """
        pass

    @abstractmethod
    async def count_books(self) -> int:
        pass

    @abstractmethod
    async def count_authors(self) -> int:
        pass

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
