"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.base import BookRecord

if TYPE_CHECKING:
    from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API.

    Built from a ``BookRecord``; ``author_id`` is kept off the schema and
    used only to resolve ``author``.
    """

    id: strawberry.ID
    title: str
    genre: str | None
    author_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            genre=record.genre,
            author_id=record.author_id,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author this book references, or null if it does not exist."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)
