"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.base import AuthorRecord

if TYPE_CHECKING:
    from .book import Book


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str
    age: int

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=strawberry.ID(record.id), name=record.name, age=record.age)

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")]]:
        """Get the books written by this author. Recomputed on every request."""
        from ..resolvers.author import resolve_author_books

        return await resolve_author_books(self, info)
