"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def book(
        self,
        info: strawberry.Info,
        id: strawberry.ID | None = None,
        title: str | None = None,
    ) -> Book | None:
        """Get a book by ID, or by exact title."""
        from ..resolvers.book import resolve_book

        return await resolve_book(info, id=id, title=title)

    @strawberry.field
    async def books(self, info: strawberry.Info) -> list[Book]:
        """Get all books."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field
    async def author(
        self,
        info: strawberry.Info,
        name: str | None = None,
        id: strawberry.ID | None = None,
    ) -> Author | None:
        """Get an author by exact name, or by ID."""
        from ..resolvers.author import resolve_author

        return await resolve_author(info, name=name, id=id)

    @strawberry.field
    async def authors(self, info: strawberry.Info) -> list[Author]:
        """Get all authors."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)
