"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addAuthor")
    async def add_author(self, info: strawberry.Info, name: str, age: int) -> Author:
        """Create a new author."""
        from ..resolvers.author import add_author

        return await add_author(info, name, age)

    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str,
        author_id: Annotated[strawberry.ID, strawberry.argument(name="authorID")],
        genre: str | None = None,
    ) -> Book:
        """Create a new book. The author reference is not checked."""
        from ..resolvers.book import add_book

        return await add_book(info, title, genre, author_id)
