from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import StoreError, ValidationError
from ...logging import get_logger
from ..context import get_store_from_info, require_text, require_value

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_author(
    info: strawberry.Info, name: str | None = None, id: str | None = None
) -> Author | None:
    """
    Resolve a single author by exact name, or by id when one is given.
    """
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)

    if id is not None:
        record = await store.find_author_by_id(str(id))
    elif name is not None:
        record = await store.find_author_by_name(name)
    else:
        raise ValidationError("author requires either 'name' or 'id'", field="name")

    if record is None:
        logger.info("Author not found", author_id=id, name=name)
        return None
    return AuthorType.from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in the store."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    return [AuthorType.from_record(record) for record in await store.list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose author_id is this author's id. Never None."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    records = await store.list_books_by_author(str(author.id))
    return [BookType.from_record(record) for record in records]


# Mutation resolvers
async def add_author(info: strawberry.Info, name: str | None, age: int | None) -> Author:
    """
    Create an author.

    Both arguments are required and checked before the store is touched.
    """
    from ..types.author import Author as AuthorType

    name = require_text(name, "name")
    age = require_value(age, "age")

    store = get_store_from_info(info)
    try:
        record = await store.create_author(name, age)
    except StoreError as e:
        logger.error("Failed to add author", name=name, error=str(e))
        raise

    logger.info("Author added", author_id=record.id)
    return AuthorType.from_record(record)
