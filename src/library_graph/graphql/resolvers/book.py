from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import StoreError, ValidationError
from ...logging import get_logger
from ..context import get_store_from_info, require_text

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_book(
    info: strawberry.Info, id: str | None = None, title: str | None = None
) -> Book | None:
    """
    Resolve a single book by id, or by exact title when no id is given.
    """
    from ..types.book import Book as BookType

    store = get_store_from_info(info)

    if id is not None:
        record = await store.find_book_by_id(str(id))
    elif title is not None:
        record = await store.find_book_by_title(title)
    else:
        raise ValidationError("book requires either 'id' or 'title'", field="id")

    if record is None:
        logger.info("Book not found", book_id=id, title=title)
        return None
    return BookType.from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in the store."""
    from ..types.book import Book as BookType

    store = get_store_from_info(info)
    return [BookType.from_record(record) for record in await store.list_books()]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Resolve the author referenced by ``book.author_id``; dangling ids yield None."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    record = await store.find_author_by_id(book.author_id)
    if record is None:
        logger.debug("Book references missing author", book_id=book.id, author_id=book.author_id)
        return None
    return AuthorType.from_record(record)


# Mutation resolvers
async def add_book(
    info: strawberry.Info, title: str | None, genre: str | None, author_id: str | None
) -> Book:
    """
    Create a book.

    Required arguments are checked before the store is touched. The author
    reference is stored as given.
    """
    from ..types.book import Book as BookType

    title = require_text(title, "title")
    author_id = require_text(author_id, "authorID")

    store = get_store_from_info(info)
    try:
        record = await store.create_book(title, genre, str(author_id))
    except StoreError as e:
        logger.error("Failed to add book", title=title, author_id=author_id, error=str(e))
        raise

    logger.info("Book added", book_id=record.id, author_id=record.author_id)
    return BookType.from_record(record)
