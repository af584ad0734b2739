"""
Reusable seed data functions for database initialization.

Loads the demo books and authors into a writable store. Fixture ids are
not reused: the store assigns fresh ids and book references are remapped
to the ids the authors received.
"""

from __future__ import annotations

from ..logging import get_logger
from ..store.base import EntityStore
from ..store.fixtures import fixture_authors, fixture_books

logger = get_logger(__name__)


async def seed_initial_data(store: EntityStore) -> dict[str, int]:
    """
    Seed the demo catalog into ``store``.

    Authors are matched by name and books by title, so running the seed
    twice does not duplicate anything.

    Returns:
        Counts of authors and books created by this call
    """
    created = {"authors": 0, "books": 0}
    author_ids: dict[str, str] = {}

    for author in fixture_authors():
        existing = await store.find_author_by_name(author.name)
        if existing:
            logger.debug("Author already exists", name=author.name, author_id=existing.id)
            author_ids[author.id] = existing.id
            continue
        stored = await store.create_author(author.name, author.age)
        author_ids[author.id] = stored.id
        created["authors"] += 1

    for book in fixture_books():
        if await store.find_book_by_title(book.title):
            logger.debug("Book already exists", title=book.title)
            continue
        await store.create_book(book.title, book.genre, author_ids.get(book.author_id, book.author_id))
        created["books"] += 1

    logger.info("Seed data loaded", **created)
    return created
