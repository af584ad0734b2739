"""
Demo datasets served by the in-memory store and loaded by ``library-graph seed``.
"""

from .base import AuthorRecord, BookRecord

BOOKS: tuple[dict, ...] = (
    {"id": "1", "title": "Name of the Wind", "genre": "Fantasy", "author_id": "1"},
    {"id": "2", "title": "The Final Empire", "genre": "Fantasy", "author_id": "2"},
    {"id": "3", "title": "The Long Earth", "genre": "Sci-Fi", "author_id": "3"},
    {"id": "4", "title": "The Hero of Ages", "genre": "Fantasy", "author_id": "2"},
    {"id": "5", "title": "The Colour of Magic", "genre": "Fantasy", "author_id": "3"},
    {"id": "6", "title": "The Light Fantastic", "genre": "Fantasy", "author_id": "3"},
)

AUTHORS: tuple[dict, ...] = (
    {"id": "1", "name": "Patrick Rothfuss", "age": 44},
    {"id": "2", "name": "Brandon Sanderson", "age": 42},
    {"id": "3", "name": "Terry Pratchett", "age": 66},
)


def fixture_books() -> list[BookRecord]:
    return [BookRecord(**row) for row in BOOKS]


def fixture_authors() -> list[AuthorRecord]:
    return [AuthorRecord(**row) for row in AUTHORS]
