"""
Tests for the in-memory entity store
"""

import pytest

from library_graph.errors import StoreError
from library_graph.store.base import AuthorRecord, BookRecord
from library_graph.store.fixtures import AUTHORS, BOOKS
from library_graph.store.memory import MemoryStore


class TestLookups:
    @pytest.mark.asyncio
    async def test_find_book_by_id(self, fixture_store):
        book = await fixture_store.find_book_by_id("2")
        assert book == BookRecord(id="2", title="The Final Empire", genre="Fantasy", author_id="2")

    @pytest.mark.asyncio
    async def test_find_book_by_id_not_found(self, fixture_store):
        assert await fixture_store.find_book_by_id("999") is None

    @pytest.mark.asyncio
    async def test_find_book_by_title_is_exact(self, fixture_store):
        assert (await fixture_store.find_book_by_title("The Long Earth")).id == "3"
        assert await fixture_store.find_book_by_title("the long earth") is None

    @pytest.mark.asyncio
    async def test_find_book_by_title_returns_first_match(self):
        store = MemoryStore(
            books=[
                BookRecord(id="a", title="Twin", genre=None, author_id="1"),
                BookRecord(id="b", title="Twin", genre=None, author_id="2"),
            ]
        )
        assert (await store.find_book_by_title("Twin")).id == "a"

    @pytest.mark.asyncio
    async def test_find_author_by_name(self, fixture_store):
        author = await fixture_store.find_author_by_name("Terry Pratchett")
        assert author == AuthorRecord(id="3", name="Terry Pratchett", age=66)
        assert await fixture_store.find_author_by_name("Nobody") is None

    @pytest.mark.asyncio
    async def test_find_author_by_id(self, fixture_store):
        assert (await fixture_store.find_author_by_id("1")).name == "Patrick Rothfuss"
        assert await fixture_store.find_author_by_id("42") is None

    @pytest.mark.asyncio
    async def test_list_books_by_author(self, fixture_store):
        books = await fixture_store.list_books_by_author("3")
        assert sorted(b.id for b in books) == ["3", "5", "6"]

    @pytest.mark.asyncio
    async def test_list_books_by_author_without_books_is_empty(self, fixture_store):
        assert await fixture_store.list_books_by_author("404") == []

    @pytest.mark.asyncio
    async def test_list_all_returns_every_record_once(self, fixture_store):
        books = await fixture_store.list_books()
        authors = await fixture_store.list_authors()
        assert sorted(b.id for b in books) == sorted(row["id"] for row in BOOKS)
        assert sorted(a.id for a in authors) == sorted(row["id"] for row in AUTHORS)

    @pytest.mark.asyncio
    async def test_list_returns_a_copy(self, memory_store):
        books = await memory_store.list_books()
        books.clear()
        assert await memory_store.count_books() == len(BOOKS)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_author_assigns_fresh_id(self, memory_store):
        before = {a.id for a in await memory_store.list_authors()}

        author = await memory_store.create_author("Ursula K. Le Guin", 88)

        assert author.id not in before
        assert author.name == "Ursula K. Le Guin"
        assert await memory_store.find_author_by_id(author.id) == author
        assert await memory_store.count_authors() == len(before) + 1

    @pytest.mark.asyncio
    async def test_create_book_keeps_dangling_author_reference(self, memory_store):
        book = await memory_store.create_book("Orphan", None, "no-such-author")

        assert book.author_id == "no-such-author"
        assert await memory_store.find_book_by_id(book.id) == book
        assert await memory_store.find_author_by_id("no-such-author") is None

    @pytest.mark.asyncio
    async def test_read_only_store_rejects_writes(self, fixture_store):
        with pytest.raises(StoreError) as exc_info:
            await fixture_store.create_author("Someone", 30)
        assert exc_info.value.operation == "create_author"

        with pytest.raises(StoreError):
            await fixture_store.create_book("Something", None, "1")

        assert await fixture_store.count_authors() == len(AUTHORS)
        assert await fixture_store.count_books() == len(BOOKS)
