"""Entity store implementations for books and authors."""

from .base import AuthorRecord, BookRecord, EntityStore
from .factory import build_store
from .memory import MemoryStore
from .sql import SqlStore

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "EntityStore",
    "MemoryStore",
    "SqlStore",
    "build_store",
]
