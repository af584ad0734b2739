"""
Database module for the library catalog
"""

from .connection import (
    create_tables,
    dispose_database,
    get_async_engine,
    get_async_session,
    get_session_factory,
    init_database,
)

__all__ = [
    "create_tables",
    "dispose_database",
    "get_async_engine",
    "get_async_session",
    "get_session_factory",
    "init_database",
]
