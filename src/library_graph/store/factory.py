"""Build the entity store selected by configuration."""

from ..config import STORE_BACKENDS, Settings
from ..logging import get_logger
from .base import EntityStore
from .memory import MemoryStore
from .sql import SqlStore

logger = get_logger(__name__)


async def build_store(settings: Settings) -> EntityStore:
    """Create the store for ``settings.store_backend``.

    ``fixtures`` serves the read-only demo data. ``database`` initializes the
    shared engine and, if configured, creates the tables.
    """
    backend = settings.store_backend.lower()
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown store backend '{settings.store_backend}'. "
            f"Expected one of: {', '.join(STORE_BACKENDS)}"
        )

    if backend == "fixtures":
        logger.info("Using fixture store", read_only=True)
        return MemoryStore.from_fixtures(read_only=True)

    from ..database.connection import create_tables, get_session_factory, init_database

    init_database()
    if settings.create_tables_on_startup:
        await create_tables()
    logger.info("Using database store")
    return SqlStore(get_session_factory())
