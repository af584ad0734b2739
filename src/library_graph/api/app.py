"""
Main FastAPI application for the Library Graph server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.base import EntityStore

configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(store: EntityStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Entity store to serve. When omitted, one is built from
            settings at startup and released at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Library Graph API...")
        owns_store = store is None
        if owns_store:
            from ..store.factory import build_store

            app.state.store = await build_store(settings)
        else:
            app.state.store = store
        logger.info("Entity store ready", backend=app.state.store.backend)

        yield

        logger.info("Shutting down Library Graph API...")
        if owns_store:
            await app.state.store.close()
            if app.state.store.backend == "database":
                from ..database.connection import dispose_database

                await dispose_database()

    app = FastAPI(
        title="Library Graph API",
        description="GraphQL catalog of books and authors",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current = getattr(app.state, "store", None)
        return {
            "status": "healthy",
            "version": __version__,
            "store": current.backend if current is not None else None,
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_graph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
