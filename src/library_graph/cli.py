#!/usr/bin/env python3
"""
Main CLI entry point for the Library Graph server.
"""

import asyncio
import json
import logging
import os
import sys

import click
import uvicorn

from library_graph import __version__
from library_graph.config import settings
from library_graph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="library-graph")
def cli() -> None:
    """Library Graph CLI - serve the API and manage catalog data."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--store",
    "store_backend",
    default=None,
    type=click.Choice(["fixtures", "database"]),
    help="Entity store backend (default: from settings)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, store_backend: str | None, log_level: str) -> None:
    """Start the Library Graph API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Library Graph API server",
        host=host,
        port=port,
        reload=reload,
        store=store_backend or settings.store_backend,
        log_level=log_level,
    )

    # Without --reload uvicorn imports the app in this process and sees the
    # live settings object; the reloader's child process reads the environment
    if store_backend:
        settings.store_backend = store_backend
        os.environ["LIBRARY_STORE_BACKEND"] = store_backend
    settings.debug = log_level == "debug"
    settings.log_level = log_level.upper()
    os.environ["LIBRARY_DEBUG"] = "true" if settings.debug else "false"
    os.environ["LIBRARY_LOG_LEVEL"] = settings.log_level

    try:
        uvicorn.run(
            "library_graph.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Database URL (default: from settings)")
def init_db(database_url: str | None) -> None:
    """Create the Books and Authors tables."""
    from library_graph.database.connection import create_tables, dispose_database, init_database

    configure_logging()

    async def do_init():
        init_database(database_url)
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)
    click.echo("✓ Tables created")


@cli.command()
@click.option("--database-url", default=None, help="Database URL (default: from settings)")
def seed(database_url: str | None) -> None:
    """Seed the database with the demo books and authors."""
    from library_graph.database.connection import (
        create_tables,
        dispose_database,
        get_session_factory,
        init_database,
    )
    from library_graph.database.seed_data import seed_initial_data
    from library_graph.store.sql import SqlStore

    configure_logging()

    async def do_seed():
        init_database(database_url)
        try:
            await create_tables()
            return await seed_initial_data(SqlStore(get_session_factory()))
        finally:
            await dispose_database()

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)
    click.echo(
        f"✓ Database seeded: {created['authors']} author(s), {created['books']} book(s) added"
    )


@cli.command()
@click.argument("document")
@click.option("--variables", default=None, help="JSON object of variable values")
@click.option(
    "--store",
    "store_backend",
    default=None,
    type=click.Choice(["fixtures", "database"]),
    help="Entity store backend (default: from settings)",
)
def query(document: str, variables: str | None, store_backend: str | None) -> None:
    """Run a GraphQL DOCUMENT against the catalog and print the JSON result."""
    from library_graph.graphql.schema import execute
    from library_graph.store.factory import build_store

    # Keep stdout for the JSON result
    configure_logging(level=logging.WARNING, stream=sys.stderr)

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="--variables") from e

    config = settings.model_copy(update={"store_backend": store_backend}) if store_backend else settings

    async def do_query():
        store = await build_store(config)
        try:
            return await execute(document, store, variables=variable_values)
        finally:
            await store.close()
            if store.backend == "database":
                from library_graph.database.connection import dispose_database

                await dispose_database()

    result = asyncio.run(do_query())
    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    click.echo(json.dumps(payload, indent=2))
    if result.errors:
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
