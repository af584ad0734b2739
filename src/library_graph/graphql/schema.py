"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult

from ..config import settings
from ..logging import get_logger
from ..store.base import EntityStore
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Ensures every lazy type reference resolves, so the server fails fast
    instead of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def execute(
    document: str,
    store: EntityStore,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ExecutionResult:
    """Run a query or mutation against ``store`` without going through HTTP."""
    return await schema.execute(
        document,
        variable_values=variables,
        context_value={"store": store},
        operation_name=operation_name,
    )


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The store is read from ``app.state.store`` on every request; the
    application lifespan owns its creation and shutdown.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": request.app.state.store,
        }

    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphiql=settings.graphiql,
        context_getter=get_context,
    )
