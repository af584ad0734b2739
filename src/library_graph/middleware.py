"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_document(document: str) -> str:
    """Derive a log label from a GraphQL document."""
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"
    match = _OPERATION_RE.search(document)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Return the GraphQL operation name of a request to the GraphQL endpoint."""
    if request.url.path != settings.graphql_path:
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if op:
            return op
        q = params.get("query")
        return operation_name_from_document(q) if q else None

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            op = data.get("operationName")
            if isinstance(op, str) and op:
                return op
            q = data.get("query")
            if not isinstance(q, str) or not q:
                return None
            return operation_name_from_document(q)
        except (json.JSONDecodeError, TypeError, AttributeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER))

        try:
            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
