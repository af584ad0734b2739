"""
Helpers shared by resolvers: store lookup and required-argument checks.
"""

from typing import Any

import strawberry

from ..errors import ValidationError
from ..store.base import EntityStore


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    """Return the entity store threaded through the GraphQL context."""
    context: Any = info.context
    store = context.get("store") if isinstance(context, dict) else getattr(context, "store", None)
    if store is None:
        raise RuntimeError("No entity store in GraphQL context")
    return store


def require_text(value: str | None, field: str) -> str:
    """Reject a missing or blank string argument."""
    if value is None or not value.strip():
        raise ValidationError(f"'{field}' is required", field=field)
    return value


def require_value(value: Any, field: str) -> Any:
    """Reject a missing argument."""
    if value is None:
        raise ValidationError(f"'{field}' is required", field=field)
    return value
