"""Resolver package for the GraphQL schema.

Each resolver receives the parent object already built by its owning type
(a ``Book`` or ``Author`` made from a store record) and derives its value
from the entity store found in the GraphQL context. Cross-reference fields
issue one store call per parent node; a per-request DataLoader keyed by id
is where batching would go.
"""

# Intentionally empty; functions are defined in sibling modules.
