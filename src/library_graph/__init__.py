"""
Library Graph
GraphQL catalog of books and their authors
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
