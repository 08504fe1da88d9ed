"""
Postboard Backend
GraphQL layer for users, posts, comments and likes over MongoDB
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
