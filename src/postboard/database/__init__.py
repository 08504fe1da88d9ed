"""
Document store connection management
"""

from .connection import (
    build_store_context,
    get_client,
    get_database,
    init_database,
    reset_database,
    test_database_connection,
)

__all__ = [
    "build_store_context",
    "get_client",
    "get_database",
    "init_database",
    "reset_database",
    "test_database_connection",
]
