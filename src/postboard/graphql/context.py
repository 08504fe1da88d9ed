"""
Per-request store handles passed to every resolver and mutation handler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection

    from ..hashing import PasswordHasher

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoreContext:
    """Non-owning handles to the collections used while serving one request."""

    users: AsyncIOMotorCollection
    posts: AsyncIOMotorCollection
    comments: AsyncIOMotorCollection
    hasher: PasswordHasher


def get_store(info: strawberry.Info) -> StoreContext:
    """
    Extract the store context from a GraphQL info object.

    Raises:
        RuntimeError: If the context getter did not provide one
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Store context is not configured for this request")
    return store
