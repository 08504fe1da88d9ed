"""
Store access shared by field resolvers and mutation handlers
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bson import ObjectId
from pymongo import ReturnDocument

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection


async def find_all(collection: AsyncIOMotorCollection) -> list[dict[str, Any]]:
    """Fetch every document in a collection, in store order."""
    return await collection.find().to_list(length=None)


async def find_by_id(
    collection: AsyncIOMotorCollection, ref: ObjectId | None
) -> dict[str, Any] | None:
    """Fetch one document by id; a missing or dangling reference yields None."""
    if ref is None:
        return None
    return await collection.find_one({"_id": ref})


async def find_by_ids(
    collection: AsyncIOMotorCollection, refs: list[ObjectId]
) -> list[dict[str, Any]]:
    """
    Fetch every document whose id is in ``refs``.

    Results come back in the store's natural order, not the order of
    ``refs``. Duplicate and dangling ids contribute nothing extra.
    """
    if not refs:
        return []
    return await collection.find({"_id": {"$in": refs}}).to_list(length=None)


async def set_fields(
    collection: AsyncIOMotorCollection, ref: ObjectId, updates: dict[str, Any]
) -> dict[str, Any] | None:
    """Apply a partial ``$set`` and return the document as it was before."""
    return await collection.find_one_and_update(
        {"_id": ref},
        {"$set": updates},
        return_document=ReturnDocument.BEFORE,
    )
