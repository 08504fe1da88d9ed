"""
Conversion between external string identifiers and stored ObjectIds
"""

from collections.abc import Iterable

from bson import ObjectId
from bson.errors import InvalidId

from .errors import MalformedReference


def to_object_id(value: str) -> ObjectId:
    """Parse an external identifier into a store-native ObjectId.

    Raises:
        MalformedReference: If ``value`` is not a 24-character hex string
    """
    # ObjectId(None) would mint a fresh id instead of failing
    if value is None:
        raise MalformedReference("Identifier is required")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise MalformedReference(f"Invalid identifier: {value!r}") from e


def to_external_id(value: ObjectId | None) -> str | None:
    """Render a stored identifier for output."""
    if value is None:
        return None
    return str(value)


def to_object_ids(values: Iterable[ObjectId] | None) -> list[ObjectId]:
    """Normalise a stored reference list; a missing list reads as empty."""
    if not values:
        return []
    return list(values)
