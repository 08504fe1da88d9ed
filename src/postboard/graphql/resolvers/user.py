from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..errors import Conflict, NotFound
from ..lookups import find_all, find_by_id, find_by_ids, set_fields
from ..references import to_object_id
from .documents import comment_from_document, post_from_document, user_from_document

if TYPE_CHECKING:
    from ..mutations.root import CreateUserInput, UpdateUserInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[User]:
    store = get_store(info)
    return [user_from_document(doc) for doc in await find_all(store.users)]


async def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    store = get_store(info)
    doc = await find_by_id(store.users, to_object_id(id))
    return user_from_document(doc) if doc else None


# User field resolvers
async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    store = get_store(info)
    return [post_from_document(doc) for doc in await find_by_ids(store.posts, user.post_ids)]


async def resolve_user_comments(user: User, info: strawberry.Info) -> list[Comment]:
    store = get_store(info)
    docs = await find_by_ids(store.comments, user.comment_ids)
    return [comment_from_document(doc) for doc in docs]


async def resolve_user_liked_posts(user: User, info: strawberry.Info) -> list[Post]:
    store = get_store(info)
    docs = await find_by_ids(store.posts, user.liked_post_ids)
    return [post_from_document(doc) for doc in docs]


# Mutations
async def create_user(info: strawberry.Info, input: CreateUserInput) -> User:
    """
    Register a new user.

    Email must not already be registered. The returned user has empty
    relationship lists.
    """
    store = get_store(info)

    existing = await store.users.find_one({"email": input.email})
    if existing:
        logger.info("User creation rejected: email taken", user_id=str(existing["_id"]))
        raise Conflict("User exists")

    doc = {
        "name": input.name,
        "email": input.email,
        "password": await asyncio.to_thread(store.hasher.hash, input.password),
        "posts": [],
        "comments": [],
        "likedPosts": [],
    }
    result = await store.users.insert_one(doc)

    logger.info("User created", user_id=str(result.inserted_id))

    from ..types.user import User as UserType

    return UserType(
        id=str(result.inserted_id),
        name=input.name,
        email=input.email,
        post_ids=[],
        comment_ids=[],
        liked_post_ids=[],
    )


async def update_user(info: strawberry.Info, id: str, input: UpdateUserInput) -> User:
    """
    Overwrite the provided fields of a user.

    Returns the user as it was before the update. Email uniqueness is only
    enforced at creation and is not re-checked here.
    """
    store = get_store(info)
    user_id = to_object_id(id)

    existing = await find_by_id(store.users, user_id)
    if not existing:
        logger.info("User update rejected: not found", user_id=id)
        raise NotFound("User not found")

    updates = {}
    if input.name is not None:
        updates["name"] = input.name
    if input.email is not None:
        updates["email"] = input.email
    if input.password is not None:
        updates["password"] = await asyncio.to_thread(store.hasher.hash, input.password)

    if not updates:
        return user_from_document(existing)

    previous = await set_fields(store.users, user_id, updates)
    if previous is None:
        raise NotFound("User not found")

    logger.info("User updated", user_id=id, updated_fields=sorted(updates))

    return user_from_document(previous)


async def delete_user(info: strawberry.Info, id: str) -> bool:
    """
    Delete a user.

    References to the user held by posts and comments are left in place.
    """
    store = get_store(info)

    deleted = await store.users.find_one_and_delete({"_id": to_object_id(id)})
    if not deleted:
        logger.info("User deletion rejected: not found", user_id=id)
        raise NotFound("User not found")

    logger.info("User deleted", user_id=id)

    return True
