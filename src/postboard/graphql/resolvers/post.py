from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..errors import NotFound
from ..lookups import find_all, find_by_id, find_by_ids, set_fields
from ..references import to_object_id
from .documents import comment_from_document, post_from_document, user_from_document

if TYPE_CHECKING:
    from ..mutations.root import CreatePostInput, UpdatePostInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_posts(info: strawberry.Info) -> list[Post]:
    store = get_store(info)
    return [post_from_document(doc) for doc in await find_all(store.posts)]


async def resolve_post_by_id(info: strawberry.Info, id: str) -> Post | None:
    store = get_store(info)
    doc = await find_by_id(store.posts, to_object_id(id))
    return post_from_document(doc) if doc else None


# Post field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    """
    Resolve the author of a post.

    Returns None when the author has been deleted since the post was created.
    """
    store = get_store(info)
    doc = await find_by_id(store.users, post.author_id)
    return user_from_document(doc) if doc else None


async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    store = get_store(info)
    docs = await find_by_ids(store.comments, post.comment_ids)
    return [comment_from_document(doc) for doc in docs]


async def resolve_post_likes(post: Post, info: strawberry.Info) -> list[User]:
    store = get_store(info)
    return [user_from_document(doc) for doc in await find_by_ids(store.users, post.like_ids)]


# Mutations
async def create_post(info: strawberry.Info, user_id: str, input: CreatePostInput) -> Post:
    """
    Create a post authored by an existing user.

    The author's ``posts`` list is left as it is. The returned post has
    empty ``comments`` and ``likes``.
    """
    store = get_store(info)

    user = await find_by_id(store.users, to_object_id(user_id))
    if not user:
        logger.info("Post creation rejected: author not found", user_id=user_id)
        raise NotFound("User not found")

    result = await store.posts.insert_one(
        {
            "content": input.content,
            "comments": [],
            "author": user["_id"],
            "likes": [],
        }
    )

    logger.info("Post created", post_id=str(result.inserted_id), user_id=user_id)

    from ..types.post import Post as PostType

    return PostType(
        id=str(result.inserted_id),
        content=input.content,
        author_id=user["_id"],
        comment_ids=[],
        like_ids=[],
    )


async def update_post(info: strawberry.Info, id: str, input: UpdatePostInput) -> Post:
    """Overwrite a post's content. Returns the post as it was before the update."""
    store = get_store(info)
    post_id = to_object_id(id)

    existing = await find_by_id(store.posts, post_id)
    if not existing:
        logger.info("Post update rejected: not found", post_id=id)
        raise NotFound("Post not found")

    if input.content is None:
        return post_from_document(existing)

    previous = await set_fields(store.posts, post_id, {"content": input.content})
    if previous is None:
        raise NotFound("Post not found")

    logger.info("Post updated", post_id=id)

    return post_from_document(previous)


async def delete_post(info: strawberry.Info, id: str) -> bool:
    store = get_store(info)

    deleted = await store.posts.find_one_and_delete({"_id": to_object_id(id)})
    if not deleted:
        logger.info("Post deletion rejected: not found", post_id=id)
        raise NotFound("Post not found")

    logger.info("Post deleted", post_id=id)

    return True


async def _load_like_pair(info: strawberry.Info, post_id: str, user_id: str):
    """Check that both sides of a like exist; the post is checked first."""
    store = get_store(info)

    post = await find_by_id(store.posts, to_object_id(post_id))
    if not post:
        logger.info("Like rejected: post not found", post_id=post_id, user_id=user_id)
        raise NotFound("Post not found")

    user = await find_by_id(store.users, to_object_id(user_id))
    if not user:
        logger.info("Like rejected: user not found", post_id=post_id, user_id=user_id)
        raise NotFound("User not found")

    return store, post, user


async def add_like_to_post(info: strawberry.Info, post_id: str, user_id: str) -> Post:
    """
    Append a user to a post's likes.

    Repeated likes by the same user accumulate. The user's ``likedPosts``
    list is not updated. Returns the post as it was before the like.
    """
    store, post, user = await _load_like_pair(info, post_id, user_id)

    await store.posts.update_one({"_id": post["_id"]}, {"$push": {"likes": user["_id"]}})

    logger.info("Post liked", post_id=post_id, user_id=user_id)

    return post_from_document(post)


async def remove_like_from_post(info: strawberry.Info, post_id: str, user_id: str) -> Post:
    """
    Remove every occurrence of a user from a post's likes.

    Returns the post as it was before the removal.
    """
    store, post, user = await _load_like_pair(info, post_id, user_id)

    await store.posts.update_one({"_id": post["_id"]}, {"$pull": {"likes": user["_id"]}})

    logger.info("Post unliked", post_id=post_id, user_id=user_id)

    return post_from_document(post)
