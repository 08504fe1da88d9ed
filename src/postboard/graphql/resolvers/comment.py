from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..errors import NotFound
from ..lookups import find_all, find_by_id, set_fields
from ..references import to_object_id
from .documents import comment_from_document, post_from_document, user_from_document

if TYPE_CHECKING:
    from ..mutations.root import CreateCommentInput, UpdateCommentInput
    from ..types.comment import Comment
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    store = get_store(info)
    return [comment_from_document(doc) for doc in await find_all(store.comments)]


async def resolve_comment_by_id(info: strawberry.Info, id: str) -> Comment | None:
    store = get_store(info)
    doc = await find_by_id(store.comments, to_object_id(id))
    return comment_from_document(doc) if doc else None


# Comment field resolvers
async def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User | None:
    store = get_store(info)
    doc = await find_by_id(store.users, comment.author_id)
    return user_from_document(doc) if doc else None


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post | None:
    store = get_store(info)
    doc = await find_by_id(store.posts, comment.post_id)
    return post_from_document(doc) if doc else None


# Mutations
async def create_comment(
    info: strawberry.Info, user_id: str, post_id: str, input: CreateCommentInput
) -> Comment:
    """
    Create a comment by an existing user on an existing post.

    The new comment is appended to the post's ``comments`` list only; the
    author's ``comments`` list is left as it is.
    """
    store = get_store(info)

    user = await find_by_id(store.users, to_object_id(user_id))
    if not user:
        logger.info("Comment creation rejected: author not found", user_id=user_id)
        raise NotFound("User not found")

    post = await find_by_id(store.posts, to_object_id(post_id))
    if not post:
        logger.info("Comment creation rejected: post not found", post_id=post_id)
        raise NotFound("Post not found")

    result = await store.comments.insert_one(
        {
            "text": input.text,
            "author": user["_id"],
            "post": post["_id"],
        }
    )

    await store.posts.update_one(
        {"_id": post["_id"]}, {"$push": {"comments": result.inserted_id}}
    )

    logger.info(
        "Comment created",
        comment_id=str(result.inserted_id),
        user_id=user_id,
        post_id=post_id,
    )

    from ..types.comment import Comment as CommentType

    return CommentType(
        id=str(result.inserted_id),
        text=input.text,
        author_id=user["_id"],
        post_id=post["_id"],
    )


async def update_comment(info: strawberry.Info, id: str, input: UpdateCommentInput) -> Comment:
    """Overwrite a comment's text. Returns the comment as it was before the update."""
    store = get_store(info)
    comment_id = to_object_id(id)

    existing = await find_by_id(store.comments, comment_id)
    if not existing:
        logger.info("Comment update rejected: not found", comment_id=id)
        raise NotFound("Comment not found")

    if input.text is None:
        return comment_from_document(existing)

    previous = await set_fields(store.comments, comment_id, {"text": input.text})
    if previous is None:
        raise NotFound("Comment not found")

    logger.info("Comment updated", comment_id=id)

    return comment_from_document(previous)


async def delete_comment(info: strawberry.Info, id: str) -> bool:
    store = get_store(info)

    deleted = await store.comments.find_one_and_delete({"_id": to_object_id(id)})
    if not deleted:
        logger.info("Comment deletion rejected: not found", comment_id=id)
        raise NotFound("Comment not found")

    logger.info("Comment deleted", comment_id=id)

    return True
