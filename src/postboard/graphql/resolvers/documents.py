"""
Conversion from stored documents to GraphQL types
"""

from typing import Any

from ..references import to_external_id, to_object_ids
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


def user_from_document(doc: dict[str, Any]) -> User:
    return User(
        id=to_external_id(doc["_id"]),
        name=doc.get("name", ""),
        email=doc.get("email", ""),
        post_ids=to_object_ids(doc.get("posts")),
        comment_ids=to_object_ids(doc.get("comments")),
        liked_post_ids=to_object_ids(doc.get("likedPosts")),
    )


def post_from_document(doc: dict[str, Any]) -> Post:
    return Post(
        id=to_external_id(doc["_id"]),
        content=doc.get("content", ""),
        author_id=doc.get("author"),
        comment_ids=to_object_ids(doc.get("comments")),
        like_ids=to_object_ids(doc.get("likes")),
    )


def comment_from_document(doc: dict[str, Any]) -> Comment:
    return Comment(
        id=to_external_id(doc["_id"]),
        text=doc.get("text", ""),
        author_id=doc.get("author"),
        post_id=doc.get("post"),
    )
