"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str

    # Stored references, hydrated lazily by the field resolvers below
    post_ids: strawberry.Private[list[ObjectId]]
    comment_ids: strawberry.Private[list[ObjectId]]
    liked_post_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:  # noqa: E501
        """Get posts owned by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:  # noqa: E501
        """Get comments written by this user."""
        from ..resolvers.user import resolve_user_comments

        return await resolve_user_comments(self, info)

    @strawberry.field(name="likedPosts")
    async def liked_posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:  # noqa: E501
        """Get posts this user has liked."""
        from ..resolvers.user import resolve_user_liked_posts

        return await resolve_user_liked_posts(self, info)
