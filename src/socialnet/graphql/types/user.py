"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

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

    object_id: strawberry.Private[ObjectId]
    password: strawberry.Private[str]
    post_ids: strawberry.Private[list[ObjectId]]
    comment_ids: strawberry.Private[list[ObjectId]]
    liked_post_ids: strawberry.Private[list[ObjectId]]

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        return cls(
            id=strawberry.ID(str(document["_id"])),
            name=document["name"],
            email=document["email"],
            object_id=document["_id"],
            password=document.get("password", ""),
            post_ids=list(document.get("posts", [])),
            comment_ids=list(document.get("comments", [])),
            liked_post_ids=list(document.get("likedPosts", [])),
        )

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(info.context, self)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Comments written by this user."""
        from ..resolvers.user import resolve_user_comments

        return await resolve_user_comments(info.context, self)

    @strawberry.field(name="likedPosts")
    async def liked_posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Posts this user has liked."""
        from ..resolvers.user import resolve_user_liked_posts

        return await resolve_user_liked_posts(info.context, self)
