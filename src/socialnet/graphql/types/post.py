"""
Post GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    content: str

    object_id: strawberry.Private[ObjectId]
    author_id: strawberry.Private[ObjectId]
    comment_ids: strawberry.Private[list[ObjectId]]
    like_ids: strawberry.Private[list[ObjectId]]

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Post":
        return cls(
            id=strawberry.ID(str(document["_id"])),
            content=document["content"],
            object_id=document["_id"],
            author_id=document["author"],
            comment_ids=list(document.get("comments", [])),
            like_ids=list(document.get("likes", [])),
        )

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(info.context, self)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")]]:
        """Get comments left on this post."""
        from ..resolvers.post import resolve_post_comments

        return await resolve_post_comments(info.context, self)

    @strawberry.field
    async def likes(self, info: strawberry.Info) -> list[Annotated["User", strawberry.lazy(".user")]]:
        """Get users who liked this post."""
        from ..resolvers.post import resolve_post_likes

        return await resolve_post_likes(info.context, self)
