"""
Comment GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str

    object_id: strawberry.Private[ObjectId]
    author_id: strawberry.Private[ObjectId]
    post_id: strawberry.Private[ObjectId]

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Comment":
        return cls(
            id=strawberry.ID(str(document["_id"])),
            text=document["text"],
            object_id=document["_id"],
            author_id=document["author"],
            post_id=document["post"],
        )

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")] | None:
        from ..resolvers.comment import resolve_comment_author

        return await resolve_comment_author(info.context, self)

    @strawberry.field
    async def post(self, info: strawberry.Info) -> Annotated["Post", strawberry.lazy(".post")] | None:
        from ..resolvers.comment import resolve_comment_post

        return await resolve_comment_post(info.context, self)
