from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from pymongo import ReturnDocument

from ...database import parse_object_id
from ...errors import (
    AUTHOR_NOT_FOUND,
    POST_ALREADY_LIKED,
    POST_NOT_FOUND,
    POST_NOT_LIKED,
    DomainError,
)
from ...logging import get_logger
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User

if TYPE_CHECKING:
    from ..context import GraphQLContext
    from ..mutations.root import CreatePostInput, UpdatePostInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_posts(ctx: GraphQLContext) -> list[Post]:
    documents = await ctx.posts.find().to_list(length=None)
    return [Post.from_document(document) for document in documents]


async def resolve_post_by_id(ctx: GraphQLContext, id: strawberry.ID | str) -> Post | None:
    document = await ctx.posts.find_one({"_id": parse_object_id(id)})
    if document is None:
        return None
    return Post.from_document(document)


# Mutation resolvers
async def create_post(ctx: GraphQLContext, input: CreatePostInput) -> Post:
    """Create a post for an existing author."""
    author_id = parse_object_id(input.author_id)

    if await ctx.users.find_one({"_id": author_id}) is None:
        raise DomainError(AUTHOR_NOT_FOUND)

    document = {
        "content": input.content,
        "author": author_id,
        "comments": [],
        "likes": [],
    }
    result = await ctx.posts.insert_one(document)
    document["_id"] = result.inserted_id

    logger.info("Post created", post_id=str(result.inserted_id), author_id=str(author_id))

    return Post.from_document(document)


async def update_post(
    ctx: GraphQLContext, id: strawberry.ID | str, input: UpdatePostInput
) -> Post | None:
    """Overwrite a post's content. Returns the post as it was before the update."""
    post_id = parse_object_id(id)

    if input.content is None:
        document = await ctx.posts.find_one({"_id": post_id})
        return Post.from_document(document) if document is not None else None

    document = await ctx.posts.find_one_and_update(
        {"_id": post_id},
        {"$set": {"content": input.content}},
        return_document=ReturnDocument.BEFORE,
    )
    if document is None:
        return None

    logger.info("Post updated", post_id=str(post_id))

    return Post.from_document(document)


async def delete_post(ctx: GraphQLContext, id: strawberry.ID | str) -> bool:
    """Delete a post. Its comments are left in place."""
    post_id = parse_object_id(id)
    result = await ctx.posts.delete_one({"_id": post_id})

    if result.deleted_count != 1:
        return False

    logger.info("Post deleted", post_id=str(post_id))
    return True


async def add_like_to_post(
    ctx: GraphQLContext, post_id: strawberry.ID | str, user_id: strawberry.ID | str
) -> Post | None:
    """
    Add a user to a post's likes.

    A user can like a post only once. The write only applies while the user
    is still absent from the likes, so two concurrent likes cannot both land.
    """
    post_oid = parse_object_id(post_id)
    user_oid = parse_object_id(user_id)

    post = await ctx.posts.find_one({"_id": post_oid})
    if post is None:
        raise DomainError(POST_NOT_FOUND)

    if user_oid in post.get("likes", []):
        raise DomainError(POST_ALREADY_LIKED)

    result = await ctx.posts.update_one(
        {"_id": post_oid, "likes": {"$ne": user_oid}},
        {"$push": {"likes": user_oid}},
    )
    if result.modified_count == 0:
        raise DomainError(POST_ALREADY_LIKED)

    logger.info("Post liked", post_id=str(post_oid), user_id=str(user_oid))

    refreshed = await ctx.posts.find_one({"_id": post_oid})
    return Post.from_document(refreshed) if refreshed is not None else None


async def remove_like_from_post(
    ctx: GraphQLContext, post_id: strawberry.ID | str, user_id: strawberry.ID | str
) -> Post | None:
    """Remove a user from a post's likes."""
    post_oid = parse_object_id(post_id)
    user_oid = parse_object_id(user_id)

    post = await ctx.posts.find_one({"_id": post_oid})
    if post is None:
        raise DomainError(POST_NOT_FOUND)

    if user_oid not in post.get("likes", []):
        raise DomainError(POST_NOT_LIKED)

    result = await ctx.posts.update_one(
        {"_id": post_oid, "likes": user_oid},
        {"$pull": {"likes": user_oid}},
    )
    if result.modified_count == 0:
        raise DomainError(POST_NOT_LIKED)

    logger.info("Post unliked", post_id=str(post_oid), user_id=str(user_oid))

    refreshed = await ctx.posts.find_one({"_id": post_oid})
    return Post.from_document(refreshed) if refreshed is not None else None


# Field resolvers
async def resolve_post_author(ctx: GraphQLContext, post: Post) -> User | None:
    document = await ctx.users.find_one({"_id": post.author_id})
    if document is None:
        logger.debug("Post author not found", post_id=post.id, author_id=str(post.author_id))
        return None
    return User.from_document(document)


async def resolve_post_comments(ctx: GraphQLContext, post: Post) -> list[Comment]:
    documents = await ctx.comments.find({"post": post.object_id}).to_list(length=None)
    return [Comment.from_document(document) for document in documents]


async def resolve_post_likes(ctx: GraphQLContext, post: Post) -> list[User]:
    if not post.like_ids:
        return []
    documents = await ctx.users.find({"_id": {"$in": post.like_ids}}).to_list(length=None)
    return [User.from_document(document) for document in documents]
