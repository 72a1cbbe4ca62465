from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from pymongo import ReturnDocument

from ...database import parse_object_id
from ...errors import AUTHOR_NOT_FOUND, COMMENT_NOT_FOUND, COMMENT_POST_NOT_FOUND, DomainError
from ...logging import get_logger
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User

if TYPE_CHECKING:
    from ..context import GraphQLContext
    from ..mutations.root import CreateCommentInput, UpdateCommentInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_comments(ctx: GraphQLContext) -> list[Comment]:
    documents = await ctx.comments.find().to_list(length=None)
    return [Comment.from_document(document) for document in documents]


async def resolve_comment_by_id(ctx: GraphQLContext, id: strawberry.ID | str) -> Comment | None:
    document = await ctx.comments.find_one({"_id": parse_object_id(id)})
    if document is None:
        return None
    return Comment.from_document(document)


# Mutation resolvers
async def create_comment(ctx: GraphQLContext, input: CreateCommentInput) -> Comment:
    """
    Comment on a post.

    Both the author and the post must exist. The comment is inserted first and
    then appended to the post's comment list; the two writes are not atomic.
    """
    author_id = parse_object_id(input.author_id)
    post_id = parse_object_id(input.post_id)

    if await ctx.users.find_one({"_id": author_id}) is None:
        raise DomainError(AUTHOR_NOT_FOUND)

    if await ctx.posts.find_one({"_id": post_id}) is None:
        raise DomainError(COMMENT_POST_NOT_FOUND)

    document = {
        "text": input.text,
        "author": author_id,
        "post": post_id,
    }
    result = await ctx.comments.insert_one(document)
    document["_id"] = result.inserted_id

    await ctx.posts.update_one({"_id": post_id}, {"$push": {"comments": result.inserted_id}})

    logger.info(
        "Comment created",
        comment_id=str(result.inserted_id),
        post_id=str(post_id),
        author_id=str(author_id),
    )

    return Comment.from_document(document)


async def update_comment(
    ctx: GraphQLContext, id: strawberry.ID | str, input: UpdateCommentInput
) -> Comment | None:
    """Overwrite a comment's text. Returns the comment as it was before the update."""
    comment_id = parse_object_id(id)

    if input.text is None:
        document = await ctx.comments.find_one({"_id": comment_id})
        return Comment.from_document(document) if document is not None else None

    document = await ctx.comments.find_one_and_update(
        {"_id": comment_id},
        {"$set": {"text": input.text}},
        return_document=ReturnDocument.BEFORE,
    )
    if document is None:
        return None

    logger.info("Comment updated", comment_id=str(comment_id))

    return Comment.from_document(document)


async def delete_comment(ctx: GraphQLContext, id: strawberry.ID | str) -> bool:
    """
    Delete a comment and pull it from its post's comment list.

    Returns False if the comment disappeared between the lookup and the delete.
    """
    comment_id = parse_object_id(id)

    comment = await ctx.comments.find_one({"_id": comment_id})
    if comment is None:
        raise DomainError(COMMENT_NOT_FOUND)

    result = await ctx.comments.delete_one({"_id": comment_id})
    if result.deleted_count != 1:
        logger.warning("Comment vanished before delete", comment_id=str(comment_id))
        return False

    await ctx.posts.update_one({"_id": comment["post"]}, {"$pull": {"comments": comment_id}})

    logger.info("Comment deleted", comment_id=str(comment_id), post_id=str(comment["post"]))
    return True


# Field resolvers
async def resolve_comment_author(ctx: GraphQLContext, comment: Comment) -> User | None:
    document = await ctx.users.find_one({"_id": comment.author_id})
    return User.from_document(document) if document is not None else None


async def resolve_comment_post(ctx: GraphQLContext, comment: Comment) -> Post | None:
    document = await ctx.posts.find_one({"_id": comment.post_id})
    return Post.from_document(document) if document is not None else None
