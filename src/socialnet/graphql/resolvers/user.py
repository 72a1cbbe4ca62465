from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from pymongo import ReturnDocument

from ...database import parse_object_id
from ...errors import EMAIL_ALREADY_REGISTERED, EMAIL_REGISTERED_BY_ANOTHER_USER, DomainError
from ...logging import get_logger
from ...security import hash_password
from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User

if TYPE_CHECKING:
    from ..context import GraphQLContext
    from ..mutations.root import CreateUserInput, UpdateUserInput

logger = get_logger(__name__)


# Query resolvers
async def resolve_users(ctx: GraphQLContext) -> list[User]:
    documents = await ctx.users.find().to_list(length=None)
    return [User.from_document(document) for document in documents]


async def resolve_user_by_id(ctx: GraphQLContext, id: strawberry.ID | str) -> User | None:
    document = await ctx.users.find_one({"_id": parse_object_id(id)})
    if document is None:
        return None
    return User.from_document(document)


# Mutation resolvers
async def create_user(ctx: GraphQLContext, input: CreateUserInput) -> User:
    """
    Register a new user.

    The email must not belong to any existing user. The password is stored
    as a salted bcrypt hash and the returned user carries that hash.
    """
    if await ctx.users.find_one({"email": input.email}) is not None:
        raise DomainError(EMAIL_ALREADY_REGISTERED)

    document = {
        "name": input.name,
        "email": input.email,
        "password": hash_password(input.password),
        "posts": [],
        "comments": [],
        "likedPosts": [],
    }
    result = await ctx.users.insert_one(document)
    document["_id"] = result.inserted_id

    logger.info("User created", user_id=str(result.inserted_id))

    return User.from_document(document)


async def update_user(
    ctx: GraphQLContext, id: strawberry.ID | str, input: UpdateUserInput
) -> User | None:
    """
    Overwrite the supplied fields of a user.

    The password is re-hashed only when a non-empty one is given. Returns the
    user as it was before the update, or None if no user has this id.
    """
    user_id = parse_object_id(id)

    if input.email is not None:
        owner = await ctx.users.find_one({"email": input.email})
        if owner is not None and owner["_id"] != user_id:
            raise DomainError(EMAIL_REGISTERED_BY_ANOTHER_USER)

    changes: dict[str, str] = {}
    if input.name is not None:
        changes["name"] = input.name
    if input.email is not None:
        changes["email"] = input.email
    if input.password:
        changes["password"] = hash_password(input.password)

    if not changes:
        document = await ctx.users.find_one({"_id": user_id})
        return User.from_document(document) if document is not None else None

    document = await ctx.users.find_one_and_update(
        {"_id": user_id},
        {"$set": changes},
        return_document=ReturnDocument.BEFORE,
    )
    if document is None:
        return None

    logger.info("User updated", user_id=str(user_id), updated_fields=sorted(changes))

    return User.from_document(document)


async def delete_user(ctx: GraphQLContext, id: strawberry.ID | str) -> bool:
    """Delete a user. Their posts and comments are left in place."""
    user_id = parse_object_id(id)
    result = await ctx.users.delete_one({"_id": user_id})

    if result.deleted_count != 1:
        return False

    logger.info("User deleted", user_id=str(user_id))
    return True


# Field resolvers
async def resolve_user_posts(ctx: GraphQLContext, user: User) -> list[Post]:
    documents = await ctx.posts.find({"author": user.object_id}).to_list(length=None)
    return [Post.from_document(document) for document in documents]


async def resolve_user_comments(ctx: GraphQLContext, user: User) -> list[Comment]:
    documents = await ctx.comments.find({"author": user.object_id}).to_list(length=None)
    return [Comment.from_document(document) for document in documents]


async def resolve_user_liked_posts(ctx: GraphQLContext, user: User) -> list[Post]:
    # Matches posts whose likes array contains this user
    documents = await ctx.posts.find({"likes": user.object_id}).to_list(length=None)
    return [Post.from_document(document) for document in documents]
