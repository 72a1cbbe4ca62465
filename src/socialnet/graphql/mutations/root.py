"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post
from ..types.user import User


# Input types for mutations
@strawberry.input
class CreateUserInput:
    """Input for registering a new user."""

    name: str
    email: str
    password: str


@strawberry.input
class UpdateUserInput:
    """Input for updating a user. Omitted fields are left untouched."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


@strawberry.input
class CreatePostInput:
    """Input for creating a new post."""

    content: str
    author_id: strawberry.ID


@strawberry.input
class UpdatePostInput:
    content: str | None = None


@strawberry.input
class CreateCommentInput:
    """Input for commenting on a post."""

    text: str
    author_id: strawberry.ID
    post_id: strawberry.ID


@strawberry.input
class UpdateCommentInput:
    text: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: CreateUserInput) -> User:
        """Register a new user."""
        from ..resolvers.user import create_user

        return await create_user(info.context, input)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateUserInput
    ) -> User | None:
        """Update a user. Returns the user as it was before the update."""
        from ..resolvers.user import update_user

        return await update_user(info.context, id, input)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info.context, id)

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, input: CreatePostInput) -> Post:
        """Create a new post."""
        from ..resolvers.post import create_post

        return await create_post(info.context, input)

    @strawberry.mutation(name="updatePost")
    async def update_post(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdatePostInput
    ) -> Post | None:
        """Update a post. Returns the post as it was before the update."""
        from ..resolvers.post import update_post

        return await update_post(info.context, id, input)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a post."""
        from ..resolvers.post import delete_post

        return await delete_post(info.context, id)

    @strawberry.mutation(name="addLikeToPost")
    async def add_like_to_post(
        self, info: strawberry.Info, post_id: strawberry.ID, user_id: strawberry.ID
    ) -> Post | None:
        """Like a post on behalf of a user."""
        from ..resolvers.post import add_like_to_post

        return await add_like_to_post(info.context, post_id, user_id)

    @strawberry.mutation(name="removeLikeFromPost")
    async def remove_like_from_post(
        self, info: strawberry.Info, post_id: strawberry.ID, user_id: strawberry.ID
    ) -> Post | None:
        """Withdraw a user's like from a post."""
        from ..resolvers.post import remove_like_from_post

        return await remove_like_from_post(info.context, post_id, user_id)

    # Comment mutations
    @strawberry.mutation(name="createComment")
    async def create_comment(self, info: strawberry.Info, input: CreateCommentInput) -> Comment:
        """Comment on a post."""
        from ..resolvers.comment import create_comment

        return await create_comment(info.context, input)

    @strawberry.mutation(name="updateComment")
    async def update_comment(
        self, info: strawberry.Info, id: strawberry.ID, input: UpdateCommentInput
    ) -> Comment | None:
        """Update a comment. Returns the comment as it was before the update."""
        from ..resolvers.comment import update_comment

        return await update_comment(info.context, id, input)

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a comment and detach it from its post."""
        from ..resolvers.comment import delete_comment

        return await delete_comment(info.context, id)
