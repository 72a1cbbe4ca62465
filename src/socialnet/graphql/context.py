"""
Per-request context handed to every resolver
"""

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from strawberry.fastapi import BaseContext

from ..config import settings


class GraphQLContext(BaseContext):
    """Holds the Users, Posts and Comments collections for one operation."""

    def __init__(
        self,
        users: AsyncIOMotorCollection,
        posts: AsyncIOMotorCollection,
        comments: AsyncIOMotorCollection,
    ):
        super().__init__()
        self.users = users
        self.posts = posts
        self.comments = comments

    @classmethod
    def from_database(cls, database: AsyncIOMotorDatabase) -> "GraphQLContext":
        return cls(
            users=database[settings.users_collection],
            posts=database[settings.posts_collection],
            comments=database[settings.comments_collection],
        )
