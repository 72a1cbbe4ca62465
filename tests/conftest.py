"""
Shared pytest fixtures and configuration for all tests.
"""

import logging
import os
import sys
from collections.abc import Generator
from typing import Any

import pytest
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient

from socialnet.config import settings
from socialnet.database import init_database, reset_database
from socialnet.graphql.context import GraphQLContext


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """An in-memory Motor-compatible client."""
    return AsyncMongoMockClient()


@pytest.fixture
def database(mongo_client: AsyncMongoMockClient) -> Any:
    return mongo_client[settings.database_name]


@pytest.fixture
def ctx(database: Any) -> GraphQLContext:
    """Resolver context bound to the in-memory database."""
    return GraphQLContext.from_database(database)


@pytest.fixture
def shared_database(mongo_client: AsyncMongoMockClient) -> Generator[None, None, None]:
    """Install the in-memory client as the process-wide database client."""
    reset_database()
    init_database(client=mongo_client, force_reinit=True)
    yield
    reset_database()


@pytest.fixture(autouse=True)
def restore_log_stream() -> Generator[None, None, None]:
    """Point the root log handler back at stdout once capture streams are closed."""
    yield
    logging.basicConfig(level=logging.INFO, stream=sys.__stdout__, format="%(message)s", force=True)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


class Seeder:
    """Puts documents straight into the store, bypassing the resolvers."""

    def __init__(self, ctx: GraphQLContext):
        self.ctx = ctx

    async def user(self, name: str = "Ana", email: str = "ana@x.com", **extra: Any) -> ObjectId:
        document = {
            "name": name,
            "email": email,
            "password": "not-a-real-hash",
            "posts": [],
            "comments": [],
            "likedPosts": [],
            **extra,
        }
        result = await self.ctx.users.insert_one(document)
        return result.inserted_id

    async def post(self, author_id: ObjectId, content: str = "hi", **extra: Any) -> ObjectId:
        document = {"content": content, "author": author_id, "comments": [], "likes": [], **extra}
        result = await self.ctx.posts.insert_one(document)
        return result.inserted_id

    async def comment(
        self, author_id: ObjectId, post_id: ObjectId, text: str = "nice"
    ) -> ObjectId:
        result = await self.ctx.comments.insert_one(
            {"text": text, "author": author_id, "post": post_id}
        )
        await self.ctx.posts.update_one(
            {"_id": post_id}, {"$push": {"comments": result.inserted_id}}
        )
        return result.inserted_id


@pytest.fixture
def seed(ctx: GraphQLContext) -> Seeder:
    return Seeder(ctx)
