"""
Main GraphQL schema definition using Strawberry
"""

from collections.abc import Iterator

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import SchemaExtension
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..config import settings
from ..database import get_database
from ..errors import DomainError, SocialNetError
from ..logging import get_logger
from .context import GraphQLContext
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class ErrorCodeExtension(SchemaExtension):
    """Attach ``extensions.code`` to errors raised as SocialNetError."""

    def on_operation(self) -> Iterator[None]:
        yield

        result = self.execution_context.result
        if not result or not result.errors:
            return

        result.errors = [self._with_code(error) for error in result.errors]

    @staticmethod
    def _with_code(error: GraphQLError) -> GraphQLError:
        original = error.original_error
        if not isinstance(original, SocialNetError):
            return error

        return GraphQLError(
            message=original.message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            original_error=original,
            extensions={**(error.extensions or {}), **original.extensions},
        )


class SocialNetSchema(strawberry.Schema):
    """Schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation = execution_context.operation_name if execution_context else None

        for error in errors:
            if isinstance(error.original_error, DomainError):
                logger.info(
                    "Operation rejected",
                    operation=operation,
                    path=error.path,
                    error=error.message,
                )
            else:
                logger.error(
                    "Operation failed",
                    operation=operation,
                    path=error.path,
                    error=error.message,
                    exc_info=error.original_error,
                )


# Create the GraphQL schema
schema = SocialNetSchema(
    query=Query,
    mutation=Mutation,
    extensions=[ErrorCodeExtension],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def get_context(request: Request) -> GraphQLContext:
    """Build the resolver context for one request."""
    _ = request
    return GraphQLContext.from_database(get_database())


def create_graphql_router() -> GraphQLRouter[GraphQLContext, None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
