"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request, Response
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.context import RequestAuthContext
from ..auth.session import read_credential
from ..config import settings
from ..logging import bind_session, get_logger
from ..store.base import RecordStore
from ..store.sql import SqlRecordStore
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
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

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def resolve_admin_identity(store: RecordStore, admin_name: str | None = None) -> str | None:
    """Look up the admin record and return its name, or None if it does not exist."""
    name = admin_name or settings.admin_record_name
    admin = await store.get_by_name(name)
    if admin is None:
        logger.warning("Admin record not found", admin_record_name=name)
        return None
    return admin.name


async def build_context(
    request: Request,
    response: Response,
    store: RecordStore,
) -> dict[str, Any]:
    """Assemble the per-request GraphQL context."""
    auth = RequestAuthContext(
        credential=read_credential(request.cookies),
        admin_identity=await resolve_admin_identity(store),
    )
    bind_session(auth.credential, auth.admin_identity)
    return {
        "request": request,
        "response": response,
        "store": store,
        "auth": auth,
    }


def create_graphql_router(store: RecordStore | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    record_store = store or SqlRecordStore()

    async def get_context(request: Request, response: Response) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return await build_context(request, response, record_store)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.graphiql,
        context_getter=get_context,
    )
