"""
Root GraphQL query definitions
"""

import strawberry

from ..types.record import Record


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def records(self, info: strawberry.Info) -> list[Record]:
        """Get all records."""
        from ..resolvers.record import resolve_records

        return await resolve_records(info)

    @strawberry.field
    async def record(self, info: strawberry.Info, id: strawberry.ID) -> Record | None:
        """Get a record by ID."""
        from ..resolvers.record import resolve_record_by_id

        return await resolve_record_by_id(info, id)

    @strawberry.field
    async def record_by_identity(self, info: strawberry.Info, name: str) -> Record | None:
        """Get the record a session identity refers to."""
        from ..resolvers.auth import resolve_record_by_identity

        return await resolve_record_by_identity(info, name)
