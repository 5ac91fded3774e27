"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.record import Record


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createRecord")
    async def create_record(
        self,
        info: strawberry.Info,
        name: str,
        category: str,
        accessory: str | None = None,
    ) -> Record:
        """Create a new record."""
        from ..resolvers.record import create_record

        return await create_record(info, name, category, accessory)

    @strawberry.mutation(name="updateRecord")
    async def update_record(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        category: str | None = None,
        accessory: str | None = None,
    ) -> Record:
        """Update an existing record; omitted fields are left unchanged."""
        from ..resolvers.record import update_record

        return await update_record(info, id, name, category, accessory)

    @strawberry.mutation(name="deleteRecord")
    async def delete_record(self, info: strawberry.Info, id: strawberry.ID) -> Record | None:
        """Delete a record (admin session required)."""
        from ..resolvers.record import delete_record

        return await delete_record(info, id)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, username: str, password: str) -> Record | None:
        """Log in and receive a session cookie."""
        from ..resolvers.auth import login

        return await login(info, username, password)
