from __future__ import annotations

from typing import TYPE_CHECKING, cast

import strawberry

from ...auth.gate import authorize_destructive
from ...logging import get_logger
from ...validation import validate_create
from ..access_control import get_auth_context_from_info, get_store_from_info, parse_record_id

if TYPE_CHECKING:
    from ..types.record import Record

logger = get_logger(__name__)


# Query resolvers
async def resolve_records(info: strawberry.Info) -> list[Record]:
    """Resolve every record in store order."""
    from ..types.record import Record

    store = get_store_from_info(info)
    return [Record.from_data(data) for data in await store.get_all()]


async def resolve_record_by_id(info: strawberry.Info, id: strawberry.ID) -> Record | None:
    """Resolve a record by its ID; an unknown ID resolves to null."""
    from ..types.record import Record

    store = get_store_from_info(info)
    data = await store.get_by_id(parse_record_id(id))
    if data is None:
        logger.info("Record not found", record_id=id)
        return None
    return Record.from_data(data)


# Mutation resolvers
async def create_record(
    info: strawberry.Info, name: str, category: str, accessory: str | None
) -> Record:
    """Validate and create a new record."""
    from ..types.record import Record

    validate_create(name, category, accessory)

    store = get_store_from_info(info)
    data = await store.create(name, category, cast(str, accessory))
    return Record.from_data(data)


async def update_record(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    category: str | None = None,
    accessory: str | None = None,
) -> Record:
    """Apply a partial update to an existing record."""
    from ..types.record import Record

    store = get_store_from_info(info)
    data = await store.update(parse_record_id(id), name, category, accessory)
    return Record.from_data(data)


async def delete_record(info: strawberry.Info, id: strawberry.ID) -> Record | None:
    """
    Delete a record.

    Only a session whose credential equals the admin identity may delete.
    The store is not touched when authorization fails.
    """
    from ..types.record import Record

    auth_context = get_auth_context_from_info(info)
    authorize_destructive(auth_context.credential, auth_context.admin_identity)
    record_id = parse_record_id(id)
    logger.info("Delete authorized", record_id=record_id, identity=auth_context.credential)

    store = get_store_from_info(info)
    data = await store.delete(record_id)
    if data is None:
        logger.info("Nothing to delete", record_id=record_id)
        return None
    return Record.from_data(data)
