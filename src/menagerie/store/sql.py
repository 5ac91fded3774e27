"""SQLAlchemy-backed record store."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from ..database.connection import get_async_session
from ..dbmodels import MAX_RECORD_ID, MIN_RECORD_ID, Records
from ..errors import NotFoundError
from ..logging import get_logger
from .base import RecordData, RecordStore

logger = get_logger(__name__)


def _to_data(row: Records) -> RecordData:
    return RecordData(id=row.id, name=row.name, category=row.category, accessory=row.accessory)


def _storable(record_id: int) -> bool:
    """Ids outside the column range cannot exist; the drivers reject them outright."""
    return MIN_RECORD_ID <= record_id <= MAX_RECORD_ID


class SqlRecordStore(RecordStore):
    """Record store using the shared async session pool."""

    async def get_all(self) -> Sequence[RecordData]:
        async with get_async_session() as session:
            result = await session.execute(select(Records).order_by(Records.id))
            return [_to_data(row) for row in result.scalars().all()]

    async def get_by_id(self, record_id: int) -> RecordData | None:
        if not _storable(record_id):
            return None
        async with get_async_session() as session:
            row = await session.get(Records, record_id)
            return _to_data(row) if row else None

    async def get_by_name(self, name: str) -> RecordData | None:
        async with get_async_session() as session:
            stmt = select(Records).where(Records.name == name).order_by(Records.id).limit(1)
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return _to_data(row) if row else None

    async def create(self, name: str, category: str, accessory: str) -> RecordData:
        async with get_async_session() as session:
            row = Records(name=name, category=category, accessory=accessory)
            session.add(row)
            await session.flush()
            await session.refresh(row)

            logger.info("Record created", record_id=row.id, name=name)
            return _to_data(row)

    async def update(
        self,
        record_id: int,
        name: str | None = None,
        category: str | None = None,
        accessory: str | None = None,
    ) -> RecordData:
        if not _storable(record_id):
            raise NotFoundError(record_id)

        async with get_async_session() as session:
            row = await session.get(Records, record_id)
            if not row:
                raise NotFoundError(record_id)

            if name is not None:
                row.name = name
            if category is not None:
                row.category = category
            if accessory is not None:
                row.accessory = accessory

            await session.flush()
            logger.info("Record updated", record_id=record_id)
            return _to_data(row)

    async def delete(self, record_id: int) -> RecordData | None:
        if not _storable(record_id):
            return None

        async with get_async_session() as session:
            row = await session.get(Records, record_id)
            if not row:
                logger.info("Record not found for deletion", record_id=record_id)
                return None

            deleted = _to_data(row)
            await session.delete(row)

            logger.info("Record deleted", record_id=record_id)
            return deleted
