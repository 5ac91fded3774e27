"""
Seed data for database initialization.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Records
from ..logging import get_logger

logger = get_logger(__name__)

# (name, category, accessory)
DEFAULT_RECORDS: list[tuple[str, str, str]] = [
    ("Ralph", "Tiger", "Gold chain"),
    ("Evelina", "Hedgehog", "Comb"),
    ("Otto", "Otter", "Stone"),
    ("Mayo", "Dog", "Sweater"),
    ("Kaaaarl", "Llama", "Toque"),
    ("Lulu", "Dog", "Toque"),
]


async def ensure_seed_records(
    db: AsyncSession,
    records: list[tuple[str, str, str]] | None = None,
) -> int:
    """
    Insert the default records into an empty table.

    Does nothing if any record already exists, so it is safe to call on
    every startup.

    Args:
        db: Database session
        records: Rows to insert instead of ``DEFAULT_RECORDS``

    Returns:
        Number of records inserted
    """
    existing = await db.scalar(select(func.count()).select_from(Records))
    if existing:
        logger.debug("Records table already populated", count=existing)
        return 0

    rows = DEFAULT_RECORDS if records is None else records
    db.add_all(
        [
            Records(name=name, category=category, accessory=accessory)
            for name, category, accessory in rows
        ]
    )
    await db.flush()

    logger.info("Seeded default records", count=len(rows))
    return len(rows)
