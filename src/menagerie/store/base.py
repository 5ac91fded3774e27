"""Record store interface and value type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RecordData:
    """A persisted record as seen by callers of the store."""

    id: int
    name: str
    category: str
    accessory: str | None


class RecordStore(ABC):
    """Abstract base class for record persistence backends.

    Implementations own the record lifecycle: they assign ids on create and
    serialize conflicting writes.
    """

    @abstractmethod
    async def get_all(self) -> Sequence[RecordData]:
        """Return every record in insertion order."""
        pass

    @abstractmethod
    async def get_by_id(self, record_id: int) -> RecordData | None:
        """Return the record with ``record_id`` or None."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> RecordData | None:
        """Return the record called ``name``; the lowest id wins on duplicates."""
        pass

    @abstractmethod
    async def create(self, name: str, category: str, accessory: str) -> RecordData:
        """Persist a new record and return it with its assigned id."""
        pass

    @abstractmethod
    async def update(
        self,
        record_id: int,
        name: str | None = None,
        category: str | None = None,
        accessory: str | None = None,
    ) -> RecordData:
        """
        Apply a partial update. Fields passed as None are left unchanged.

        Raises:
            NotFoundError: If no record has ``record_id``
        """
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> RecordData | None:
        """Remove a record and return it, or None if it did not exist."""
        pass
