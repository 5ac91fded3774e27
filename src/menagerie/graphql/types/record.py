"""
Record GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...store.base import RecordData


@strawberry.type
class Record:
    """Record type for GraphQL API."""

    id: strawberry.ID
    name: str
    category: str
    accessory: str | None

    @classmethod
    def from_data(cls, data: RecordData) -> Record:
        return cls(
            id=strawberry.ID(str(data.id)),
            name=data.name,
            category=data.category,
            accessory=data.accessory,
        )
