"""Record persistence."""

from .base import RecordData, RecordStore
from .sql import SqlRecordStore

__all__ = ["RecordData", "RecordStore", "SqlRecordStore"]
