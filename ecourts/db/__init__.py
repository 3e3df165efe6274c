"""
Persistence layer for case records and cause lists.
"""

from .models import CASE_STATUSES, CaseRecord, CauseListEntry, CauseListRecord
from .store import InMemoryRecordStore, PostgresRecordStore, RecordStore, create_store

__all__ = [
    "CASE_STATUSES",
    "CaseRecord",
    "CauseListEntry",
    "CauseListRecord",
    "InMemoryRecordStore",
    "PostgresRecordStore",
    "RecordStore",
    "create_store",
]
