"""
Record store implementations.

The store owns every persisted row. It is constructed once at process start,
opened and closed by the application lifespan, and handed to the lookup
service explicitly.
"""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import date, datetime, timezone
from typing import Optional, Protocol, Sequence

import psycopg

from ecourts.config import Settings
from ecourts.db import queries
from ecourts.db.models import CaseRecord, CauseListEntry, CauseListRecord
from ecourts.db.session import create_connection_pool
from ecourts.errors import StorageError

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def open(self) -> None: ...

    def close(self) -> None: ...

    def find_case(self, case_type: str, case_number: int, year: int, court: str) -> Optional[CaseRecord]: ...

    def insert_case(self, record: CaseRecord) -> CaseRecord: ...

    def list_recent_cases(self, limit: int = 50) -> list[CaseRecord]: ...

    def find_cause_list(self, court: str, hearing_date: date) -> Optional[list[CauseListEntry]]: ...

    def insert_cause_list(
        self, court: str, hearing_date: date, entries: Sequence[CauseListEntry]
    ) -> list[CauseListEntry]: ...

    def count_cases(self) -> int: ...

    def count_cause_lists(self) -> int: ...


class PostgresRecordStore:
    """Record store backed by PostgreSQL through a psycopg connection pool."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.pool = create_connection_pool(settings)

    def open(self) -> None:
        logger.info("Opening connection pool (min=%d, max=%d)", self.pool.min_size, self.pool.max_size)
        try:
            self.pool.open(wait=True)
            with self.pool.connection() as conn:
                queries.ensure_schema(conn)
        except psycopg.Error as exc:
            self.pool.close()
            raise StorageError(f"Could not initialise database: {exc}") from exc

    def close(self) -> None:
        logger.info("Closing connection pool")
        self.pool.close()

    def find_case(self, case_type: str, case_number: int, year: int, court: str) -> Optional[CaseRecord]:
        try:
            with self.pool.connection() as conn:
                return queries.fetch_case(
                    conn, case_type=case_type, case_number=case_number, year=year, court=court
                )
        except psycopg.Error as exc:
            raise StorageError(f"Case lookup failed: {exc}") from exc

    def insert_case(self, record: CaseRecord) -> CaseRecord:
        try:
            with self.pool.connection() as conn:
                return queries.insert_case(conn, record)
        except psycopg.Error as exc:
            raise StorageError(f"Case insert failed: {exc}") from exc

    def list_recent_cases(self, limit: int = 50) -> list[CaseRecord]:
        try:
            with self.pool.connection() as conn:
                return queries.fetch_recent_cases(conn, limit=limit)
        except psycopg.Error as exc:
            raise StorageError(f"Listing cases failed: {exc}") from exc

    def find_cause_list(self, court: str, hearing_date: date) -> Optional[list[CauseListEntry]]:
        try:
            with self.pool.connection() as conn:
                return queries.fetch_cause_list(conn, court=court, hearing_date=hearing_date)
        except psycopg.Error as exc:
            raise StorageError(f"Cause list lookup failed: {exc}") from exc

    def insert_cause_list(
        self, court: str, hearing_date: date, entries: Sequence[CauseListEntry]
    ) -> list[CauseListEntry]:
        try:
            with self.pool.connection() as conn:
                return queries.insert_cause_list(conn, court=court, hearing_date=hearing_date, entries=entries)
        except psycopg.Error as exc:
            raise StorageError(f"Cause list insert failed: {exc}") from exc

    def count_cases(self) -> int:
        try:
            with self.pool.connection() as conn:
                return queries.count_rows(conn, "cases")
        except psycopg.Error as exc:
            raise StorageError(f"Counting cases failed: {exc}") from exc

    def count_cause_lists(self) -> int:
        try:
            with self.pool.connection() as conn:
                return queries.count_rows(conn, "cause_lists")
        except psycopg.Error as exc:
            raise StorageError(f"Counting cause lists failed: {exc}") from exc


class InMemoryRecordStore:
    """Process-local store; lookups and inserts share one lock so a key is stored once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cases: list[CaseRecord] = []
        self._cause_lists: list[CauseListRecord] = []
        self._case_ids = itertools.count(1)
        self._cause_list_ids = itertools.count(1)

    def open(self) -> None:
        logger.info("Using in-memory record store")

    def close(self) -> None:
        pass

    def _find_case(self, key: tuple[str, int, int, str]) -> Optional[CaseRecord]:
        for record in self._cases:
            if record.key == key:
                return record
        return None

    def _find_cause_list(self, court: str, hearing_date: date) -> Optional[CauseListRecord]:
        for record in self._cause_lists:
            if record.court == court and record.date == hearing_date:
                return record
        return None

    def find_case(self, case_type: str, case_number: int, year: int, court: str) -> Optional[CaseRecord]:
        with self._lock:
            return self._find_case((case_type, case_number, year, court))

    def insert_case(self, record: CaseRecord) -> CaseRecord:
        with self._lock:
            existing = self._find_case(record.key)
            if existing is not None:
                return existing
            stored = CaseRecord(
                case_type=record.case_type,
                case_number=record.case_number,
                year=record.year,
                court=record.court,
                parties=record.parties,
                filing_date=record.filing_date,
                next_hearing_date=record.next_hearing_date,
                status=record.status,
                judgment_path=record.judgment_path,
                id=next(self._case_ids),
                created_at=datetime.now(timezone.utc),
            )
            self._cases.append(stored)
            return stored

    def list_recent_cases(self, limit: int = 50) -> list[CaseRecord]:
        with self._lock:
            ordered = sorted(self._cases, key=lambda record: (record.created_at, record.id), reverse=True)
        return ordered[:limit]

    def find_cause_list(self, court: str, hearing_date: date) -> Optional[list[CauseListEntry]]:
        with self._lock:
            record = self._find_cause_list(court, hearing_date)
        if record is None:
            return None
        return list(record.cases)

    def insert_cause_list(
        self, court: str, hearing_date: date, entries: Sequence[CauseListEntry]
    ) -> list[CauseListEntry]:
        with self._lock:
            existing = self._find_cause_list(court, hearing_date)
            if existing is not None:
                return list(existing.cases)
            record = CauseListRecord(
                court=court,
                date=hearing_date,
                cases=list(entries),
                id=next(self._cause_list_ids),
                created_at=datetime.now(timezone.utc),
            )
            self._cause_lists.append(record)
            return list(record.cases)

    def count_cases(self) -> int:
        with self._lock:
            return len(self._cases)

    def count_cause_lists(self) -> int:
        with self._lock:
            return len(self._cause_lists)


def create_store(settings: Settings) -> RecordStore:
    """Pick the store implementation named by DATABASE_URL."""
    if settings.uses_memory_store:
        return InMemoryRecordStore()
    return PostgresRecordStore(settings)
