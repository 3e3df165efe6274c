from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ecourts.config import Settings
from ecourts.db.store import InMemoryRecordStore
from ecourts.errors import StorageError
from ecourts.lookup import LookupService
from ecourts.main import create_app


class BrokenStore(InMemoryRecordStore):
    """Store whose every read and write fails."""

    def find_case(self, case_type, case_number, year, court):
        raise StorageError("connection refused")

    def insert_case(self, record):
        raise StorageError("connection refused")

    def list_recent_cases(self, limit=50):
        raise StorageError("connection refused")

    def find_cause_list(self, court, hearing_date):
        raise StorageError("connection refused")

    def insert_cause_list(self, court, hearing_date, entries):
        raise StorageError("connection refused")


class FailingInsertStore(InMemoryRecordStore):
    """Lookups succeed, inserts fail."""

    def insert_case(self, record):
        raise StorageError("disk full")

    def insert_cause_list(self, court, hearing_date, entries):
        raise StorageError("disk full")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url="memory://", static_dir=tmp_path / "static", log_level="DEBUG")


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def lookup(store, settings) -> LookupService:
    return LookupService(store, settings)


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
