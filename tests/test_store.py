from contextlib import contextmanager
from datetime import date

import psycopg
import pytest
from fastapi.testclient import TestClient

from ecourts.config import Settings
from ecourts.db import queries
from ecourts.db.models import CauseListEntry, CauseListRecord
from ecourts.db.store import InMemoryRecordStore, PostgresRecordStore
from ecourts.errors import StorageError
from ecourts.main import create_app

ENTRY = CauseListEntry(
    case_number="12/2024",
    case_type="WP",
    parties="State vs. John Doe",
    judge="Hon'ble Justice M. Patel",
    court_hall="Court No. 3",
    hearing_time="11:00 AM",
)


class RecordingCursor:
    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))

    def fetchone(self):
        return self.conn.rows.pop(0)


class RecordingConnection:
    """Captures statements; fetchone() hands back the queued rows in order."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.executed = []
        self.commits = 0

    def cursor(self):
        return RecordingCursor(self)

    def commit(self):
        self.commits += 1


class SchemaFailingPool:
    min_size = 1
    max_size = 1

    def __init__(self):
        self.opened = False
        self.closed = False

    def open(self, wait=False):
        self.opened = True

    @contextmanager
    def connection(self):
        raise psycopg.OperationalError("permission denied for schema public")
        yield

    def close(self):
        self.closed = True


def test_cause_list_snapshot():
    record = CauseListRecord(court="Bombay High Court", date=date(2024, 8, 15), cases=[ENTRY])

    assert record.snapshot() == {
        "court": "Bombay High Court",
        "date": "2024-08-15",
        "cases": [ENTRY.to_dict()],
    }


def test_insert_cause_list_stores_entries_and_snapshot():
    conn = RecordingConnection(rows=[([ENTRY.to_dict()],)])

    stored = queries.insert_cause_list(conn, court="Bombay High Court", hearing_date=date(2024, 8, 15), entries=[ENTRY])

    assert stored == [ENTRY]
    _, params = conn.executed[0]
    assert params[0] == "Bombay High Court"
    assert params[1] == date(2024, 8, 15)
    assert params[2].obj == [ENTRY.to_dict()]
    assert params[3].obj == {"court": "Bombay High Court", "date": "2024-08-15", "cases": [ENTRY.to_dict()]}


def test_insert_cause_list_conflict_returns_stored_entries():
    winner = CauseListEntry.from_dict({**ENTRY.to_dict(), "case_number": "99/2024"})
    conn = RecordingConnection(rows=[None, ([winner.to_dict()],)])

    stored = queries.insert_cause_list(conn, court="Bombay High Court", hearing_date=date(2024, 8, 15), entries=[ENTRY])

    assert stored == [winner]
    assert len(conn.executed) == 2


def test_failed_schema_setup_closes_pool():
    store = PostgresRecordStore(Settings(database_url="postgresql://localhost:1/ecourts"))
    pool = SchemaFailingPool()
    store.pool = pool

    with pytest.raises(StorageError):
        store.open()

    assert pool.opened
    assert pool.closed


class UnopenableStore(InMemoryRecordStore):
    def __init__(self):
        super().__init__()
        self.closed = False

    def open(self):
        raise StorageError("database unreachable")

    def close(self):
        self.closed = True


def test_app_startup_failure_still_closes_store(settings):
    store = UnopenableStore()
    app = create_app(settings=settings, store=store)

    with pytest.raises(StorageError):
        with TestClient(app):
            pass

    assert store.closed
