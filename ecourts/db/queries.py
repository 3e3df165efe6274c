"""
Database query helpers for case records and cause lists.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from psycopg import Connection
from psycopg.types.json import Jsonb

from ecourts.db.models import CaseRecord, CauseListEntry, CauseListRecord
from ecourts.errors import StorageError

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS cases (
        id BIGSERIAL PRIMARY KEY,
        case_type TEXT NOT NULL,
        case_number INTEGER NOT NULL,
        year INTEGER NOT NULL,
        court TEXT NOT NULL,
        parties TEXT,
        filing_date DATE,
        next_hearing_date DATE,
        status TEXT,
        judgment_path TEXT,
        raw_response JSONB,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
        CONSTRAINT cases_logical_key UNIQUE (case_type, case_number, year, court)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cause_lists (
        id BIGSERIAL PRIMARY KEY,
        court TEXT NOT NULL,
        date DATE NOT NULL,
        cases JSONB NOT NULL,
        raw_response JSONB,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
        CONSTRAINT cause_lists_logical_key UNIQUE (court, date)
    )
    """,
    "CREATE INDEX IF NOT EXISTS cases_created_at_idx ON cases (created_at DESC, id DESC)",
)

CASE_COLUMNS = (
    "id, case_type, case_number, year, court, parties, filing_date, "
    "next_hearing_date, status, judgment_path, created_at"
)


def ensure_schema(conn: Connection) -> None:
    """Create tables and indexes if they do not exist yet."""
    with conn.cursor() as cur:
        for statement in SCHEMA_STATEMENTS:
            cur.execute(statement)
    conn.commit()


def _case_from_row(row: Sequence) -> CaseRecord:
    return CaseRecord(
        id=row[0],
        case_type=row[1],
        case_number=row[2],
        year=row[3],
        court=row[4],
        parties=row[5],
        filing_date=row[6],
        next_hearing_date=row[7],
        status=row[8],
        judgment_path=row[9],
        created_at=row[10],
    )


def fetch_case(
    conn: Connection,
    *,
    case_type: str,
    case_number: int,
    year: int,
    court: str,
) -> Optional[CaseRecord]:
    """Fetch the case stored under a logical key."""
    with conn.cursor() as cur:
        cur.execute(
            f"""
            SELECT {CASE_COLUMNS}
            FROM cases
            WHERE case_type = %s AND case_number = %s AND year = %s AND court = %s
            ORDER BY id ASC
            LIMIT 1
            """,
            (case_type, case_number, year, court),
        )
        row = cur.fetchone()
    if row is None:
        return None
    return _case_from_row(row)


def insert_case(conn: Connection, record: CaseRecord) -> CaseRecord:
    """
    Insert a generated case and return the stored row.

    When another writer already stored the same logical key, the existing row
    wins and is returned instead of the generated one.
    """
    with conn.cursor() as cur:
        cur.execute(
            f"""
            INSERT INTO cases (
                case_type, case_number, year, court, parties, filing_date,
                next_hearing_date, status, judgment_path, raw_response
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (case_type, case_number, year, court) DO NOTHING
            RETURNING {CASE_COLUMNS}
            """,
            (
                record.case_type,
                record.case_number,
                record.year,
                record.court,
                record.parties,
                record.filing_date,
                record.next_hearing_date,
                record.status,
                record.judgment_path,
                Jsonb(record.snapshot()),
            ),
        )
        row = cur.fetchone()
    conn.commit()
    if row is not None:
        return _case_from_row(row)

    existing = fetch_case(
        conn,
        case_type=record.case_type,
        case_number=record.case_number,
        year=record.year,
        court=record.court,
    )
    conn.commit()
    if existing is None:
        raise StorageError(f"Case {record.key} conflicted but could not be read back")
    return existing


def fetch_recent_cases(conn: Connection, limit: int = 50) -> list[CaseRecord]:
    """Return the newest cases, most recently created first."""
    with conn.cursor() as cur:
        cur.execute(
            f"""
            SELECT {CASE_COLUMNS}
            FROM cases
            ORDER BY created_at DESC, id DESC
            LIMIT %s
            """,
            (limit,),
        )
        rows = cur.fetchall()
    return [_case_from_row(row) for row in rows]


def fetch_cause_list(conn: Connection, *, court: str, hearing_date: date) -> Optional[list[CauseListEntry]]:
    """Fetch the stored entries for a court and date."""
    with conn.cursor() as cur:
        cur.execute(
            """
            SELECT cases
            FROM cause_lists
            WHERE court = %s AND date = %s
            ORDER BY id ASC
            LIMIT 1
            """,
            (court, hearing_date),
        )
        row = cur.fetchone()
    if row is None:
        return None
    return [CauseListEntry.from_dict(item) for item in row[0]]


def insert_cause_list(
    conn: Connection,
    *,
    court: str,
    hearing_date: date,
    entries: Sequence[CauseListEntry],
) -> list[CauseListEntry]:
    """Persist a cause list with its snapshot and return the stored entries."""
    snapshot = CauseListRecord(court=court, date=hearing_date, cases=list(entries)).snapshot()
    with conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO cause_lists (court, date, cases, raw_response)
            VALUES (%s, %s, %s, %s)
            ON CONFLICT (court, date) DO NOTHING
            RETURNING cases
            """,
            (court, hearing_date, Jsonb(snapshot["cases"]), Jsonb(snapshot)),
        )
        row = cur.fetchone()
    conn.commit()
    if row is not None:
        return [CauseListEntry.from_dict(item) for item in row[0]]

    existing = fetch_cause_list(conn, court=court, hearing_date=hearing_date)
    conn.commit()
    if existing is None:
        raise StorageError(f"Cause list for {court} on {hearing_date} conflicted but could not be read back")
    return existing


def count_rows(conn: Connection, table: str) -> int:
    """Count rows in one of the service tables."""
    if table not in ("cases", "cause_lists"):
        raise ValueError(f"Unknown table: {table}")
    with conn.cursor() as cur:
        cur.execute(f"SELECT COUNT(*) FROM {table}")
        return int(cur.fetchone()[0])


def delete_all(conn: Connection) -> None:
    """Remove all cases and cause lists."""
    with conn.cursor() as cur:
        cur.execute("TRUNCATE cases RESTART IDENTITY;")
        cur.execute("TRUNCATE cause_lists RESTART IDENTITY;")
    conn.commit()
