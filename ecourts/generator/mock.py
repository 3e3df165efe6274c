"""
Synthetic case and cause-list generators.

Records produced here are placeholders; nothing is fetched from a real court
service.
"""

from __future__ import annotations

import hashlib
import random
from datetime import date, timedelta
from typing import Optional

from ecourts.db.models import CASE_STATUSES, CaseRecord, CauseListEntry

CASE_PARTIES = (
    "Ram Kumar vs. State of Delhi",
    "ABC Company Ltd. vs. XYZ Corporation",
    "Priya Sharma vs. Municipal Corporation",
    "Union of India vs. Private Ltd.",
    "Citizen Welfare Association vs. State Government",
)

CAUSE_LIST_CASE_TYPES = ("CRL", "CIV", "WP", "MAT", "SA")

CAUSE_LIST_PARTIES = (
    "Ram Kumar vs. State",
    "ABC Ltd. vs. XYZ Corp",
    "Citizens Union vs. Municipal Corp",
    "State vs. John Doe",
    "Private Ltd. vs. Government",
)

JUDGES = (
    "Hon'ble Justice A.K. Sharma",
    "Hon'ble Justice Priya Gupta",
    "Hon'ble Justice R.K. Singh",
    "Hon'ble Justice M. Patel",
    "Hon'ble Justice S. Kumar",
)

HEARING_TIMES = ("10:30 AM", "11:00 AM", "11:30 AM", "02:00 PM", "02:30 PM")

# Hearings are always scheduled in the second half of 2024, whatever the case year.
HEARING_WINDOW = (date(2024, 7, 1), date(2024, 12, 31))

MIN_CAUSE_LIST_ENTRIES = 5
MAX_CAUSE_LIST_ENTRIES = 20
COURT_HALLS = 10
MAX_CAUSE_LIST_CASE_NUMBER = 999


def rng_for_key(*parts: object) -> random.Random:
    """Deterministic random stream derived from a logical key."""
    material = "\x1f".join(str(part) for part in parts)
    digest = hashlib.sha256(material.encode("utf-8")).digest()
    return random.Random(digest)


def _random_day(rng: random.Random, start: date, end: date) -> date:
    return start + timedelta(days=rng.randint(0, (end - start).days))


def judgment_path_for(case_number: int, year: int) -> str:
    return f"/static/judgments/case_{case_number}_{year}.pdf"


def generate_case(
    case_type: str,
    case_number: int,
    year: int,
    court: str,
    rng: Optional[random.Random] = None,
) -> CaseRecord:
    """Build an unsaved case record for the given key."""
    rng = rng or random.Random()
    filing_date = _random_day(rng, date(year, 1, 1), date(year, 12, 31))
    next_hearing_date = _random_day(rng, *HEARING_WINDOW)
    judgment_path = judgment_path_for(case_number, year) if rng.random() < 0.5 else None
    return CaseRecord(
        case_type=case_type,
        case_number=case_number,
        year=year,
        court=court,
        parties=rng.choice(CASE_PARTIES),
        filing_date=filing_date,
        next_hearing_date=next_hearing_date,
        status=rng.choice(CASE_STATUSES),
        judgment_path=judgment_path,
    )


def generate_cause_list(
    court: str,
    hearing_date: date,
    rng: Optional[random.Random] = None,
) -> list[CauseListEntry]:
    """Build the hearings listed at a court on one date."""
    rng = rng or random.Random()
    count = rng.randint(MIN_CAUSE_LIST_ENTRIES, MAX_CAUSE_LIST_ENTRIES)
    return [
        CauseListEntry(
            case_number=f"{rng.randint(1, MAX_CAUSE_LIST_CASE_NUMBER)}/{hearing_date.year}",
            case_type=rng.choice(CAUSE_LIST_CASE_TYPES),
            parties=rng.choice(CAUSE_LIST_PARTIES),
            judge=rng.choice(JUDGES),
            court_hall=f"Court No. {rng.randint(1, COURT_HALLS)}",
            hearing_time=rng.choice(HEARING_TIMES),
        )
        for _ in range(count)
    ]
