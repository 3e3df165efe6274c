"""
Dataclasses mirroring database tables.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

CASE_STATUSES = ("Pending", "Disposed", "Under Consideration", "Next Hearing Scheduled")


@dataclass(slots=True)
class CaseRecord:
    case_type: str
    case_number: int
    year: int
    court: str
    parties: str
    filing_date: date
    next_hearing_date: date
    status: str
    judgment_path: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def key(self) -> tuple[str, int, int, str]:
        return (self.case_type, self.case_number, self.year, self.court)

    def snapshot(self) -> dict:
        """Generated content as stored in the raw_response column."""
        return {
            "case_type": self.case_type,
            "case_number": self.case_number,
            "year": self.year,
            "court": self.court,
            "parties": self.parties,
            "filing_date": self.filing_date.isoformat(),
            "next_hearing_date": self.next_hearing_date.isoformat(),
            "status": self.status,
            "judgment_path": self.judgment_path,
        }

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            **self.snapshot(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(slots=True)
class CauseListEntry:
    case_number: str
    case_type: str
    parties: str
    judge: str
    court_hall: str
    hearing_time: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CauseListEntry":
        return cls(
            case_number=data["case_number"],
            case_type=data["case_type"],
            parties=data["parties"],
            judge=data["judge"],
            court_hall=data["court_hall"],
            hearing_time=data["hearing_time"],
        )


@dataclass(slots=True)
class CauseListRecord:
    court: str
    date: date
    cases: list[CauseListEntry]
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def snapshot(self) -> dict:
        return {
            "court": self.court,
            "date": self.date.isoformat(),
            "cases": [entry.to_dict() for entry in self.cases],
        }
