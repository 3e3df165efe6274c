"""
Lookup-or-generate orchestration for cases and cause lists.

Every query is answered from the record store when its logical key has been
seen before. Otherwise a synthetic record is generated, persisted, and the
stored row is returned, so repeat queries always get the same answer.
"""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ecourts import courts
from ecourts.config import Settings
from ecourts.db.models import CaseRecord, CauseListEntry
from ecourts.db.store import RecordStore
from ecourts.errors import InvalidRequest
from ecourts.generator import generate_case, generate_cause_list, rng_for_key

logger = logging.getLogger(__name__)


class CaseQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    case_type: str = Field(..., alias="caseType", min_length=1)
    case_number: int = Field(..., alias="caseNumber", gt=0, le=2_147_483_647)
    year: int = Field(..., ge=1, le=9999)
    court: str = Field(..., min_length=1)

    @field_validator("case_number", "year", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return value


class CauseListQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    court: str = Field(..., min_length=1)
    hearing_date: date = Field(..., alias="date")

    @field_validator("hearing_date", mode="before")
    @classmethod
    def parse_iso_date(cls, value: Any) -> Any:
        # Numbers would otherwise be read as Unix timestamps.
        if isinstance(value, date) or value in (None, ""):
            return value
        if not isinstance(value, str):
            raise ValueError("expected an ISO date string")
        return date.fromisoformat(value)


def _is_missing(error: dict) -> bool:
    if error["type"] == "missing":
        return True
    # None and "" are treated as absent, like an omitted field.
    return error.get("input") in (None, "")


def _to_invalid_request(exc: ValidationError, missing_message: str) -> InvalidRequest:
    errors = exc.errors()
    if any(_is_missing(error) for error in errors):
        return InvalidRequest(missing_message)
    fields = sorted({str(error["loc"][0]) for error in errors if error["loc"]})
    if not fields:
        return InvalidRequest(missing_message)
    return InvalidRequest(f"Invalid value for {', '.join(fields)}")


class LookupService:
    """Answers case and cause-list queries from the store, generating on a miss."""

    def __init__(self, store: RecordStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def parse_case_query(self, payload: Any) -> CaseQuery:
        try:
            query = CaseQuery.model_validate(payload)
        except ValidationError as exc:
            raise _to_invalid_request(exc, "Missing required fields") from exc
        self._check_court(query.court)
        return query

    def parse_cause_list_query(self, payload: Any) -> CauseListQuery:
        try:
            query = CauseListQuery.model_validate(payload)
        except ValidationError as exc:
            raise _to_invalid_request(exc, "Missing court or date") from exc
        self._check_court(query.court)
        return query

    def _check_court(self, court: str) -> None:
        if self.settings.strict_courts and not courts.is_known_court(court):
            raise InvalidRequest(f"Unknown court: {court}")

    def search_case(self, payload: Any) -> CaseRecord:
        query = self.parse_case_query(payload)
        key = (query.case_type, query.case_number, query.year, query.court)

        existing = self.store.find_case(*key)
        if existing is not None:
            logger.debug("Case %s served from store (id=%s)", key, existing.id)
            return existing

        logger.info("Case %s not stored yet; generating", key)
        generated = generate_case(*key, rng=self._rng(*key))
        stored = self.store.insert_case(generated)
        logger.info("Stored case %s as id=%s", key, stored.id)
        return stored

    def fetch_cause_list(self, payload: Any) -> list[CauseListEntry]:
        query = self.parse_cause_list_query(payload)

        existing = self.store.find_cause_list(query.court, query.hearing_date)
        if existing is not None:
            logger.debug("Cause list for %s on %s served from store", query.court, query.hearing_date)
            return existing

        logger.info("Cause list for %s on %s not stored yet; generating", query.court, query.hearing_date)
        entries = generate_cause_list(
            query.court,
            query.hearing_date,
            rng=self._rng(query.court, query.hearing_date.isoformat()),
        )
        stored = self.store.insert_cause_list(query.court, query.hearing_date, entries)
        logger.info("Stored cause list for %s on %s with %d entries", query.court, query.hearing_date, len(stored))
        return stored

    def list_recent_cases(self) -> list[CaseRecord]:
        return self.store.list_recent_cases(limit=self.settings.recent_cases_limit)

    def list_courts(self) -> dict[str, list[str]]:
        return courts.list_courts()

    def _rng(self, *key: object) -> Optional[random.Random]:
        if not self.settings.seed_by_key:
            return None
        return rng_for_key(*key)
