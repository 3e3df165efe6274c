"""
FastAPI routes for court directory, case search, cause lists and the dashboard feed.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.concurrency import run_in_threadpool

router = APIRouter(prefix="/api")


def get_app_state(request: Request):
    return request.app.state


@router.get("/courts")
async def get_courts(state=Depends(get_app_state)):
    return state.lookup.list_courts()


@router.post("/search-case")
async def search_case(payload: Any = Body(None), state=Depends(get_app_state)):
    record = await run_in_threadpool(state.lookup.search_case, payload)
    return record.to_dict()


@router.post("/cause-list")
async def fetch_cause_list(payload: Any = Body(None), state=Depends(get_app_state)):
    entries = await run_in_threadpool(state.lookup.fetch_cause_list, payload)
    return [entry.to_dict() for entry in entries]


@router.get("/cases")
async def list_cases(state=Depends(get_app_state)):
    records = await run_in_threadpool(state.lookup.list_recent_cases)
    return [record.to_dict() for record in records]
