"""
FastAPI entrypoint for the eCourts lookup service.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ecourts import __version__
from ecourts.api import router
from ecourts.config import Settings, get_settings
from ecourts.db.store import RecordStore, create_store
from ecourts.errors import InvalidRequest, StorageError
from ecourts.lookup import LookupService

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def malformed_body_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s %s: malformed request body", request.method, request.url.path)
        return JSONResponse(status_code=400, content={"error": "Malformed request body"})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Database error"})


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    store = store or create_store(settings)
    lookup = LookupService(store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            store.open()
            yield
        finally:
            store.close()

    app = FastAPI(title="eCourts", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    register_error_handlers(app)

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.debug("Static directory %s not found; /static is not served", settings.static_dir)

    app.state.settings = settings
    app.state.store = store
    app.state.lookup = lookup
    return app


app = create_app()
