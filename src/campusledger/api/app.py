"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from campusledger.api.routes import health, imports
from campusledger.core.config import AppSettings
from campusledger.core.exceptions import ImportFailed, NoRowsAccepted, StorageError
from campusledger.core.logging import configure_logging
from campusledger.persistence import create_file_store
from campusledger.services.import_service import ImportService


async def _import_failed(request: Request, exc: ImportFailed) -> JSONResponse:
    rejections = exc.rejections if isinstance(exc, NoRowsAccepted) else []
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "message": str(exc), "rejections": rejections},
    )


async def _storage_error(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": type(exc).__name__, "message": str(exc), "rejections": []},
    )


def create_app(service: ImportService | None = None, settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``service`` overrides the S3-backed ImportService built at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings)
        app.state.settings = app_settings
        app.state.import_service = service or ImportService(
            settings=app_settings, file_store=create_file_store(app_settings),
        )
        yield

    app = FastAPI(
        title="CampusLedger Bulk Import",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(ImportFailed, _import_failed)
    app.add_exception_handler(StorageError, _storage_error)
    app.include_router(health.router)
    app.include_router(imports.router, prefix="/imports")
    return app
