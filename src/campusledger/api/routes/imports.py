"""Bulk import endpoints for students, teachers and grades."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from campusledger.models.results import EntityKind
from campusledger.services.import_service import ImportService

router = APIRouter(tags=["imports"])


class StagedImportRequest(BaseModel):
    path: str


def get_import_service(request: Request) -> ImportService:
    return request.app.state.import_service


@router.post("/{kind}")
async def import_upload(
    kind: EntityKind,
    request: Request,
    filename: str = "",
    service: ImportService = Depends(get_import_service),
) -> dict:
    """Import the raw request body as a CSV or XLSX file."""
    data = await request.body()
    summary = await run_in_threadpool(service.import_bytes, data, kind, filename)
    return summary.model_dump(mode="json")


@router.post("/{kind}/staged")
async def import_staged(
    kind: EntityKind,
    body: StagedImportRequest,
    service: ImportService = Depends(get_import_service),
) -> dict:
    """Import a file already uploaded to the staging store."""
    summary = await run_in_threadpool(service.import_staged, body.path, kind)
    return summary.model_dump(mode="json")
