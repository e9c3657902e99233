"""ImportService: the entry point screens and jobs call to import a roster file.

It parses and validates only. Existence checks and writes stay with the
persistence layer that consumes ``ImportSummary.records``.
"""

from __future__ import annotations

import io
import logging
from pathlib import PurePosixPath

from campusledger.core.config import AppSettings
from campusledger.core.protocols import IFileStore
from campusledger.importing.pipeline import parse_import
from campusledger.models.results import EntityKind, ImportSummary, ParseResult

logger = logging.getLogger(__name__)


class ImportService:
    """Runs the import pipeline for uploaded or staged files.

    Settings and the staging file store are injected at construction time.
    """

    def __init__(self, *, settings: AppSettings, file_store: IFileStore) -> None:
        self._settings = settings
        self._files = file_store

    def import_bytes(self, data: bytes, kind: EntityKind | str, filename: str = "") -> ImportSummary:
        """Import an uploaded file held in memory."""
        result = parse_import(
            io.BytesIO(data), kind, filename or None, self._settings.imports,
        )
        return self._summarize(result, filename)

    def import_staged(self, path: str, kind: EntityKind | str) -> ImportSummary:
        """Import a file previously staged in the file store."""
        data = self._files.read(path)
        return self.import_bytes(data, kind, PurePosixPath(path).name)

    def _summarize(self, result: ParseResult, filename: str) -> ImportSummary:
        limit = self._settings.imports.max_reported_rejections
        logger.info(
            "Imported %s: %d accepted, %d rejected",
            filename or "<upload>", result.accepted_count, result.rejected_count,
        )
        return ImportSummary(
            kind=result.kind,
            filename=filename,
            file_format=result.file_format,
            accepted_count=result.accepted_count,
            rejected_count=result.rejected_count,
            rejections=result.rejections[:limit],
            records=result.records,
        )
