"""Import pipeline: pick the decoder for a file, build its grid, map the rows.

One call owns its shared-string table, grid and result; nothing is kept
between calls, so separate files can be imported from separate threads.
"""

from __future__ import annotations

import io
import logging
from pathlib import PurePosixPath
from typing import BinaryIO, Optional

from campusledger.core.config import ImportSettings
from campusledger.core.exceptions import EmptyInput, SheetDecodeError, UnsupportedFileFormat
from campusledger.core.types import Grid
from campusledger.importing.delimited import read_delimited
from campusledger.importing.mapper import map_rows
from campusledger.importing.schemas import schema_for
from campusledger.models.results import EntityKind, FileFormat, ParseResult
from campusledger.xlsx.reader import read_xlsx_grid

logger = logging.getLogger(__name__)

ZIP_MAGIC = b"PK\x03\x04"


def detect_format(filename: Optional[str], head: bytes = b"") -> FileFormat:
    """Choose a decoder from the file extension, or from the leading bytes when unnamed."""
    if filename:
        suffix = PurePosixPath(filename.replace("\\", "/")).suffix.lower()
        if suffix == ".csv":
            return FileFormat.CSV
        if suffix == ".xlsx":
            return FileFormat.XLSX
        if suffix == ".xls":
            raise UnsupportedFileFormat(
                "Only .xlsx format is supported. For .xls files, please convert to .xlsx "
                "or use CSV format."
            )
        if suffix:
            raise UnsupportedFileFormat(
                "Unsupported file format. Please use CSV (.csv) or Excel (.xlsx) files."
            )
    return FileFormat.XLSX if head.startswith(ZIP_MAGIC) else FileFormat.CSV


def read_grid(stream: BinaryIO, file_format: FileFormat, settings: ImportSettings) -> Grid:
    if file_format is FileFormat.XLSX:
        return read_xlsx_grid(stream, settings)
    return read_delimited(stream, settings.csv_encoding)


def parse_import(
    stream: BinaryIO,
    kind: EntityKind | str,
    filename: Optional[str] = None,
    settings: ImportSettings | None = None,
) -> ParseResult:
    """Parse one uploaded file into typed rows for ``kind``.

    Raises an ImportFailed subclass for file-level problems; row-level
    problems come back in ``ParseResult.rejections``.
    """
    if settings is None:
        settings = ImportSettings()
    schema = schema_for(kind)

    if not stream.seekable():
        stream = io.BytesIO(stream.read())
    start = stream.tell()
    head = stream.read(len(ZIP_MAGIC))
    stream.seek(start)

    file_format = detect_format(filename, head)
    logger.info("Importing %s from %s (%s)", schema.plural, filename or "<stream>", file_format)

    try:
        grid = read_grid(stream, file_format, settings)
    except SheetDecodeError as exc:
        logger.warning("Discarding unreadable workbook: %s", exc)
        raise EmptyInput(f"File has no readable data: {exc}") from exc

    result = map_rows(grid, schema, settings.max_reported_rejections)
    return result.model_copy(update={"file_format": file_format})


def parse_import_bytes(
    data: bytes,
    kind: EntityKind | str,
    filename: Optional[str] = None,
    settings: ImportSettings | None = None,
) -> ParseResult:
    return parse_import(io.BytesIO(data), kind, filename, settings)
