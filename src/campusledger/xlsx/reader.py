"""XLSX reader: container -> shared strings -> worksheet grid."""

from __future__ import annotations

import logging
import zipfile
import zlib
from typing import BinaryIO

from campusledger.core.config import ImportSettings
from campusledger.core.exceptions import MalformedContainer
from campusledger.core.types import Grid
from campusledger.xlsx.container import ContainerReader
from campusledger.xlsx.shared_strings import decode_shared_strings
from campusledger.xlsx.worksheet import decode_worksheet

logger = logging.getLogger(__name__)


def read_xlsx_grid(stream: BinaryIO, settings: ImportSettings | None = None) -> Grid:
    """Decode the first worksheet of an XLSX stream into a row grid.

    The shared-string entry is optional. A missing worksheet entry yields an
    empty grid; deciding whether that is an error is left to the caller.
    Raises MalformedContainer for unreadable archives and SheetDecodeError
    for malformed XML parts.
    """
    if settings is None:
        settings = ImportSettings()

    wanted = (settings.shared_strings_entry, settings.worksheet_entry)
    with ContainerReader(stream, wanted=wanted) as container:
        found = container.find()
        try:
            shared_strings: list[str] = []
            entry = found.get(settings.shared_strings_entry)
            if entry is not None:
                with entry.open() as part:
                    shared_strings = decode_shared_strings(part, settings.xml_chunk_size)
            else:
                logger.debug("Workbook has no shared-string table")

            entry = found.get(settings.worksheet_entry)
            if entry is None:
                logger.warning("Workbook has no %s entry", settings.worksheet_entry)
                return []
            with entry.open() as part:
                return decode_worksheet(part, shared_strings, settings.xml_chunk_size)
        except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
            raise MalformedContainer(f"Workbook archive is corrupt: {exc}") from exc
