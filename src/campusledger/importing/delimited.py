"""Delimited-text (CSV) reader producing the same grid shape as the XLSX path."""

from __future__ import annotations

import csv
import io
import logging
from typing import BinaryIO

from campusledger.core.exceptions import MalformedContainer
from campusledger.core.types import Grid

logger = logging.getLogger(__name__)


def read_delimited(stream: BinaryIO, encoding: str = "utf-8-sig") -> Grid:
    """Read a CSV byte stream into trimmed rows, skipping blank lines."""
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        grid: Grid = []
        for record in csv.reader(text):
            if not record or (len(record) == 1 and not record[0].strip()):
                continue
            grid.append([cell.strip() for cell in record])
    except UnicodeDecodeError as exc:
        raise MalformedContainer(f"File is not valid {encoding} text: {exc}") from exc
    except csv.Error as exc:
        raise MalformedContainer(f"Error parsing CSV format: {exc}") from exc
    finally:
        text.detach()

    logger.debug("Read %d delimited rows", len(grid))
    return grid
