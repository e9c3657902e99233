"""Worksheet Grid Decoder for ``xl/worksheets/sheet1.xml``.

Spreadsheet XML is sparse: blank cells are simply not written. The decoder
places every cell by its ``r`` address and pads the gaps with empty strings,
so ``row[i]`` is always column ``i``.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum, auto
from typing import BinaryIO, Sequence

from campusledger.core.types import Grid, Row
from campusledger.xlsx.address import column_index
from campusledger.xlsx.events import DEFAULT_CHUNK_SIZE, EventKind, iter_events

logger = logging.getLogger(__name__)

PART_NAME = "worksheet"

SHARED_STRING = "s"
BOOLEAN = "b"
NUMBER = "n"
INLINE_STRING = "inlineStr"

_BOOLEANS = {"1": "true", "0": "false"}

# Digits a double holds exactly; beyond that the stored text is kept as is.
_MAX_EXACT_DIGITS = 16


class WorksheetState(Enum):
    OUTSIDE = auto()
    IN_ROW = auto()
    IN_CELL = auto()
    IN_VALUE = auto()
    IN_INLINE = auto()


def render_number(raw: str) -> str:
    """Drop the fractional part of integral values: ``"5.0"`` -> ``"5"``."""
    if "_" in raw:
        return raw
    try:
        number = Decimal(raw)
    except InvalidOperation:
        return raw
    if not number.is_finite():
        return raw
    if not number.is_zero() and abs(number.adjusted()) >= _MAX_EXACT_DIGITS:
        return raw
    if number == number.to_integral_value():
        return str(int(number))
    return raw


def resolve_cell(cell_type: str | None, raw: str, shared_strings: Sequence[str]) -> str:
    """Turn a cell's stored text into its display string."""
    if cell_type == SHARED_STRING:
        try:
            position = int(raw)
        except ValueError:
            return ""
        if 0 <= position < len(shared_strings):
            return shared_strings[position]
        return ""
    if cell_type == BOOLEAN:
        return _BOOLEANS.get(raw, raw)
    if cell_type is None or cell_type == NUMBER:
        return render_number(raw)
    return raw


class _CellBuffer:
    __slots__ = ("cell_type", "reference", "value_parts", "inline_parts")

    def __init__(self, cell_type: str | None, reference: str | None) -> None:
        self.cell_type = cell_type
        self.reference = reference
        self.value_parts: list[str] = []
        self.inline_parts: list[str] = []

    def raw_text(self) -> str:
        if self.cell_type == INLINE_STRING:
            return "".join(self.inline_parts)
        return "".join(self.value_parts)


def _place(row: Row, index: int, value: str) -> None:
    if index >= len(row):
        row.extend([""] * (index + 1 - len(row)))
    row[index] = value


def decode_worksheet(
    stream: BinaryIO,
    shared_strings: Sequence[str] = (),
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Grid:
    """Decode the first worksheet into a dense, row-major grid of strings.

    A row is dropped only when no cell was written for it at all; a row
    holding nothing but blank cells is kept.
    """
    grid: Grid = []
    row: Row = []
    cursor = 0
    cell: _CellBuffer | None = None
    state = WorksheetState.OUTSIDE

    for event in iter_events(stream, PART_NAME, chunk_size):
        name = event.name
        if event.kind is EventKind.START:
            if name == "row":
                row = []
                cursor = 0
                state = WorksheetState.IN_ROW
            elif name == "c" and state is WorksheetState.IN_ROW:
                attrs = event.element.attrib
                cell = _CellBuffer(attrs.get("t"), attrs.get("r"))
                state = WorksheetState.IN_CELL
            elif name == "v" and state is WorksheetState.IN_CELL:
                state = WorksheetState.IN_VALUE
            elif name == "is" and state is WorksheetState.IN_CELL:
                state = WorksheetState.IN_INLINE
            continue

        if state is WorksheetState.IN_VALUE and name == "v":
            cell.value_parts.append(event.element.text or "")
            state = WorksheetState.IN_CELL
        elif state is WorksheetState.IN_INLINE:
            if name == "t":
                cell.inline_parts.append(event.element.text or "")
            elif name == "is":
                state = WorksheetState.IN_CELL
        elif state is WorksheetState.IN_CELL and name == "c":
            index = cursor
            if cell.reference:
                try:
                    index = column_index(cell.reference)
                except ValueError:
                    logger.debug("Unreadable cell reference %r; using column %d", cell.reference, cursor)
            _place(row, index, resolve_cell(cell.cell_type, cell.raw_text(), shared_strings))
            cursor = index + 1
            cell = None
            state = WorksheetState.IN_ROW
        elif state is WorksheetState.IN_ROW and name == "row":
            if row:
                grid.append(row)
            state = WorksheetState.OUTSIDE
            event.element.clear()

    logger.debug("Decoded worksheet grid with %d rows", len(grid))
    return grid
