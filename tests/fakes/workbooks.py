"""In-memory XLSX builders for tests."""

from __future__ import annotations

import io
import zipfile
from typing import Any, Sequence
from xml.sax.saxutils import escape

from campusledger.xlsx.address import column_letters

MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)


def shared_strings_xml(strings: Sequence[str]) -> str:
    items = "".join(f'<si><t xml:space="preserve">{escape(s)}</t></si>' for s in strings)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<sst xmlns="{MAIN_NS}" count="{len(strings)}" uniqueCount="{len(strings)}">'
        f"{items}</sst>"
    )


def sheet_xml(rows_xml: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<worksheet xmlns="{MAIN_NS}"><sheetData>{rows_xml}</sheetData></worksheet>'
    )


def build_archive(entries: Sequence[tuple[str, str | bytes]]) -> bytes:
    """Zip ``(name, content)`` pairs in the given physical order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries:
            zf.writestr(name, content)
    return buf.getvalue()


def build_workbook(rows: Sequence[Sequence[Any]], inline_strings: bool = False) -> bytes:
    """Build a one-sheet workbook. ``None`` cells are omitted, as Excel does."""
    strings: list[str] = []
    index_of: dict[str, int] = {}
    rows_xml = []
    for r, row in enumerate(rows, start=1):
        cells = []
        for c, value in enumerate(row):
            if value is None:
                continue
            ref = f"{column_letters(c)}{r}"
            if isinstance(value, bool):
                cells.append(f'<c r="{ref}" t="b"><v>{int(value)}</v></c>')
            elif isinstance(value, (int, float)):
                cells.append(f'<c r="{ref}"><v>{value}</v></c>')
            elif inline_strings:
                cells.append(f'<c r="{ref}" t="inlineStr"><is><t>{escape(value)}</t></is></c>')
            else:
                if value not in index_of:
                    index_of[value] = len(strings)
                    strings.append(value)
                cells.append(f'<c r="{ref}" t="s"><v>{index_of[value]}</v></c>')
        rows_xml.append(f'<row r="{r}">{"".join(cells)}</row>')

    entries: list[tuple[str, str | bytes]] = [("[Content_Types].xml", CONTENT_TYPES)]
    if strings:
        entries.append(("xl/sharedStrings.xml", shared_strings_xml(strings)))
    entries.append(("xl/worksheets/sheet1.xml", sheet_xml("".join(rows_xml))))
    return build_archive(entries)
