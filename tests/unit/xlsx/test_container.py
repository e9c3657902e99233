"""Tests for the workbook container reader and the XLSX grid reader."""

from __future__ import annotations

import io

import pytest

from campusledger.core.config import ImportSettings
from campusledger.core.exceptions import MalformedContainer, SheetDecodeError
from campusledger.xlsx.container import SHARED_STRINGS_ENTRY, WORKSHEET_ENTRY, ContainerReader
from campusledger.xlsx.reader import read_xlsx_grid
from tests.fakes import build_archive, build_workbook, shared_strings_xml, sheet_xml


class _OneWayStream(io.RawIOBase):
    """Readable stream that refuses to seek, like a socket or upload body."""

    def __init__(self, data: bytes) -> None:
        self._inner = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, buffer) -> int:
        chunk = self._inner.read(len(buffer))
        buffer[: len(chunk)] = chunk
        return len(chunk)


class TestContainerReader:
    def test_yields_wanted_entries_in_storage_order(self):
        data = build_archive([
            ("[Content_Types].xml", "<Types/>"),
            (WORKSHEET_ENTRY, sheet_xml("")),
            ("xl/styles.xml", "<styleSheet/>"),
            (SHARED_STRINGS_ENTRY, shared_strings_xml([])),
        ])
        with ContainerReader(io.BytesIO(data)) as reader:
            names = [entry.name for entry in reader.entries()]
        assert names == [WORKSHEET_ENTRY, SHARED_STRINGS_ENTRY]

    def test_entry_content_is_streamed(self):
        data = build_archive([(WORKSHEET_ENTRY, "<worksheet/>")])
        with ContainerReader(io.BytesIO(data)) as reader:
            entry = reader.find()[WORKSHEET_ENTRY]
            with entry.open() as part:
                assert part.read() == b"<worksheet/>"

    def test_missing_entries_are_not_an_error(self):
        data = build_archive([("docProps/app.xml", "<Properties/>")])
        with ContainerReader(io.BytesIO(data)) as reader:
            assert reader.find() == {}

    def test_non_seekable_stream(self):
        data = build_archive([(WORKSHEET_ENTRY, "<worksheet/>")])
        with ContainerReader(_OneWayStream(data)) as reader:
            assert list(reader.find()) == [WORKSHEET_ENTRY]

    @pytest.mark.parametrize("data", [b"", b"Student ID,First Name\n", b"PK\x03\x04garbage"])
    def test_not_an_archive_raises(self, data):
        with pytest.raises(MalformedContainer):
            ContainerReader(io.BytesIO(data))


class TestReadXlsxGrid:
    def test_reads_shared_and_numeric_cells(self):
        data = build_workbook([["Student ID", "First Name"], [1001, "Ana"]])
        assert read_xlsx_grid(io.BytesIO(data)) == [["Student ID", "First Name"], ["1001", "Ana"]]

    def test_worksheet_before_shared_strings(self):
        data = build_archive([
            (WORKSHEET_ENTRY, sheet_xml('<row r="1"><c r="A1" t="s"><v>0</v></c></row>')),
            (SHARED_STRINGS_ENTRY, shared_strings_xml(["Ana"])),
        ])
        assert read_xlsx_grid(io.BytesIO(data)) == [["Ana"]]

    def test_inline_only_workbook(self):
        data = build_workbook([["Student ID"], ["A-17"]], inline_strings=True)
        assert read_xlsx_grid(io.BytesIO(data)) == [["Student ID"], ["A-17"]]

    def test_missing_worksheet_gives_empty_grid(self):
        data = build_archive([(SHARED_STRINGS_ENTRY, shared_strings_xml(["x"]))])
        assert read_xlsx_grid(io.BytesIO(data)) == []

    def test_configured_worksheet_entry(self):
        data = build_archive([("xl/worksheets/roster.xml", sheet_xml('<row r="1"><c r="A1"><v>4</v></c></row>'))])
        settings = ImportSettings(worksheet_entry="xl/worksheets/roster.xml")
        assert read_xlsx_grid(io.BytesIO(data), settings) == [["4"]]

    def test_malformed_worksheet_raises_decode_error(self):
        data = build_archive([(WORKSHEET_ENTRY, "<worksheet><sheetData><row></sheetData>")])
        with pytest.raises(SheetDecodeError):
            read_xlsx_grid(io.BytesIO(data))
