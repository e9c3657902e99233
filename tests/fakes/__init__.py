"""Shared test doubles: in-memory file store and workbook builders."""

from __future__ import annotations

from campusledger.persistence.memory_backend import MemoryFileStore
from tests.fakes.workbooks import build_archive, build_workbook, shared_strings_xml, sheet_xml

__all__ = ["MemoryFileStore", "build_archive", "build_workbook", "shared_strings_xml", "sheet_xml"]
