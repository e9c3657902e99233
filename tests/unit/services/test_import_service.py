"""Tests for ImportService with an in-memory file store."""

from __future__ import annotations

import pytest

from campusledger.core.config import AppSettings, ImportSettings
from campusledger.core.exceptions import MissingRequiredColumns, StorageError
from campusledger.models.results import EntityKind, FileFormat
from campusledger.services.import_service import ImportService
from tests.fakes import MemoryFileStore, build_workbook

STUDENTS_CSV = b"Student ID,First Name,Last Name\n001,Ana,Cruz\n,Bad,Row\n002,Ben,Diaz\n"


@pytest.fixture
def store():
    return MemoryFileStore()


@pytest.fixture
def service(store):
    return ImportService(settings=AppSettings(), file_store=store)


class TestImportBytes:
    def test_summary_counts(self, service):
        summary = service.import_bytes(STUDENTS_CSV, EntityKind.STUDENT, "students.csv")
        assert summary.filename == "students.csv"
        assert summary.file_format is FileFormat.CSV
        assert summary.accepted_count == 2
        assert summary.rejected_count == 1
        assert summary.rejections == ["Row 3: Missing Student ID"]

    def test_displayed_rejections_are_capped(self, store):
        settings = AppSettings(imports=ImportSettings(max_reported_rejections=2))
        service = ImportService(settings=settings, file_store=store)
        body = b"Student ID,First Name,Last Name\n001,Ana,Cruz\n" + b",X,Y\n" * 5
        summary = service.import_bytes(body, "student", "s.csv")
        assert summary.rejected_count == 5
        assert summary.rejections == ["Row 3: Missing Student ID", "Row 4: Missing Student ID"]

    def test_file_level_failure_propagates(self, service):
        with pytest.raises(MissingRequiredColumns):
            service.import_bytes(b"Name\nAna\n", EntityKind.TEACHER, "t.csv")

    def test_summary_serializes_records(self, service):
        summary = service.import_bytes(STUDENTS_CSV, EntityKind.STUDENT, "students.csv")
        payload = summary.model_dump(mode="json")
        assert payload["records"][0]["student_id"] == "001"
        assert payload["records"][0]["first_name"] == "Ana"


class TestImportStaged:
    def test_reads_from_store(self, service, store):
        store.files["uploads/2026/teachers.xlsx"] = build_workbook([
            ["Teacher ID", "First Name", "Last Name"],
            ["T-1", "Rosa", "Lim"],
        ])
        summary = service.import_staged("uploads/2026/teachers.xlsx", EntityKind.TEACHER)
        assert summary.filename == "teachers.xlsx"
        assert summary.file_format is FileFormat.XLSX
        assert summary.accepted_count == 1

    def test_missing_file_raises(self, service):
        with pytest.raises(StorageError):
            service.import_staged("uploads/missing.csv", EntityKind.STUDENT)
