"""CampusLedger exception hierarchy."""

from __future__ import annotations


class CampusLedgerError(Exception):
    """Base exception for all CampusLedger errors."""


class ImportFailed(CampusLedgerError):
    """File-level import failure; no rows are returned."""


class MalformedContainer(ImportFailed):
    """The file is not a readable archive or delimited-text stream."""


class UnsupportedFileFormat(ImportFailed):
    """The file extension names a format the importer does not read."""


class MissingRequiredColumns(ImportFailed):
    """One or more required fields have no matching header."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")


class EmptyInput(ImportFailed):
    """The file holds no header or no data rows."""


class NoRowsAccepted(ImportFailed):
    """Every data row was rejected."""

    def __init__(self, plural: str, rejections: list[str]) -> None:
        self.rejections = list(rejections)
        details = "\n".join(self.rejections)
        super().__init__(f"Failed to parse any {plural}. Errors:\n{details}")


class SheetDecodeError(CampusLedgerError):
    """An XML part of the workbook could not be decoded."""

    def __init__(self, part: str, message: str) -> None:
        self.part = part
        super().__init__(f"Failed to parse {part}: {message}")


class RowRejected(CampusLedgerError):
    """A single data row failed validation."""

    def __init__(self, row_number: int, reason: str) -> None:
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"Row {row_number}: {reason}")


class StorageError(CampusLedgerError):
    """File store operation failed."""
