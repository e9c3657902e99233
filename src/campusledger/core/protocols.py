"""Protocol interfaces for CampusLedger collaborators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFileStore(Protocol):
    """Where staged import files are fetched from, keyed by path."""

    def read(self, path: str) -> bytes: ...
