"""In-memory file store for unit tests and local runs."""

from __future__ import annotations

from campusledger.core.exceptions import StorageError


class MemoryFileStore:
    """Dict-backed IFileStore; seed it through ``files``."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})

    def read(self, path: str) -> bytes:
        try:
            return self.files[path]
        except KeyError:
            raise StorageError(f"Could not read staged file {path}: not found") from None
