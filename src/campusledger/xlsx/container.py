"""Container Reader: walks the workbook ZIP archive and opens the entries we decode."""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator

from campusledger.core.exceptions import MalformedContainer

logger = logging.getLogger(__name__)

SHARED_STRINGS_ENTRY = "xl/sharedStrings.xml"
WORKSHEET_ENTRY = "xl/worksheets/sheet1.xml"


@dataclass(frozen=True)
class ArchiveEntry:
    """One archive member; ``open()`` returns a decompressing stream."""

    name: str
    size: int
    _archive: zipfile.ZipFile

    def open(self) -> BinaryIO:
        return self._archive.open(self.name, "r")


class ContainerReader:
    """Context manager over a ZIP-compatible byte stream.

    Entries are visited in physical order (local header offset) and iteration
    stops once every wanted name has been seen. Content is never read here;
    callers stream it through :meth:`ArchiveEntry.open`.
    """

    def __init__(
        self,
        stream: BinaryIO,
        wanted: Iterable[str] = (SHARED_STRINGS_ENTRY, WORKSHEET_ENTRY),
    ) -> None:
        self._wanted = frozenset(wanted)
        if not stream.seekable():
            stream = io.BytesIO(stream.read())
        try:
            self._archive = zipfile.ZipFile(stream)
        except (zipfile.BadZipFile, OSError, ValueError) as exc:
            raise MalformedContainer(f"File is not a valid .xlsx workbook: {exc}") from exc

    def __enter__(self) -> ContainerReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._archive.close()

    def entries(self) -> Iterator[ArchiveEntry]:
        """Yield the wanted entries in storage order."""
        remaining = set(self._wanted)
        members = sorted(self._archive.infolist(), key=lambda info: info.header_offset)
        for info in members:
            if not remaining:
                break
            if info.filename not in remaining:
                continue
            remaining.discard(info.filename)
            logger.debug("Found archive entry %s (%d bytes)", info.filename, info.file_size)
            yield ArchiveEntry(info.filename, info.file_size, self._archive)

    def find(self) -> dict[str, ArchiveEntry]:
        """Return the wanted entries present in the archive, keyed by name."""
        return {entry.name: entry for entry in self.entries()}
