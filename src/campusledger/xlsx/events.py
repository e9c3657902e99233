"""Pull-based XML event source shared by the workbook part decoders."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import StrEnum
from typing import BinaryIO, Iterator, NamedTuple

from campusledger.core.exceptions import SheetDecodeError

DEFAULT_CHUNK_SIZE = 64 * 1024


class EventKind(StrEnum):
    START = "start"
    END = "end"


class XmlEvent(NamedTuple):
    kind: EventKind
    name: str  # local name, namespace stripped
    element: ET.Element


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def iter_events(
    stream: BinaryIO, part: str, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[XmlEvent]:
    """Yield start/end events while reading ``stream`` in fixed-size chunks.

    Element text is only complete on the END event. Malformed XML raises
    SheetDecodeError naming ``part``.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            parser.feed(chunk)
            for event, element in parser.read_events():
                yield XmlEvent(EventKind(event), local_name(element.tag), element)
        parser.close()
        for event, element in parser.read_events():
            yield XmlEvent(EventKind(event), local_name(element.tag), element)
    except ET.ParseError as exc:
        raise SheetDecodeError(part, str(exc)) from exc
