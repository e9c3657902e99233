"""Shared-String Table Decoder for ``xl/sharedStrings.xml``."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import BinaryIO

from campusledger.xlsx.events import DEFAULT_CHUNK_SIZE, EventKind, iter_events

logger = logging.getLogger(__name__)

PART_NAME = "sharedStrings.xml"


class SharedStringState(Enum):
    OUTSIDE = auto()
    IN_ITEM = auto()
    IN_TEXT = auto()


def decode_shared_strings(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """Decode the shared-string table into a zero-indexed list.

    Each ``<si>`` contributes exactly one entry, even when empty. Rich-text
    items split a string over several ``<t>`` runs; those are concatenated
    with no separator.
    """
    strings: list[str] = []
    parts: list[str] = []
    state = SharedStringState.OUTSIDE

    for event in iter_events(stream, PART_NAME, chunk_size):
        if event.kind is EventKind.START:
            if event.name == "si":
                state = SharedStringState.IN_ITEM
                parts = []
            elif event.name == "t" and state is SharedStringState.IN_ITEM:
                state = SharedStringState.IN_TEXT
            continue

        if event.name == "t" and state is SharedStringState.IN_TEXT:
            parts.append(event.element.text or "")
            state = SharedStringState.IN_ITEM
        elif event.name == "si" and state is not SharedStringState.OUTSIDE:
            strings.append("".join(parts))
            state = SharedStringState.OUTSIDE
            event.element.clear()

    logger.debug("Decoded %d shared strings", len(strings))
    return strings
