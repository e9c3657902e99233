"""Spreadsheet cell-reference arithmetic.

Column letters are a bijective base-26 numbering: the digits run A=1 .. Z=26
and there is no zero digit, so "A" is column 0 and "AA" is column 26.
"""

from __future__ import annotations

_BASE = 26


def _leading_letters(reference: str) -> str:
    end = 0
    while end < len(reference) and reference[end].isascii() and reference[end].isalpha():
        end += 1
    return reference[:end].upper()


def column_index(reference: str) -> int:
    """Return the zero-based column of a reference such as ``"AA7"`` (-> 26)."""
    letters = _leading_letters(reference)
    if not letters:
        raise ValueError(f"Cell reference {reference!r} has no column letters")
    value = 0
    for ch in letters:
        value = value * _BASE + (ord(ch) - ord("A") + 1)
    return value - 1


def column_letters(index: int) -> str:
    """Inverse of :func:`column_index`: 0 -> "A", 26 -> "AA"."""
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    n = index + 1
    letters = ""
    while n:
        n, rem = divmod(n - 1, _BASE)
        letters = chr(ord("A") + rem) + letters
    return letters


def split_reference(reference: str) -> tuple[int, int]:
    """Split ``"C12"`` into ``(12, 2)``: one-based row, zero-based column."""
    letters = _leading_letters(reference)
    digits = reference[len(letters):]
    if not letters or not (digits.isascii() and digits.isdigit()) or int(digits) < 1:
        raise ValueError(f"Invalid cell reference {reference!r}")
    return int(digits), column_index(letters)
