"""Header-Driven Row Mapper: grid + ImportSchema -> typed records and rejections."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from pydantic import BaseModel, ValidationError

from campusledger.core.exceptions import (
    EmptyInput,
    MissingRequiredColumns,
    NoRowsAccepted,
    RowRejected,
)
from campusledger.core.types import Grid, RowNumber
from campusledger.importing.schemas import FieldSpec, ImportSchema
from campusledger.models.results import ParseResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_REPORTED_REJECTIONS = 10


def resolve_columns(header: Sequence[str], schema: ImportSchema) -> dict[str, Optional[int]]:
    """Map each field name to the first header column matching one of its synonyms.

    Synonyms are tried in priority order; headers are compared trimmed and
    case-insensitively, so column order in the file does not matter.
    """
    normalized = [cell.strip().casefold() for cell in header]
    columns: dict[str, Optional[int]] = {}
    for field in schema.fields:
        columns[field.name] = None
        for synonym in field.synonyms:
            target = synonym.casefold()
            if target in normalized:
                columns[field.name] = normalized.index(target)
                break
    return columns


def _cell(row: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index].strip()


def _parse_number(text: str) -> Optional[float]:
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _bounds_text(field: FieldSpec) -> str:
    if field.min_value is not None and field.max_value is not None:
        return f"between {field.min_value:g} and {field.max_value:g}"
    if field.min_value is not None:
        return f"at least {field.min_value:g}"
    return f"at most {field.max_value:g}"


def _check_range(field: FieldSpec, number: float) -> bool:
    if field.min_value is not None and number < field.min_value:
        return False
    if field.max_value is not None and number > field.max_value:
        return False
    return True


def build_record(
    row_number: RowNumber, values: dict[str, str], schema: ImportSchema
) -> BaseModel:
    """Validate one data row and build its record, or raise RowRejected.

    Required fields are checked in schema order and the first blank one ends
    the check. The first required value already read (usually the ID) is
    quoted in the message to help the operator find the row.
    """
    key: Optional[tuple[str, str]] = None
    for field in schema.required_fields:
        value = values[field.name]
        if not value:
            reason = f"Missing {field.label}"
            if key is not None:
                reason += f" for {key[0]}: {key[1]}"
            raise RowRejected(row_number, reason)
        if key is None:
            key = (field.label, value)

    payload: dict[str, object] = {}
    for field in schema.fields:
        value = values[field.name]
        if not field.numeric:
            payload[field.name] = value or None
            continue
        number = _parse_number(value)
        if number is not None and not _check_range(field, number):
            reason = f"{field.label} must be {_bounds_text(field)}"
            if key is not None:
                reason += f" for {key[0]}: {key[1]}"
            raise RowRejected(row_number, reason)
        payload[field.name] = number

    try:
        return schema.record_type(**payload)
    except ValidationError as exc:
        detail = "; ".join(err["msg"] for err in exc.errors())
        raise RowRejected(row_number, f"Error parsing row - {detail}") from exc


def map_rows(
    grid: Grid,
    schema: ImportSchema,
    max_reported_rejections: int = DEFAULT_MAX_REPORTED_REJECTIONS,
) -> ParseResult:
    """Turn a header-first grid into a ParseResult.

    Raises EmptyInput when there is no header or no data row,
    MissingRequiredColumns naming every unresolved required field, and
    NoRowsAccepted when every non-spacer row was rejected.
    """
    if not grid:
        raise EmptyInput("File is empty or contains no data.")

    columns = resolve_columns(grid[0], schema)
    logger.debug("Resolved %s columns: %s", schema.kind, columns)

    missing = [f.label for f in schema.required_fields if columns[f.name] is None]
    if missing:
        raise MissingRequiredColumns(missing)

    if len(grid) < 2:
        raise EmptyInput("File must have at least a header row and one data row.")

    identity = schema.identity_fields
    records: list[BaseModel] = []
    rejections: list[str] = []

    # Row numbers are 1-based with the header as row 1.
    for row_number, row in enumerate(grid[1:], start=2):
        values = {name: _cell(row, index) for name, index in columns.items()}
        if identity and not any(values[f.name] for f in identity):
            continue
        try:
            records.append(build_record(row_number, values, schema))
        except RowRejected as exc:
            rejections.append(str(exc))

    if not records and rejections:
        raise NoRowsAccepted(schema.plural, rejections[:max_reported_rejections])

    if rejections:
        logger.warning("Rejected %d %s rows", len(rejections), schema.kind)
    logger.info("Mapped %d %s from %d data rows", len(records), schema.plural, len(grid) - 1)
    return ParseResult(kind=schema.kind, records=records, rejections=rejections)
