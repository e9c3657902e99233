"""Import outcome models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field, SerializeAsAny


class EntityKind(StrEnum):
    STUDENT = "student"
    TEACHER = "teacher"
    GRADE = "grade"


class FileFormat(StrEnum):
    CSV = "csv"
    XLSX = "xlsx"


class ParseResult(BaseModel):
    """Accepted records plus the per-row rejection messages of one parse."""

    kind: EntityKind
    file_format: Optional[FileFormat] = None
    records: list[SerializeAsAny[BaseModel]] = Field(default_factory=list)
    rejections: list[str] = Field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.records)

    @property
    def rejected_count(self) -> int:
        return len(self.rejections)


class ImportSummary(BaseModel):
    """What the importing operator is shown after a file is processed."""

    kind: EntityKind
    filename: str = ""
    file_format: FileFormat
    accepted_count: int = 0
    rejected_count: int = 0
    rejections: list[str] = Field(default_factory=list)  # capped for display
    records: list[SerializeAsAny[BaseModel]] = Field(default_factory=list)
