"""Typed import rows handed to the persistence and presentation layers.

Required fields are plain strings; every optional field is ``None`` when the
source column is missing or the cell is blank, never an empty string.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class StudentRow(BaseModel):
    """One student from a roster import."""

    # --- Identity Fields ---
    student_id: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None

    # --- Contact Fields ---
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[str] = None

    # --- Enrollment Fields ---
    course_code: Optional[str] = None
    year_level: Optional[str] = None
    section: Optional[str] = None
    enrollment_year: Optional[str] = None

    model_config = {"str_strip_whitespace": True}

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)


class TeacherRow(BaseModel):
    """One teacher from a faculty import."""

    # --- Identity Fields ---
    teacher_id: str
    first_name: str
    last_name: str
    middle_name: Optional[str] = None

    # --- Contact Fields ---
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[str] = None

    # --- Employment Fields ---
    department_code: Optional[str] = None
    employment_type: Optional[str] = None
    position: Optional[str] = None
    specialization: Optional[str] = None
    date_hired: Optional[str] = None
    employee_number: Optional[str] = None

    model_config = {"str_strip_whitespace": True}

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)


class GradeRow(BaseModel):
    """Period grades for one student; a missing score stays None, not 0."""

    student_name: str
    prelim: Optional[float] = None
    midterm: Optional[float] = None
    final: Optional[float] = None

    model_config = {"str_strip_whitespace": True}
