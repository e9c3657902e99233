"""Import schemas: per entity kind, the logical fields and their header synonyms."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from campusledger.models.records import GradeRow, StudentRow, TeacherRow
from campusledger.models.results import EntityKind


class FieldSpec(BaseModel):
    """One logical field and the header spellings that locate its column."""

    name: str  # attribute on the record type
    label: str  # operator-facing name used in error messages
    synonyms: tuple[str, ...]  # priority order, compared case-insensitively
    required: bool = False
    identity: bool = False  # all identity cells blank => spacer row
    numeric: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    model_config = {"frozen": True}


class ImportSchema(BaseModel):
    """Complete field list for one entity kind."""

    kind: EntityKind
    plural: str
    record_type: type[BaseModel]
    fields: tuple[FieldSpec, ...]

    model_config = {"frozen": True}

    @property
    def required_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.required)

    @property
    def identity_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(f for f in self.fields if f.identity)


_FIRST_NAME = FieldSpec(
    name="first_name", label="First Name", required=True, identity=True,
    synonyms=("first name", "firstname", "first", "given name", "givenname"),
)
_LAST_NAME = FieldSpec(
    name="last_name", label="Last Name", required=True, identity=True,
    synonyms=("last name", "lastname", "last", "surname", "family name", "familyname"),
)
_MIDDLE_NAME = FieldSpec(
    name="middle_name", label="Middle Name",
    synonyms=("middle name", "middlename", "middle", "middle initial", "middleinitial", "mi"),
)
_EMAIL = FieldSpec(
    name="email", label="Email",
    synonyms=("email", "e-mail", "email address", "emailaddress"),
)
_PHONE = FieldSpec(
    name="phone_number", label="Phone Number",
    synonyms=("phone number", "phonenumber", "phone", "mobile", "contact number", "contactnumber"),
)
_DATE_OF_BIRTH = FieldSpec(
    name="date_of_birth", label="Date of Birth",
    synonyms=("date of birth", "dateofbirth", "dob", "birthdate", "birth date"),
)
_ADDRESS = FieldSpec(
    name="address", label="Address",
    synonyms=("address", "home address", "homeaddress", "residence"),
)


STUDENT_SCHEMA = ImportSchema(
    kind=EntityKind.STUDENT,
    plural="students",
    record_type=StudentRow,
    fields=(
        FieldSpec(
            name="student_id", label="Student ID", required=True, identity=True,
            synonyms=("student id", "studentid", "id", "student_id"),
        ),
        _FIRST_NAME,
        _LAST_NAME,
        _MIDDLE_NAME,
        _EMAIL,
        FieldSpec(
            name="course_code", label="Course Code",
            synonyms=("course code", "coursecode", "course", "course name", "coursename"),
        ),
        FieldSpec(
            name="year_level", label="Year Level",
            synonyms=("year level", "yearlevel", "year", "level", "grade level", "gradelevel"),
        ),
        FieldSpec(
            name="section", label="Section",
            synonyms=("section", "class", "section name", "sectionname"),
        ),
        FieldSpec(
            name="enrollment_year", label="Enrollment Year",
            synonyms=(
                "enrollment year", "enrollmentyear", "academic year", "academicyear",
                "school year", "schoolyear",
            ),
        ),
        _PHONE,
        _DATE_OF_BIRTH,
        _ADDRESS,
    ),
)


TEACHER_SCHEMA = ImportSchema(
    kind=EntityKind.TEACHER,
    plural="teachers",
    record_type=TeacherRow,
    fields=(
        FieldSpec(
            name="teacher_id", label="Teacher ID", required=True, identity=True,
            synonyms=("teacher id", "teacherid", "id", "employee id", "employeeid", "teacher_id"),
        ),
        _FIRST_NAME,
        _LAST_NAME,
        _MIDDLE_NAME,
        _EMAIL,
        FieldSpec(
            name="department_code", label="Department",
            synonyms=("department", "department code", "departmentcode", "course", "dept"),
        ),
        FieldSpec(
            name="employment_type", label="Employment Type",
            synonyms=("employment type", "employmenttype", "type", "employment"),
        ),
        FieldSpec(
            name="position", label="Position",
            synonyms=("position", "rank", "title", "designation"),
        ),
        FieldSpec(
            name="specialization", label="Specialization",
            synonyms=("specialization", "specialty", "field", "expertise"),
        ),
        _PHONE,
        _DATE_OF_BIRTH,
        _ADDRESS,
        FieldSpec(
            name="date_hired", label="Date Hired",
            synonyms=("date hired", "datehired", "hire date", "hiredate", "employed date"),
        ),
        FieldSpec(
            name="employee_number", label="Employee Number",
            synonyms=("employee number", "employeenumber", "emp number", "empnumber", "employee no"),
        ),
    ),
)


GRADE_SCHEMA = ImportSchema(
    kind=EntityKind.GRADE,
    plural="grades",
    record_type=GradeRow,
    fields=(
        FieldSpec(
            name="student_name", label="Student Name", required=True, identity=True,
            synonyms=("student name", "studentname", "name", "student"),
        ),
        FieldSpec(
            name="prelim", label="Prelim grade", numeric=True, min_value=0, max_value=100,
            synonyms=("prelim", "preliminary", "prelim grade", "prelimgrade"),
        ),
        FieldSpec(
            name="midterm", label="Midterm grade", numeric=True, min_value=0, max_value=100,
            synonyms=("midterm", "midterm grade", "midtermgrade"),
        ),
        FieldSpec(
            name="final", label="Final grade", numeric=True, min_value=0, max_value=100,
            synonyms=("final", "final grade", "finalgrade"),
        ),
    ),
)


SCHEMAS: dict[EntityKind, ImportSchema] = {
    schema.kind: schema for schema in (STUDENT_SCHEMA, TEACHER_SCHEMA, GRADE_SCHEMA)
}


def schema_for(kind: EntityKind | str) -> ImportSchema:
    return SCHEMAS[EntityKind(kind)]
