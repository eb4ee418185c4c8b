"""
Pydantic models for registry input payloads and configuration.

Payload models only check field types. Semantic checks such as a non-empty
name or a positive year are deliberately not performed.
"""

from datetime import date

from pydantic import BaseModel, Field

from .enums import StudentStatus, CourseType, Semester, Faculty, TOP_STUDENT_THRESHOLD


class StudentCreate(BaseModel):
    """Data for enrolling a new student (everything but the id)."""
    full_name: str
    faculty: Faculty
    year: int
    status: StudentStatus = StudentStatus.ACTIVE
    enrollment_date: date
    group_number: str


class CourseCreate(BaseModel):
    """Data for adding a course to the catalog (everything but the id)."""
    name: str
    course_type: CourseType
    credits: int
    semester: Semester
    faculty: Faculty
    max_students: int


class RegistryConfig(BaseModel):
    """Configuration for the registry and the platform around it."""
    reject_duplicate_registrations: bool = True
    top_student_threshold: float = Field(float(TOP_STUDENT_THRESHOLD), ge=2, le=5)
    log_level: str = Field("INFO", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    seed_catalog: bool = True
