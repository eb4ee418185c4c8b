"""
Enumerations and constants for the UMS registry.
"""

from enum import Enum


class StudentStatus(Enum):
    """Enrollment status of a student."""
    ACTIVE = "Active"
    ACADEMIC_LEAVE = "Academic_Leave"
    GRADUATED = "Graduated"
    EXPELLED = "Expelled"


class CourseType(Enum):
    """Kind of a course in the curriculum."""
    MANDATORY = "Mandatory"
    OPTIONAL = "Optional"
    SPECIAL = "Special"


class Semester(Enum):
    """Half of the academic year a course is offered in."""
    FIRST = "First"
    SECOND = "Second"


class Grade(Enum):
    """Discrete grade scale."""
    EXCELLENT = 5
    GOOD = 4
    SATISFACTORY = 3
    UNSATISFACTORY = 2


class Faculty(Enum):
    """Organizational units of the university."""
    COMPUTER_SCIENCE = "Computer_Science"
    ECONOMICS = "Economics"
    LAW = "Law"
    ENGINEERING = "Engineering"


# Students averaging at least this are listed as top students.
TOP_STUDENT_THRESHOLD = Grade.EXCELLENT.value - 1
