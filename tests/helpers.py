"""
Payload builders shared by the UMS tests.
"""

from datetime import date

from ums.core.enums import StudentStatus, CourseType, Semester, Faculty
from ums.core.schemas import StudentCreate, CourseCreate


def student_data(faculty=Faculty.COMPUTER_SCIENCE, status=StudentStatus.ACTIVE, **overrides):
    """Build a StudentCreate payload with sensible defaults."""
    fields = {
        'full_name': "Ivan Ivanov",
        'faculty': faculty,
        'year': 1,
        'status': status,
        'enrollment_date': date(2023, 9, 1),
        'group_number': "CS-101",
    }
    fields.update(overrides)
    return StudentCreate(**fields)


def course_data(faculty=Faculty.COMPUTER_SCIENCE, semester=Semester.FIRST, max_students=2, **overrides):
    """Build a CourseCreate payload with sensible defaults."""
    fields = {
        'name': "Data Structures",
        'course_type': CourseType.MANDATORY,
        'credits': 5,
        'semester': semester,
        'faculty': faculty,
        'max_students': max_students,
    }
    fields.update(overrides)
    return CourseCreate(**fields)
