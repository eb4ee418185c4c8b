"""
Registration policies checked before a student is registered for a course.
"""

from typing import List

from ..core.entities import Student, Course, GradeRecord
from ..core.interfaces import RegistrationPolicy
from ..core.exceptions import (
    RegistrationError, FacultyMismatchError, CourseFullError, DuplicateRegistrationError
)


class FacultyMatchPolicy(RegistrationPolicy):
    """Policy that only allows registration within the student's own faculty."""

    def can_register(self, student: Student, course: Course, records: List[GradeRecord]) -> bool:
        return student.faculty == course.faculty

    def violation(self, student: Student, course: Course) -> RegistrationError:
        return FacultyMismatchError(
            "Faculty mismatch.",
            details={
                'student_id': student.id,
                'course_id': course.id,
                'student_faculty': student.faculty.value,
                'course_faculty': course.faculty.value,
            }
        )

    def get_policy_name(self) -> str:
        return "FacultyMatchPolicy"


class DuplicateRegistrationPolicy(RegistrationPolicy):
    """Policy that rejects a second registration of the same student for a course."""

    def can_register(self, student: Student, course: Course, records: List[GradeRecord]) -> bool:
        return not any(record.matches(student.id, course.id) for record in records)

    def violation(self, student: Student, course: Course) -> RegistrationError:
        return DuplicateRegistrationError(
            "Student is already registered for this course.",
            details={'student_id': student.id, 'course_id': course.id}
        )

    def get_policy_name(self) -> str:
        return "DuplicateRegistrationPolicy"


class CapacityPolicy(RegistrationPolicy):
    """Policy that enforces the course's maximum number of students."""

    def can_register(self, student: Student, course: Course, records: List[GradeRecord]) -> bool:
        registered = sum(1 for record in records if record.course_id == course.id)
        return registered < course.max_students

    def violation(self, student: Student, course: Course) -> RegistrationError:
        return CourseFullError(
            "Course is full.",
            details={'course_id': course.id, 'max_students': course.max_students}
        )

    def get_policy_name(self) -> str:
        return "CapacityPolicy"
