"""
Core entities for the UMS registry.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .enums import StudentStatus, CourseType, Semester, Grade, Faculty


class Student:
    """Student entity. Only the status changes after enrollment."""

    def __init__(self, student_id: int, full_name: str, faculty: Faculty, year: int,
                 status: StudentStatus, enrollment_date: date, group_number: str):
        self._id = student_id
        self._full_name = full_name
        self._faculty = faculty
        self._year = year
        self._status = status
        self._enrollment_date = enrollment_date
        self._group_number = group_number

    @property
    def id(self) -> int:
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def faculty(self) -> Faculty:
        return self._faculty

    @property
    def year(self) -> int:
        return self._year

    @property
    def status(self) -> StudentStatus:
        return self._status

    @property
    def enrollment_date(self) -> date:
        return self._enrollment_date

    @property
    def group_number(self) -> str:
        return self._group_number

    def set_status(self, status: StudentStatus) -> None:
        """Overwrite the status. Transition rules are enforced by the Registry."""
        self._status = status

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        return {
            'id': self._id,
            'full_name': self._full_name,
            'faculty': self._faculty.value,
            'year': self._year,
            'status': self._status.value,
            'enrollment_date': self._enrollment_date.isoformat(),
            'group_number': self._group_number,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, full_name={self._full_name})"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(id={self._id}, faculty={self._faculty.value}, "
                f"status={self._status.value})")


class Course:
    """Course entity. Immutable once added to the catalog."""

    def __init__(self, course_id: int, name: str, course_type: CourseType, credits: int,
                 semester: Semester, faculty: Faculty, max_students: int):
        self._id = course_id
        self._name = name
        self._course_type = course_type
        self._credits = credits
        self._semester = semester
        self._faculty = faculty
        self._max_students = max_students

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def course_type(self) -> CourseType:
        return self._course_type

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def semester(self) -> Semester:
        return self._semester

    @property
    def faculty(self) -> Faculty:
        return self._faculty

    @property
    def max_students(self) -> int:
        return self._max_students

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        return {
            'id': self._id,
            'name': self._name,
            'course_type': self._course_type.value,
            'credits': self._credits,
            'semester': self._semester.value,
            'faculty': self._faculty.value,
            'max_students': self._max_students,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, name={self._name})"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(id={self._id}, faculty={self._faculty.value}, "
                f"semester={self._semester.value}, max_students={self._max_students})")


class GradeRecord:
    """A student's registration in a course and, once graded, the grade received."""

    def __init__(self, student_id: int, course_id: int, semester: Semester,
                 grade: Optional[Grade] = None, recorded_at: Optional[datetime] = None):
        self._student_id = student_id
        self._course_id = course_id
        self._semester = semester
        self._grade = grade
        self._date = recorded_at or datetime.now(timezone.utc)

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def course_id(self) -> int:
        return self._course_id

    @property
    def key(self) -> Tuple[int, int]:
        return self._student_id, self._course_id

    @property
    def semester(self) -> Semester:
        return self._semester

    @property
    def grade(self) -> Optional[Grade]:
        return self._grade

    @property
    def date(self) -> datetime:
        """Time of the last modification."""
        return self._date

    @property
    def is_graded(self) -> bool:
        return self._grade is not None

    def assign_grade(self, grade: Grade) -> None:
        """Overwrite the grade and refresh the modification time."""
        self._grade = grade
        self._date = datetime.now(timezone.utc)

    def matches(self, student_id: int, course_id: int) -> bool:
        return self.key == (student_id, course_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert grade record to dictionary."""
        return {
            'student_id': self._student_id,
            'course_id': self._course_id,
            'grade': self._grade.value if self._grade is not None else None,
            'date': self._date.isoformat(),
            'semester': self._semester.value,
        }

    def __repr__(self) -> str:
        grade = self._grade.name if self._grade is not None else None
        return (f"{self.__class__.__name__}(student_id={self._student_id}, "
                f"course_id={self._course_id}, grade={grade})")
