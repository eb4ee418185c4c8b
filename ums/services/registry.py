"""
Registry holding students, courses and grade records, and enforcing the
rules that relate them.
"""

from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.entities import Student, Course, GradeRecord
from ..core.enums import StudentStatus, Semester, Grade, Faculty, TOP_STUDENT_THRESHOLD
from ..core.exceptions import InvalidReferenceError, NotRegisteredError, IllegalTransitionError
from ..core.interfaces import RegistrationPolicy
from ..core.schemas import StudentCreate, CourseCreate
from .registration_policies import FacultyMatchPolicy, DuplicateRegistrationPolicy, CapacityPolicy

REQUIRED_POLICIES = frozenset({"FacultyMatchPolicy", "CapacityPolicy"})


class Registry:
    """In-memory registry of students, courses and their grade records.

    All lookups are linear scans in insertion order. Every operation validates
    before mutating, so a failed call leaves the registry unchanged.
    """

    def __init__(self, reject_duplicate_registrations: bool = True,
                 top_student_threshold: float = TOP_STUDENT_THRESHOLD):
        self._students: List[Student] = []
        self._courses: List[Course] = []
        self._grades: List[GradeRecord] = []
        self._next_student_id = 1
        self._next_course_id = 1
        self._top_student_threshold = top_student_threshold
        self._policies: List[RegistrationPolicy] = []

        self._add_default_policies(reject_duplicate_registrations)

    def _add_default_policies(self, reject_duplicate_registrations: bool) -> None:
        """Add default registration policies, in evaluation order."""
        self._policies.append(FacultyMatchPolicy())
        if reject_duplicate_registrations:
            self._policies.append(DuplicateRegistrationPolicy())
        self._policies.append(CapacityPolicy())

    def add_policy(self, policy: RegistrationPolicy) -> None:
        """Add a registration policy, evaluated after the existing ones."""
        self._policies.append(policy)

    def remove_policy(self, policy_name: str) -> None:
        """Remove a registration policy by name.

        Raises:
            ValueError: If the policy guards a registry invariant (faculty
                match or course capacity).
        """
        if policy_name in REQUIRED_POLICIES:
            raise ValueError(f"Policy {policy_name} is required and cannot be removed")
        self._policies = [p for p in self._policies if p.get_policy_name() != policy_name]

    def get_policy_names(self) -> List[str]:
        return [p.get_policy_name() for p in self._policies]

    # Enrollment and catalog

    def enroll_student(self, data: Union[StudentCreate, Mapping[str, Any]]) -> Student:
        """Enroll a new student and assign the next student id."""
        if not isinstance(data, StudentCreate):
            data = StudentCreate.model_validate(data)

        student = Student(
            student_id=self._next_student_id,
            full_name=data.full_name,
            faculty=data.faculty,
            year=data.year,
            status=data.status,
            enrollment_date=data.enrollment_date,
            group_number=data.group_number,
        )
        self._next_student_id += 1
        self._students.append(student)
        return student

    def add_course(self, data: Union[CourseCreate, Mapping[str, Any]]) -> Course:
        """Add a course to the catalog and assign the next course id."""
        if not isinstance(data, CourseCreate):
            data = CourseCreate.model_validate(data)

        course = Course(
            course_id=self._next_course_id,
            name=data.name,
            course_type=data.course_type,
            credits=data.credits,
            semester=data.semester,
            faculty=data.faculty,
            max_students=data.max_students,
        )
        self._next_course_id += 1
        self._courses.append(course)
        return course

    # Registration and grading

    def register_for_course(self, student_id: int, course_id: int) -> GradeRecord:
        """Register a student for a course, creating an ungraded record.

        Raises:
            InvalidReferenceError: If the student or the course does not exist.
            FacultyMismatchError: If student and course faculties differ.
            DuplicateRegistrationError: If the pair is already registered and
                duplicates are rejected.
            CourseFullError: If the course already has max_students records.
        """
        course = self._find_course(course_id)
        student = self._find_student(student_id)

        if course is None or student is None:
            raise InvalidReferenceError(
                "Invalid student or course ID.",
                details={'student_id': student_id, 'course_id': course_id}
            )

        for policy in self._policies:
            if not policy.can_register(student, course, self._grades):
                raise policy.violation(student, course)

        record = GradeRecord(student_id=student.id, course_id=course.id, semester=course.semester)
        self._grades.append(record)
        return record

    def set_grade(self, student_id: int, course_id: int, grade: Union[Grade, int]) -> GradeRecord:
        """Grade a registered student. Re-grading overwrites the previous grade.

        Raises:
            NotRegisteredError: If no registration exists for the pair.
            ValueError: If ``grade`` is not a value of the grade scale.
        """
        record = next((g for g in self._grades if g.matches(student_id, course_id)), None)
        if record is None:
            raise NotRegisteredError(
                "Student is not registered for this course.",
                details={'student_id': student_id, 'course_id': course_id}
            )

        record.assign_grade(Grade(grade))
        return record

    def update_student_status(self, student_id: int, new_status: Union[StudentStatus, str]) -> Student:
        """Change a student's status.

        An expelled student may only move to academic leave; every other
        transition is accepted as-is.

        Raises:
            InvalidReferenceError: If the student does not exist.
            ValueError: If ``new_status`` is not a student status.
            IllegalTransitionError: If the student is expelled and the new
                status is not academic leave.
        """
        student = self._find_student(student_id)
        if student is None:
            raise InvalidReferenceError("Invalid student ID.", details={'student_id': student_id})

        new_status = StudentStatus(new_status)

        if student.status == StudentStatus.EXPELLED and new_status != StudentStatus.ACADEMIC_LEAVE:
            raise IllegalTransitionError(
                "Cannot change status of an expelled student.",
                details={
                    'student_id': student_id,
                    'current_status': student.status.value,
                    'requested_status': new_status.value,
                }
            )

        student.set_status(new_status)
        return student

    # Queries

    def get_student(self, student_id: int) -> Student:
        student = self._find_student(student_id)
        if student is None:
            raise InvalidReferenceError("Invalid student ID.", details={'student_id': student_id})
        return student

    def get_course(self, course_id: int) -> Course:
        course = self._find_course(course_id)
        if course is None:
            raise InvalidReferenceError("Invalid course ID.", details={'course_id': course_id})
        return course

    def get_students(self) -> List[Student]:
        return list(self._students)

    def get_courses(self) -> List[Course]:
        return list(self._courses)

    def get_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        """Get all students of a faculty, in enrollment order."""
        return [s for s in self._students if s.faculty == faculty]

    def get_student_grades(self, student_id: int) -> List[GradeRecord]:
        """Get all grade records of a student, in registration order."""
        return [g for g in self._grades if g.student_id == student_id]

    def get_available_courses(self, faculty: Faculty, semester: Semester) -> List[Course]:
        """Get the courses a faculty offers in a semester."""
        return [c for c in self._courses if c.faculty == faculty and c.semester == semester]

    def get_course_enrollment_count(self, course_id: int) -> int:
        """Get number of students registered for a course."""
        return sum(1 for g in self._grades if g.course_id == course_id)

    def calculate_average_grade(self, student_id: int) -> float:
        """Mean of a student's recorded grades, or 0 when nothing is graded yet."""
        graded = [g.grade.value for g in self._grades if g.student_id == student_id and g.is_graded]
        if not graded:
            return 0
        return sum(graded) / len(graded)

    def get_top_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        """Get the students of a faculty whose average reaches the top-student threshold."""
        return [
            student for student in self.get_students_by_faculty(faculty)
            if self.calculate_average_grade(student.id) >= self._top_student_threshold
        ]

    def get_statistics(self) -> Dict[str, Any]:
        """Get registry statistics."""
        status_counts = Counter(s.status.value for s in self._students)
        return {
            'total_students': len(self._students),
            'total_courses': len(self._courses),
            'total_registrations': len(self._grades),
            'graded_registrations': sum(1 for g in self._grades if g.is_graded),
            'students_by_status': {status.value: status_counts.get(status.value, 0)
                                   for status in StudentStatus},
            'active_policies': len(self._policies),
        }

    def _find_student(self, student_id: int) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def _find_course(self, course_id: int) -> Optional[Course]:
        return next((c for c in self._courses if c.id == course_id), None)
