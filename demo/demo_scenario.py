#!/usr/bin/env python3
"""
Demo scenario for the UMS platform.
"""

from datetime import date

from ums.main import UniversityPlatform
from ums.core.enums import StudentStatus, CourseType, Semester, Grade, Faculty
from ums.core.exceptions import UMSException
from ums.core.schemas import StudentCreate, CourseCreate


def run_demo():
    """Run a walk-through of the registry, including the refused operations."""
    print("=" * 60)
    print("UMS UNIVERSITY MANAGEMENT SYSTEM - DEMO")
    print("=" * 60)

    platform = UniversityPlatform({'seed_catalog': False, 'log_level': 'WARNING'})

    print("\n1. Creating sample data...")
    create_sample_data(platform)

    print("\n2. Demonstrating registration...")
    demonstrate_registration(platform)

    print("\n3. Demonstrating grading...")
    demonstrate_grading(platform)

    print("\n4. Demonstrating status changes...")
    demonstrate_status_changes(platform)

    print("\n5. Registry statistics...")
    show_statistics(platform)

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def create_sample_data(platform):
    """Create students and courses."""
    registry = platform.registry

    print("  Creating courses...")
    courses = [
        CourseCreate(name="Data Structures", course_type=CourseType.MANDATORY, credits=5,
                     semester=Semester.FIRST, faculty=Faculty.COMPUTER_SCIENCE, max_students=2),
        CourseCreate(name="Operating Systems", course_type=CourseType.SPECIAL, credits=4,
                     semester=Semester.SECOND, faculty=Faculty.COMPUTER_SCIENCE, max_students=30),
        CourseCreate(name="Microeconomics", course_type=CourseType.OPTIONAL, credits=3,
                     semester=Semester.SECOND, faculty=Faculty.ECONOMICS, max_students=1),
        CourseCreate(name="Constitutional Law", course_type=CourseType.MANDATORY, credits=4,
                     semester=Semester.FIRST, faculty=Faculty.LAW, max_students=20),
    ]
    for course_data in courses:
        course = registry.add_course(course_data)
        print(f"    {course.id}: {course.name} ({course.faculty.value}, {course.semester.value})")

    print("  Creating students...")
    students = [
        StudentCreate(full_name="Ivan Ivanov", faculty=Faculty.COMPUTER_SCIENCE, year=1,
                      enrollment_date=date(2023, 9, 1), group_number="CS-101"),
        StudentCreate(full_name="Maria Petrenko", faculty=Faculty.ECONOMICS, year=2,
                      enrollment_date=date(2022, 9, 1), group_number="ECO-201"),
        StudentCreate(full_name="Olena Shevchenko", faculty=Faculty.COMPUTER_SCIENCE, year=1,
                      enrollment_date=date(2023, 9, 1), group_number="CS-101"),
        StudentCreate(full_name="Taras Bondar", faculty=Faculty.COMPUTER_SCIENCE, year=3,
                      enrollment_date=date(2021, 9, 1), group_number="CS-301"),
    ]
    for student_data in students:
        student = registry.enroll_student(student_data)
        print(f"    {student.id}: {student.full_name} ({student.faculty.value}, {student.group_number})")

    print("  ✓ Sample data created successfully")


def attempt(description, operation, *args):
    """Run a registry operation and report its outcome."""
    try:
        operation(*args)
        print(f"    {description}: ok")
    except UMSException as e:
        print(f"    {description}: refused [{e.error_code}] {e.message}")


def demonstrate_registration(platform):
    registry = platform.registry

    attempt("Ivan -> Data Structures", registry.register_for_course, 1, 1)
    attempt("Olena -> Data Structures", registry.register_for_course, 3, 1)
    attempt("Taras -> Data Structures (full)", registry.register_for_course, 4, 1)
    attempt("Ivan -> Data Structures (again)", registry.register_for_course, 1, 1)
    attempt("Ivan -> Microeconomics (other faculty)", registry.register_for_course, 1, 3)
    attempt("Maria -> Microeconomics", registry.register_for_course, 2, 3)
    attempt("Taras -> Operating Systems", registry.register_for_course, 4, 2)
    attempt("Unknown student -> Operating Systems", registry.register_for_course, 99, 2)

    for course in registry.get_courses():
        count = registry.get_course_enrollment_count(course.id)
        print(f"    {course.name}: {count}/{course.max_students}")


def demonstrate_grading(platform):
    registry = platform.registry

    attempt("Ivan: Data Structures = Excellent", registry.set_grade, 1, 1, Grade.EXCELLENT)
    attempt("Olena: Data Structures = Satisfactory", registry.set_grade, 3, 1, Grade.SATISFACTORY)
    attempt("Maria: Microeconomics = Good", registry.set_grade, 2, 3, Grade.GOOD)
    attempt("Taras: Operating Systems = Good", registry.set_grade, 4, 2, Grade.GOOD)
    attempt("Taras: Data Structures (not registered)", registry.set_grade, 4, 1, Grade.GOOD)

    for student in registry.get_students():
        print(f"    {student.full_name}: average {registry.calculate_average_grade(student.id):.2f}")

    for faculty in Faculty:
        top = registry.get_top_students_by_faculty(faculty)
        print(f"    Top students in {faculty.value}: {[s.full_name for s in top]}")


def demonstrate_status_changes(platform):
    registry = platform.registry

    attempt("Ivan -> Graduated", registry.update_student_status, 1, StudentStatus.GRADUATED)
    attempt("Taras -> Expelled", registry.update_student_status, 4, StudentStatus.EXPELLED)
    attempt("Taras -> Active", registry.update_student_status, 4, StudentStatus.ACTIVE)
    attempt("Taras -> Academic leave", registry.update_student_status, 4, StudentStatus.ACADEMIC_LEAVE)


def show_statistics(platform):
    stats = platform.registry.get_statistics()
    print(f"    Students: {stats['total_students']}")
    print(f"    Courses: {stats['total_courses']}")
    print(f"    Registrations: {stats['total_registrations']} ({stats['graded_registrations']} graded)")
    for status, count in stats['students_by_status'].items():
        print(f"      {status}: {count}")


if __name__ == "__main__":
    run_demo()
