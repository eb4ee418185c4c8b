"""
Main entry point for the UMS platform.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .core.enums import StudentStatus, CourseType, Semester, Grade, Faculty
from .core.exceptions import UMSException, ConfigurationError
from .core.schemas import StudentCreate, CourseCreate, RegistryConfig
from .services import Registry

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Course catalog of the demonstration run.
DEMO_CATALOG = [
    CourseCreate(
        name="Data Structures",
        course_type=CourseType.MANDATORY,
        credits=5,
        semester=Semester.FIRST,
        faculty=Faculty.COMPUTER_SCIENCE,
        max_students=2,
    ),
    CourseCreate(
        name="Microeconomics",
        course_type=CourseType.OPTIONAL,
        credits=3,
        semester=Semester.SECOND,
        faculty=Faculty.ECONOMICS,
        max_students=1,
    ),
]


class UniversityPlatform:
    """Platform class that configures logging and owns a Registry."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        try:
            self._config = RegistryConfig.model_validate(config or {})
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid platform configuration.",
                details={'errors': e.errors(include_url=False)}
            ) from e

        self._registry: Optional[Registry] = None

        # Initialize platform
        self._initialize_platform()

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def registry(self) -> Registry:
        return self._registry

    def _initialize_platform(self):
        """Initialize logging and the registry."""
        logging.basicConfig(level=self._config.log_level, format=LOG_FORMAT)
        logger.info("Initializing UMS platform...")

        self._registry = Registry(
            reject_duplicate_registrations=self._config.reject_duplicate_registrations,
            top_student_threshold=self._config.top_student_threshold,
        )
        logger.info("Registry initialized with policies: %s", ", ".join(self._registry.get_policy_names()))

        if self._config.seed_catalog:
            self.create_sample_data()

        logger.info("UMS platform initialized successfully")

    def create_sample_data(self):
        """Seed the course catalog used by the demonstration."""
        for course_data in DEMO_CATALOG:
            course = self._registry.add_course(course_data)
            logger.debug("Added course %s", course)
        logger.info("Course catalog seeded with %d courses", len(DEMO_CATALOG))

    def run_demo(self) -> Dict[str, Any]:
        """Run the demonstration workflow and return its summary."""
        logger.info("Running UMS platform demonstration...")
        registry = self._registry

        student1 = registry.enroll_student(StudentCreate(
            full_name="Ivan Ivanov",
            faculty=Faculty.COMPUTER_SCIENCE,
            year=1,
            status=StudentStatus.ACTIVE,
            enrollment_date=date(2023, 9, 1),
            group_number="CS-101",
        ))
        student2 = registry.enroll_student(StudentCreate(
            full_name="Maria Petrenko",
            faculty=Faculty.ECONOMICS,
            year=2,
            status=StudentStatus.ACTIVE,
            enrollment_date=date(2022, 9, 1),
            group_number="ECO-201",
        ))
        logger.info("Students enrolled: %s", registry.get_students_by_faculty(Faculty.COMPUTER_SCIENCE))

        available = registry.get_available_courses(Faculty.COMPUTER_SCIENCE, Semester.FIRST)
        logger.info("Available courses for CS faculty: %s", available)
        if len(registry.get_courses()) < 2:
            logger.warning("Demo catalog is not seeded, skipping registration and grading")
            return self._demo_summary(student1.id, student2.id)

        course1, course2 = registry.get_courses()[:2]

        try:
            registry.register_for_course(student1.id, course1.id)
            registry.register_for_course(student2.id, course2.id)
            logger.info("Registration successful!")
        except UMSException as e:
            logger.warning("Registration failed: %s (%s)", e.message, e.error_code)

        try:
            registry.set_grade(student1.id, course1.id, Grade.EXCELLENT)
            registry.set_grade(student2.id, course2.id, Grade.GOOD)
            logger.info("Grades set successfully!")
        except UMSException as e:
            logger.warning("Grading failed: %s (%s)", e.message, e.error_code)

        logger.info("Student 1 grades: %s", registry.get_student_grades(student1.id))
        logger.info("Student 2 grades: %s", registry.get_student_grades(student2.id))

        try:
            registry.update_student_status(student1.id, StudentStatus.GRADUATED)
            logger.info("Student %s status updated to Graduated.", student1.full_name)
        except UMSException as e:
            logger.warning("Status update failed: %s (%s)", e.message, e.error_code)

        summary = self._demo_summary(student1.id, student2.id)
        logger.info("Demo completed: %s", json.dumps(summary))
        return summary

    def _demo_summary(self, *student_ids: int) -> Dict[str, Any]:
        registry = self._registry
        return {
            'average_grades': {
                student_id: registry.calculate_average_grade(student_id) for student_id in student_ids
            },
            'top_students': {
                faculty.value: [s.id for s in registry.get_top_students_by_faculty(faculty)]
                for faculty in (Faculty.COMPUTER_SCIENCE, Faculty.ECONOMICS)
            },
            'statistics': registry.get_statistics(),
        }


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="UMS University Management System demo")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")

    args = parser.parse_args()

    # Load configuration
    config = {}
    if args.config:
        with open(args.config, 'r') as f:
            config = json.load(f)
    if args.log_level:
        config['log_level'] = args.log_level.upper()

    platform = UniversityPlatform(config)
    platform.run_demo()


if __name__ == "__main__":
    main()
