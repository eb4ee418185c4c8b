"""
Core interfaces and abstract base classes for the UMS registry.
"""

from abc import ABC, abstractmethod
from typing import List

from .entities import Student, Course, GradeRecord
from .exceptions import RegistrationError


class RegistrationPolicy(ABC):
    """Abstract base class for course registration policies."""

    @abstractmethod
    def can_register(self, student: Student, course: Course, records: List[GradeRecord]) -> bool:
        """Check if a student can be registered for a course given existing records."""
        pass

    @abstractmethod
    def violation(self, student: Student, course: Course) -> RegistrationError:
        """Build the error raised when this policy refuses a registration."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Get the name of this policy."""
        pass
