"""
Core module containing the object model, payload schemas and errors.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .schemas import *

__all__ = [
    # Entities
    "Student",
    "Course",
    "GradeRecord",

    # Schemas
    "StudentCreate",
    "CourseCreate",
    "RegistryConfig",

    # Interfaces
    "RegistrationPolicy",

    # Enums
    "StudentStatus",
    "CourseType",
    "Semester",
    "Grade",
    "Faculty",
    "TOP_STUDENT_THRESHOLD",

    # Exceptions
    "UMSException",
    "InvalidReferenceError",
    "RegistrationError",
    "FacultyMismatchError",
    "CourseFullError",
    "DuplicateRegistrationError",
    "NotRegisteredError",
    "IllegalTransitionError",
    "ConfigurationError",
]
