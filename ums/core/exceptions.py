"""
Custom exceptions for the UMS registry.
"""

from typing import Optional, Any, Dict


class UMSException(Exception):
    """Base exception for all UMS-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class InvalidReferenceError(UMSException):
    """Raised when a student or course id does not exist."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_REFERENCE", details)


class RegistrationError(UMSException):
    """Raised when a student cannot be registered for a course."""
    pass


class FacultyMismatchError(RegistrationError):
    """Raised when student and course belong to different faculties."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "FACULTY_MISMATCH", details)


class CourseFullError(RegistrationError):
    """Raised when a course has reached its capacity."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "COURSE_FULL", details)


class DuplicateRegistrationError(RegistrationError):
    """Raised when a student is already registered for a course."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "DUPLICATE_REGISTRATION", details)


class NotRegisteredError(UMSException):
    """Raised when grading a student who is not registered for the course."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "NOT_REGISTERED", details)


class IllegalTransitionError(UMSException):
    """Raised when a student status change is not allowed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "ILLEGAL_TRANSITION", details)


class ConfigurationError(UMSException):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)
