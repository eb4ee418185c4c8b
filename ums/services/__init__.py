"""
Services module containing the registry and its registration policies.
"""

from .registry import Registry
from .registration_policies import FacultyMatchPolicy, DuplicateRegistrationPolicy, CapacityPolicy

__all__ = [
    "Registry",
    "FacultyMatchPolicy",
    "DuplicateRegistrationPolicy",
    "CapacityPolicy",
]
