"""
Shared fixtures for UMS tests.
"""

import pytest

from ums.services.registry import Registry


@pytest.fixture
def registry():
    """Fresh registry with default policies."""
    return Registry()


@pytest.fixture
def permissive_registry():
    """Registry that allows registering the same student twice for a course."""
    return Registry(reject_duplicate_registrations=False)
