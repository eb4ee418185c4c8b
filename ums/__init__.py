"""
UMS: An in-memory University Management System

A small record-management library for a university's administrative data:
students, courses, course registrations and grades, with enrollment rules
and simple academic statistics.
"""

__version__ = "1.0.0"
__author__ = "UMS Development Team"
__description__ = "In-memory University Management System"
