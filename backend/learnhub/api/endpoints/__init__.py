"""API endpoints package."""

from . import (
    courses,
    enrollments,
)

__all__ = [
    "courses",
    "enrollments",
]
