from .course import CourseCreate, CoursePayload, CourseUpdate
from .enrollment import EnrollmentCreate

__all__ = [
    "CourseCreate",
    "CoursePayload",
    "CourseUpdate",
    "EnrollmentCreate",
]
