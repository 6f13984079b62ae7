from .course_service import CourseRepository
from .enrollment_service import EnrollmentService

__all__ = ["CourseRepository", "EnrollmentService"]
