from fastapi import Depends, Request

from learnhub.core.store import MongoStore
from learnhub.services.course_service import CourseRepository
from learnhub.services.enrollment_service import EnrollmentService


def get_store(request: Request) -> MongoStore:
    """Store connected at startup and shared by all requests"""
    return request.app.state.store


def get_course_repository(
    store: MongoStore = Depends(get_store)
) -> CourseRepository:
    return CourseRepository(store.courses)


def get_enrollment_service(
    store: MongoStore = Depends(get_store),
    courses: CourseRepository = Depends(get_course_repository),
) -> EnrollmentService:
    return EnrollmentService(store.enrollments, courses)
