from fastapi import APIRouter, Body, Depends, Query, status
from typing import Optional

from learnhub.core.responses import serialize_document
from learnhub.dependencies import get_enrollment_service
from learnhub.schemas.enrollment import EnrollmentCreate
from learnhub.services.enrollment_service import EnrollmentService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def enroll_in_course(
    enrollment_data: EnrollmentCreate = Body(...),
    enrollments: EnrollmentService = Depends(get_enrollment_service)
):
    """Enroll a user in a course"""
    enrollment_id = enrollments.enroll(
        enrollment_data.user_email,
        enrollment_data.course_id,
    )
    return {
        "success": True,
        "message": "Enrolled successfully",
        "enrollmentId": enrollment_id,
    }


@router.get("")
def get_user_enrollments(
    user_email: Optional[str] = Query(None, alias="userEmail"),
    enrollments: EnrollmentService = Depends(get_enrollment_service)
):
    """Get a user's enrollments with the enrolled course embedded"""
    result = enrollments.list_by_user(user_email)
    return {
        "success": True,
        "count": len(result),
        "data": [serialize_document(item) for item in result],
    }
