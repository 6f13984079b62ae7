from fastapi import APIRouter, Body, Depends, status
from typing import Optional

from learnhub.core.responses import serialize_document
from learnhub.dependencies import get_course_repository
from learnhub.schemas.course import CourseCreate, CourseUpdate
from learnhub.services.course_service import CourseRepository

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_course(
    course_data: CourseCreate = Body(...),
    courses: CourseRepository = Depends(get_course_repository)
):
    """Create a new course"""
    course_id = courses.create(course_data.to_document())
    return {
        "success": True,
        "message": "Course created successfully",
        "courseId": course_id,
    }


@router.get("")
def list_courses(
    category: Optional[str] = None,
    courses: CourseRepository = Depends(get_course_repository)
):
    """List all courses, optionally filtered by category"""
    result = courses.list(category)
    return {
        "success": True,
        "count": len(result),
        "data": [serialize_document(course) for course in result],
    }


@router.get("/{course_id}")
def get_course(
    course_id: str,
    courses: CourseRepository = Depends(get_course_repository)
):
    course = courses.get(course_id)
    return {"success": True, "data": serialize_document(course)}


@router.put("/{course_id}")
def update_course(
    course_id: str,
    course_data: CourseUpdate = Body(...),
    courses: CourseRepository = Depends(get_course_repository)
):
    """Partially update a course; omitted fields keep their values"""
    modified_count = courses.update(course_id, course_data.to_document())
    return {
        "success": True,
        "message": "Course updated successfully",
        "modifiedCount": modified_count,
    }


@router.delete("/{course_id}")
def delete_course(
    course_id: str,
    courses: CourseRepository = Depends(get_course_repository)
):
    courses.delete(course_id)
    return {"success": True, "message": "Course deleted successfully"}
