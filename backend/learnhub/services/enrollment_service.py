"""
Enrollment Service
Creates enrollments and joins them with their courses at read time
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from learnhub.core.errors import ConflictError, StoreError, ValidationError
from learnhub.core.identifiers import ObjectIdFormat, parse_course_id
from learnhub.core.validation import is_missing
from learnhub.services.course_service import CourseRepository

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Already enrolled in this course"


class EnrollmentService:
    """
    Service for enrolling users in courses
    """

    def __init__(self, collection: Collection, courses: CourseRepository):
        self.collection = collection
        self.courses = courses

    def enroll(self, user_email: Any, course_id: Any) -> str:
        """
        Enroll a user in a course

        Args:
            user_email: Email of the enrolling user
            course_id: Identifier of an existing course

        Returns:
            Identifier of the new enrollment
        """
        if is_missing(user_email) or is_missing(course_id):
            raise ValidationError("userEmail and courseId are required")

        # Stored in canonical form so "6AD5..." and "6ad5..." are the same pair
        course_id = ObjectIdFormat.to_str(parse_course_id(course_id))
        # Raises NotFoundError("Course not found")
        self.courses.get(course_id)

        pair = {"userEmail": user_email, "courseId": course_id}
        try:
            existing = self.collection.find_one(pair)
        except PyMongoError as e:
            logger.error(f"Error checking enrollment: {str(e)}")
            raise StoreError("Failed to create enrollment", str(e)) from e

        if existing:
            logger.info(f"User {user_email} already enrolled in course {course_id}")
            raise ConflictError(DUPLICATE_MESSAGE)

        enrollment = {**pair, "enrolledAt": datetime.now(timezone.utc)}
        try:
            result = self.collection.insert_one(enrollment)
        except DuplicateKeyError as e:
            # Lost the race against a concurrent request for the same pair
            logger.info(f"Concurrent duplicate enrollment rejected for {user_email}, course {course_id}")
            raise ConflictError(DUPLICATE_MESSAGE) from e
        except PyMongoError as e:
            logger.error(f"Error creating enrollment: {str(e)}")
            raise StoreError("Failed to create enrollment", str(e)) from e

        enrollment_id = ObjectIdFormat.to_str(result.inserted_id)
        logger.info(f"Enrollment {enrollment_id} created for {user_email}, course {course_id}")
        return enrollment_id

    def list_by_user(self, user_email: Optional[str]) -> List[Dict[str, Any]]:
        """
        Enrollments of a user with their course embedded

        Enrollments whose course no longer exists are left out.
        """
        if is_missing(user_email):
            raise ValidationError("userEmail query parameter is required")

        try:
            enrollments = list(self.collection.find({"userEmail": user_email}))
        except PyMongoError as e:
            logger.error(f"Error fetching enrollments: {str(e)}")
            raise StoreError("Failed to fetch enrollments", str(e)) from e

        courses = self.courses.get_many(e.get("courseId") for e in enrollments)

        joined = []
        for enrollment in enrollments:
            course = courses.get(ObjectIdFormat.normalize(enrollment.get("courseId")))
            if course is None:
                continue
            joined.append({
                "enrollmentId": ObjectIdFormat.to_str(enrollment["_id"]),
                "userEmail": enrollment["userEmail"],
                "enrolledAt": enrollment.get("enrolledAt"),
                "course": course,
            })
        return joined
