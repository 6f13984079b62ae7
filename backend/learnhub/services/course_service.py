"""
Course Repository
CRUD operations over the ``courses`` collection
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from learnhub.core.errors import NotFoundError, StoreError, ValidationError
from learnhub.core.identifiers import ObjectIdFormat, parse_course_id
from learnhub.core.validation import is_missing

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "price", "category")
IMMUTABLE_FIELDS = ("_id", "id")


def _strip_identifier(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k not in IMMUTABLE_FIELDS}


class CourseRepository:
    """
    Repository for course records
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def create(self, record: Dict[str, Any]) -> str:
        """
        Persist a new course

        Args:
            record: Course fields, wire names

        Returns:
            The identifier assigned by the store
        """
        course = _strip_identifier(record)
        if any(is_missing(course.get(field)) for field in REQUIRED_FIELDS):
            raise ValidationError("Title, price, and category are required")

        if course.get("isFeatured") is None:
            course["isFeatured"] = False

        try:
            result = self.collection.insert_one(course)
        except PyMongoError as e:
            logger.error(f"Error creating course: {str(e)}")
            raise StoreError("Failed to create course", str(e)) from e

        course_id = ObjectIdFormat.to_str(result.inserted_id)
        logger.info(f"Course {course_id} created")
        return course_id

    def list(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        query = {"category": category} if category else {}
        try:
            return list(self.collection.find(query))
        except PyMongoError as e:
            logger.error(f"Error fetching courses: {str(e)}")
            raise StoreError("Failed to fetch courses", str(e)) from e

    def get(self, course_id: str) -> Dict[str, Any]:
        key = parse_course_id(course_id)
        try:
            course = self.collection.find_one({"_id": key})
        except PyMongoError as e:
            logger.error(f"Error fetching course {course_id}: {str(e)}")
            raise StoreError("Failed to fetch course", str(e)) from e

        if not course:
            raise NotFoundError("Course not found")
        return course

    def get_many(self, course_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        """
        Fetch several courses in one query

        Malformed identifiers are skipped rather than rejected.

        Returns:
            Mapping of identifier string to course document, only for
            courses that exist
        """
        keys = {ObjectIdFormat.parse(cid) for cid in set(course_ids) if ObjectIdFormat.is_valid(cid)}
        if not keys:
            return {}

        try:
            courses = self.collection.find({"_id": {"$in": list(keys)}})
            return {ObjectIdFormat.to_str(course["_id"]): course for course in courses}
        except PyMongoError as e:
            logger.error(f"Error fetching courses by id: {str(e)}")
            raise StoreError("Failed to fetch courses", str(e)) from e

    def update(self, course_id: str, changes: Dict[str, Any]) -> int:
        """
        Replace the given fields of a course, leaving the rest untouched

        Returns:
            Number of modified documents (0 when the values were unchanged)
        """
        key = parse_course_id(course_id)
        changes = _strip_identifier(changes)

        if not changes:
            # Nothing to $set, only confirm the course exists
            self.get(course_id)
            return 0

        try:
            result = self.collection.update_one({"_id": key}, {"$set": changes})
        except PyMongoError as e:
            logger.error(f"Error updating course {course_id}: {str(e)}")
            raise StoreError("Failed to update course", str(e)) from e

        if result.matched_count == 0:
            raise NotFoundError("Course not found")

        logger.info(f"Course {course_id} updated, modified={result.modified_count}")
        return result.modified_count

    def delete(self, course_id: str) -> None:
        key = parse_course_id(course_id)
        try:
            result = self.collection.delete_one({"_id": key})
        except PyMongoError as e:
            logger.error(f"Error deleting course {course_id}: {str(e)}")
            raise StoreError("Failed to delete course", str(e)) from e

        if result.deleted_count == 0:
            raise NotFoundError("Course not found")
        logger.info(f"Course {course_id} deleted")
