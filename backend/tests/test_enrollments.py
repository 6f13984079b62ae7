"""
Tests for the enrollment service and enrollment endpoints
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock, patch
from bson import ObjectId
from fastapi import status
from pymongo.errors import DuplicateKeyError

from learnhub.core.errors import ConflictError
from learnhub.services.course_service import CourseRepository
from learnhub.services.enrollment_service import EnrollmentService


class TestEnroll:
    """Tests for POST /enrollments"""

    def test_enroll_in_course(self, client, store, course_id, user_email):
        response = client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Enrolled successfully"

        stored = store.enrollments.find_one({"_id": ObjectId(data["enrollmentId"])})
        assert stored["userEmail"] == user_email
        assert stored["courseId"] == course_id
        assert stored["enrolledAt"] is not None

    @pytest.mark.parametrize("payload", [
        {},
        {"userEmail": "testuser@example.com"},
        {"courseId": "507f1f77bcf86cd799439011"},
        {"userEmail": "", "courseId": "507f1f77bcf86cd799439011"},
    ])
    def test_missing_fields(self, client, store, payload):
        response = client.post("/enrollments", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "success": False,
            "message": "userEmail and courseId are required",
        }
        assert store.enrollments.count_documents({}) == 0

    def test_malformed_course_id(self, client, user_email):
        response = client.post("/enrollments", json={"userEmail": user_email, "courseId": "not-an-id"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid course ID format"

    def test_unknown_course(self, client, store, user_email):
        response = client.post("/enrollments", json={"userEmail": user_email, "courseId": str(ObjectId())})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "message": "Course not found"}
        assert store.enrollments.count_documents({}) == 0

    def test_duplicate_enrollment(self, client, store, course_id, user_email):
        payload = {"userEmail": user_email, "courseId": course_id}
        first = client.post("/enrollments", json=payload)
        assert first.status_code == status.HTTP_201_CREATED

        second = client.post("/enrollments", json=payload)

        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json() == {"success": False, "message": "Already enrolled in this course"}
        assert store.enrollments.count_documents({}) == 1

    @pytest.mark.parametrize("payload", [
        {"userEmail": "   ", "courseId": "507f1f77bcf86cd799439011"},
        {"userEmail": "testuser@example.com", "courseId": "  "},
    ])
    def test_blank_fields(self, client, store, payload):
        response = client.post("/enrollments", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "userEmail and courseId are required"
        assert store.enrollments.count_documents({}) == 0

    def test_non_string_course_id(self, client, user_email):
        response = client.post("/enrollments", json={"userEmail": user_email, "courseId": 12345})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Invalid course ID format"

    def test_uppercase_course_id_is_same_course(self, client, store, course_id, user_email):
        first = client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id.upper()})
        assert first.status_code == status.HTTP_201_CREATED

        second = client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})

        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["message"] == "Already enrolled in this course"
        assert store.enrollments.count_documents({}) == 1
        assert store.enrollments.find_one()["courseId"] == course_id

    def test_same_user_other_course(self, client, create_course, user_email):
        for course_id in (create_course(), create_course(title="Second")):
            response = client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})
            assert response.status_code == status.HTTP_201_CREATED


class TestListEnrollments:
    """Tests for GET /enrollments"""

    def test_user_email_is_required(self, client):
        response = client.get("/enrollments")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "success": False,
            "message": "userEmail query parameter is required",
        }

    def test_joined_view(self, client, course_id, course_payload, user_email):
        enrollment_id = client.post(
            "/enrollments", json={"userEmail": user_email, "courseId": course_id}
        ).json()["enrollmentId"]

        response = client.get("/enrollments", params={"userEmail": user_email})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["count"] == 1
        item = data["data"][0]
        assert item["enrollmentId"] == enrollment_id
        assert item["userEmail"] == user_email
        assert isinstance(item["enrolledAt"], str)
        assert item["course"] == {**course_payload, "_id": course_id, "isFeatured": False}

    def test_only_exact_user_email(self, client, course_id, user_email):
        client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})
        client.post("/enrollments", json={"userEmail": "other@example.com", "courseId": course_id})
        client.post("/enrollments", json={"userEmail": user_email.upper(), "courseId": course_id})

        response = client.get("/enrollments", params={"userEmail": user_email})

        data = response.json()
        assert data["count"] == 1
        assert all(item["userEmail"] == user_email for item in data["data"])

    def test_deleted_course_is_dropped(self, client, create_course, user_email):
        kept = create_course(title="Kept")
        removed = create_course(title="Removed")
        for course_id in (kept, removed):
            client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})
        client.delete(f"/courses/{removed}")

        response = client.get("/enrollments", params={"userEmail": user_email})

        data = response.json()
        assert data["count"] == 1
        assert data["data"][0]["course"]["_id"] == kept

    def test_blank_user_email(self, client):
        response = client.get("/enrollments", params={"userEmail": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "userEmail query parameter is required"

    def test_enrolled_at_carries_utc_offset(self, client, course_id, user_email):
        client.post("/enrollments", json={"userEmail": user_email, "courseId": course_id})

        item = client.get("/enrollments", params={"userEmail": user_email}).json()["data"][0]

        assert item["enrolledAt"].endswith("+00:00")

    def test_uppercase_course_id_in_stored_enrollment(self, client, store, course_id, user_email):
        # Enrollment written before ids were stored in canonical form
        store.enrollments.insert_one({
            "userEmail": user_email,
            "courseId": course_id.upper(),
            "enrolledAt": datetime(2024, 1, 15, 10, 0, 0),
        })

        response = client.get("/enrollments", params={"userEmail": user_email})

        data = response.json()
        assert data["count"] == 1
        assert data["data"][0]["course"]["_id"] == course_id

    def test_no_enrollments(self, client):
        response = client.get("/enrollments", params={"userEmail": "nobody@example.com"})

        assert response.json() == {"success": True, "count": 0, "data": []}


class TestEnrollmentService:
    """Unit tests for EnrollmentService"""

    def test_courses_are_fetched_in_one_batch(self, store, create_course, user_email):
        courses = CourseRepository(store.courses)
        service = EnrollmentService(store.enrollments, courses)
        for title in ("A", "B", "C"):
            service.enroll(user_email, create_course(title=title))

        with patch.object(courses, "get_many", wraps=courses.get_many) as get_many:
            result = service.list_by_user(user_email)

        assert len(result) == 3
        get_many.assert_called_once()

    def test_unique_index_is_created(self, store):
        indexes = store.enrollments.index_information()

        assert indexes["userEmail_courseId_unique"]["unique"] is True

    def test_concurrent_duplicate_is_rejected_by_store(self, store, course_id, user_email):
        # Both requests passed the existence check; the unique index rejects the second insert
        enrollments = MagicMock()
        enrollments.find_one.return_value = None
        enrollments.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
        service = EnrollmentService(enrollments, CourseRepository(store.courses))

        with pytest.raises(ConflictError) as exc_info:
            service.enroll(user_email, course_id)

        assert exc_info.value.message == "Already enrolled in this course"
