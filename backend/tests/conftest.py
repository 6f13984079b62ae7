"""
Pytest configuration and fixtures for backend tests
"""

import mongomock
import pytest
from starlette.testclient import TestClient

from learnhub.core.store import MongoStore
from learnhub.main import get_application


@pytest.fixture
def store():
    """Connected store backed by an in-memory MongoDB"""
    mongo_store = MongoStore(
        uri="mongodb://localhost:27017",
        db_name="learnhub_test",
        client=mongomock.MongoClient(),
    )
    mongo_store.connect()
    yield mongo_store
    mongo_store.close()


@pytest.fixture
def app(store):
    return get_application(store)


@pytest.fixture
def client(app):
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def course_payload():
    """Complete course as sent by a client"""
    return {
        "title": "Python Basics",
        "image": "https://example.com/thumbnail.jpg",
        "price": 99.99,
        "duration": "10 hours",
        "category": "Development",
        "description": "Learn Python programming from scratch",
        "instructorName": "Test Instructor",
        "instructorEmail": "instructor@example.com",
        "instructorPhoto": "https://example.com/instructor.jpg",
    }


@pytest.fixture
def create_course(client, course_payload):
    """Factory posting a course and returning its id"""
    def _create(**overrides):
        response = client.post("/courses", json={**course_payload, **overrides})
        assert response.status_code == 201
        return response.json()["courseId"]
    return _create


@pytest.fixture
def course_id(create_course):
    return create_course()


@pytest.fixture
def user_email():
    return "testuser@example.com"
