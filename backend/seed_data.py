#!/usr/bin/env python3
"""
Sample Data Seeder
Creates demo courses and enrollments for local development
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from learnhub.core.errors import AppError, ConflictError
from learnhub.core.store import MongoStore
from learnhub.services.course_service import CourseRepository
from learnhub.services.enrollment_service import EnrollmentService


SAMPLE_INSTRUCTOR = {
    "instructorName": "Dr. Sarah Johnson",
    "instructorEmail": "sarah.johnson@example.com",
    "instructorPhoto": "https://example.com/instructors/sarah.jpg",
}

SAMPLE_COURSES = [
    {
        "title": "Introduction to Python Programming",
        "image": "https://example.com/courses/python.jpg",
        "price": 49.99,
        "duration": "6 weeks",
        "category": "Development",
        "description": "Learn Python from scratch with hands-on projects. Perfect for beginners!",
        "isFeatured": True,
        **SAMPLE_INSTRUCTOR,
    },
    {
        "title": "Web Development with React",
        "image": "https://example.com/courses/react.jpg",
        "price": 79.99,
        "duration": "8 weeks",
        "category": "Development",
        "description": "Build modern web applications with React.js and hooks.",
        **SAMPLE_INSTRUCTOR,
    },
    {
        "title": "Data Science Fundamentals",
        "image": "https://example.com/courses/data-science.jpg",
        "price": 99.0,
        "duration": "10 weeks",
        "category": "Data Science",
        "description": "Master data analysis, visualization, and machine learning basics.",
        **SAMPLE_INSTRUCTOR,
    },
]

SAMPLE_STUDENTS = ["student1@example.com", "student2@example.com"]


def create_sample_courses(courses: CourseRepository) -> list:
    """Create sample courses, skipping titles that already exist"""
    print("\n📚 Creating sample courses...")

    existing = {course.get("title"): str(course["_id"]) for course in courses.list()}
    course_ids = []

    for course_data in SAMPLE_COURSES:
        if course_data["title"] in existing:
            print(f"   ⚠️  Course {course_data['title']} already exists")
            course_ids.append(existing[course_data["title"]])
            continue
        try:
            course_ids.append(courses.create(dict(course_data)))
            print(f"   ✅ Created course: {course_data['title']}")
        except AppError as e:
            print(f"   ❌ Error creating course {course_data['title']}: {e.message}")

    return course_ids


def enroll_students(enrollments: EnrollmentService, course_ids: list) -> int:
    """Enroll each sample student in the first two courses"""
    print("\n🎓 Enrolling students...")

    created = 0
    for email in SAMPLE_STUDENTS:
        for course_id in course_ids[:2]:
            try:
                enrollments.enroll(email, course_id)
                created += 1
                print(f"   ✅ Enrolled {email} in course {course_id}")
            except ConflictError:
                print(f"   ⚠️  {email} already enrolled in course {course_id}")
    return created


def seed(store: MongoStore) -> dict:
    courses = CourseRepository(store.courses)
    enrollments = EnrollmentService(store.enrollments, courses)

    course_ids = create_sample_courses(courses)
    enrolled = enroll_students(enrollments, course_ids)
    return {"courses": course_ids, "enrollments": enrolled}


def main():
    """Main seeding function"""
    print("="*60)
    print("🌱 Online Learning Platform - Sample Data Seeder")
    print("="*60)

    print("\n⚠️  WARNING: This will create sample data in your database.")
    response = input("Continue? (y/N): ")

    if response.lower() != 'y':
        print("❌ Seeding cancelled")
        return

    store = MongoStore()
    try:
        store.connect()
        result = seed(store)
    except AppError as e:
        print(f"\n❌ Error during seeding: {e.message} ({e.error})")
        sys.exit(1)
    finally:
        store.close()

    print("\n" + "="*60)
    print(f"✅ Seeded {len(result['courses'])} courses, {result['enrollments']} new enrollments")
    print("="*60)
    print("\n🚀 Start the server with: python run.py")


if __name__ == "__main__":
    main()
