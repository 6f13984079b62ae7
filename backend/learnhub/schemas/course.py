from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class CoursePayload(BaseModel):
    """
    Course fields as sent by clients.

    Values are untyped and stored exactly as received; only presence is
    checked, by the repository. Unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: Optional[Any] = None
    image: Optional[Any] = None
    price: Optional[Any] = None
    duration: Optional[Any] = None
    category: Optional[Any] = None
    description: Optional[Any] = None
    is_featured: Optional[Any] = Field(None, alias="isFeatured")
    instructor_name: Optional[Any] = Field(None, alias="instructorName")
    instructor_email: Optional[Any] = Field(None, alias="instructorEmail")
    instructor_photo: Optional[Any] = Field(None, alias="instructorPhoto")

    def to_document(self) -> dict:
        """Only the fields the client actually sent, with wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class CourseCreate(CoursePayload):
    pass


class CourseUpdate(CoursePayload):
    pass
