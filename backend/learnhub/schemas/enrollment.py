from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class EnrollmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_email: Optional[Any] = Field(None, alias="userEmail")
    course_id: Optional[Any] = Field(None, alias="courseId")
