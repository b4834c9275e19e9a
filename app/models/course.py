from typing import List
from pydantic import Field
from app.models.base import Record


class Course(Record):
    course_id: str = Field(alias="courseId")
    course_title: str = Field(alias="courseTitle")
    instructors: List[str] = Field(default_factory=list)
