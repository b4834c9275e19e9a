from typing import List
from pydantic import Field
from app.models.base import Record


class Student(Record):
    student_id: str = Field(alias="studentId")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    program: str
    courses: List[str] = Field(default_factory=list)
