from pydantic import Field
from app.models.base import Record


class Enrollment(Record):
    student_id: str = Field(alias="studentId")
    course_id: str = Field(alias="courseId")

    def matches(self, student_id: str, course_id: str) -> bool:
        return self.student_id == student_id and self.course_id == course_id
