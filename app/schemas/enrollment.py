from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.errors import ValidationFailed, first_issue
from app.schemas.course import check_course_id


class EnrollmentBody(BaseModel):
    """Corpo de POST/DELETE /students/{studentId}: {"courseId": "261207"}."""

    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId")

    @field_validator("course_id")
    @classmethod
    def _valida_course_id(cls, v: str) -> str:
        return check_course_id(v)


def parse_enrollment_body(body: Any) -> EnrollmentBody:
    try:
        return EnrollmentBody.model_validate(body if body is not None else {})
    except ValidationError as exc:
        raise ValidationFailed(first_issue(exc))
