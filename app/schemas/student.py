from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.core.errors import ValidationFailed, first_issue

STUDENT_ID_RE = re.compile(r"^[0-9]{9}$")


class StudentIdParam(BaseModel):
    student_id: str

    @field_validator("student_id")
    @classmethod
    def _valida_student_id(cls, v: str) -> str:
        if not STUDENT_ID_RE.fullmatch(v):
            raise PydanticCustomError("student_id", "Student Id must contain exactly 9 digits")
        return v


def parse_student_id(value: str) -> str:
    """Valida o path param; ValidationFailed com a primeira mensagem em caso de erro."""
    try:
        return StudentIdParam(student_id=value).student_id
    except ValidationError as exc:
        raise ValidationFailed(first_issue(exc))


class CourseRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_id: str = Field(alias="courseId")


class StudentSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(alias="studentId")
    courses: List[CourseRef] = Field(default_factory=list)
