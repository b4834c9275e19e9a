from __future__ import annotations

import re

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.core.errors import ValidationFailed, first_issue

COURSE_ID_RE = re.compile(r"^[0-9]{6}$")


def check_course_id(v: str) -> str:
    if not COURSE_ID_RE.fullmatch(v):
        raise PydanticCustomError("course_id", "Course Id must contain exactly 6 digits")
    return v


class CourseIdParam(BaseModel):
    course_id: str

    @field_validator("course_id")
    @classmethod
    def _valida_course_id(cls, v: str) -> str:
        return check_course_id(v)


def parse_course_id(value: str) -> str:
    try:
        return CourseIdParam(course_id=value).course_id
    except ValidationError as exc:
        raise ValidationFailed(first_issue(exc))
