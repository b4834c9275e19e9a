from __future__ import annotations
from typing import Any
from pydantic import BaseModel, Field, ValidationError

from app.core.errors import ValidationFailed, first_issue


class LoginBody(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


def parse_login_body(body: Any) -> LoginBody:
    try:
        return LoginBody.model_validate(body if body is not None else {})
    except ValidationError as exc:
        raise ValidationFailed(first_issue(exc))


