from enum import Enum
from typing import Optional
from pydantic import Field
from app.models.base import Record


class Role(str, Enum):
    ADMIN = "ADMIN"
    STUDENT = "STUDENT"


class User(Record):
    username: str
    password: str  # hash (passlib), nunca a senha em texto
    student_id: Optional[str] = Field(default=None, alias="studentId")
    role: str

    def to_json(self) -> dict:
        data = super().to_json()
        data.pop("password", None)
        return data
