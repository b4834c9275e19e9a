# app/schemas/token.py
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthContext(BaseModel):
    """Identidade autenticada extraída do access token e passada às rotas."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str = Field(alias="sub")
    student_id: Optional[str] = Field(default=None, alias="studentId")
    role: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AuthContext":
        return cls.model_validate(payload)
