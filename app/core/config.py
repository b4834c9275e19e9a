# app/core/config.py
import os
from typing import List
from pydantic import BaseModel, Field

def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]

class Settings(BaseModel):
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = Field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # POST /api/v2/students/reset is anonymous unless this is set
    RESET_REQUIRES_ADMIN: bool = Field(default_factory=lambda: _env_bool("RESET_REQUIRES_ADMIN"))
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

settings = Settings()
