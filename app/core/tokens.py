# app/core/tokens.py
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from app.core.config import Settings, settings as default_settings

def _now() -> datetime:
    return datetime.now(timezone.utc)

def _exp(minutes: int) -> datetime:
    return _now() + timedelta(minutes=minutes)

def create_access_token(
    *,
    sub: str,
    student_id: Optional[str],
    role: str,
    settings: Settings = default_settings,
) -> str:
    """Access token assinado com SECRET_KEY; carrega studentId e role do usuário."""
    payload: Dict[str, Any] = {
        "type": "access",
        "sub": sub,
        "studentId": student_id,
        "role": role,
        "jti": uuid.uuid4().hex,
        "iat": int(_now().timestamp()),
        "exp": int(_exp(settings.ACCESS_TOKEN_EXPIRE_MINUTES).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access(token: str, settings: Settings = default_settings) -> Optional[Dict[str, Any]]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if not isinstance(payload, dict):
        return None
    if payload.get("type") != "access":
        return None
    if not payload.get("sub") or not payload.get("role"):
        return None
    return payload
