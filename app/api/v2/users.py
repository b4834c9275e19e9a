# app/api/v2/users.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from app.api.deps import get_settings, get_store
from app.core.config import Settings
from app.core.errors import Unauthorized
from app.core.security_password import check_password
from app.core.tokens import create_access_token
from app.crud.user import user_crud
from app.db.store import Store
from app.schemas.response import envelope
from app.schemas.user import parse_login_body

logger = logging.getLogger(__name__)

router = APIRouter()

def normalize_username(username: str) -> str:
    return (username or "").strip().lower()

@router.post("/login")
def login(
    body: Optional[Dict[str, Any]] = Body(None),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    creds = parse_login_body(body)
    username = normalize_username(creds.username)

    user = user_crud.get(store, username)
    if not user:
        raise Unauthorized("Invalid username or password")
    # argon2 fora do lock: o hash não pode travar as outras rotas
    ok, new_hash = check_password(creds.password, user.password)
    if not ok:
        logger.warning("failed login for %s", username)
        raise Unauthorized("Invalid username or password")
    if new_hash:
        with store.lock:
            user.password = new_hash

    token = create_access_token(
        sub=user.username, student_id=user.student_id, role=user.role, settings=settings
    )
    logger.info("user %s logged in", username)
    return envelope("Login successfully", token=token)
