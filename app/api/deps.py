from fastapi import Depends, Header, Request

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.core.tokens import decode_access
from app.db.store import Store
from app.schemas.token import AuthContext

# ----------------------------------------------------------------------
# Store e Settings ficam em app.state (criados em create_app)
# ----------------------------------------------------------------------
def get_store(request: Request) -> Store:
    return request.app.state.store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

# ----------------------------------------------------------------------
# Lê o Bearer do header Authorization (sem usar OAuth2PasswordBearer)
# ----------------------------------------------------------------------
def get_bearer_token(authorization: str = Header(None, alias="Authorization")) -> str:
    if not authorization:
        raise Unauthorized("Authorization header is required")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthorized("Invalid Authorization header")
    return parts[1]

# ----------------------------------------------------------------------
# Identidade autenticada; as rotas recebem AuthContext explicitamente
# ----------------------------------------------------------------------
def get_auth_context(
    token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> AuthContext:
    payload = decode_access(token, settings)
    if payload is None:
        raise Unauthorized("Invalid or expired token")
    return AuthContext.from_payload(payload)
