# app/core/rbac.py
import logging
from fastapi import Depends
from app.api.deps import get_auth_context
from app.core.errors import Forbidden
from app.models.user import Role
from app.schemas.token import AuthContext

logger = logging.getLogger(__name__)

ROLE_ADMIN = Role.ADMIN.value
ROLE_STUDENT = Role.STUDENT.value

def require_roles(*roles: str):
    allowed = set(roles)
    def dep(auth: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if auth.role not in allowed:
            needed = "/".join(sorted(allowed))
            logger.warning("role %s denied (needs %s) user=%s", auth.role, needed, auth.username)
            raise Forbidden(f"Forbidden: {needed} role required")
        return auth
    return dep

def require_any_role(auth: AuthContext = Depends(get_auth_context)) -> AuthContext:
    if not auth.role:
        raise Forbidden("Forbidden: no role assigned")
    return auth

require_admin = require_roles(ROLE_ADMIN)
require_student = require_roles(ROLE_STUDENT)
