# app/core/security_password.py
from __future__ import annotations
from typing import Optional, Tuple
from passlib.context import CryptContext

# argon2id com custo baixo: os usuários seed são re-hasheados a cada reset
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__time_cost=2,
    argon2__memory_cost=19456,
    argon2__parallelism=1,
)

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)

def check_password(plain: str, stored_hash: str) -> Tuple[bool, Optional[str]]:
    """
    Retorna (ok, novo_hash). novo_hash só vem preenchido quando o hash
    guardado usa parâmetros antigos e deve ser substituído no registro.
    """
    ok, new_hash = pwd_context.verify_and_update(plain, stored_hash)
    return bool(ok), new_hash
