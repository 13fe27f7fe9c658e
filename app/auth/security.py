from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from jose import JWTError, jwt

from app.auth.schemas import CurrentUser
from app.core.config import settings


def create_access_token(
    user_id: str,
    role: str,
    permissions: Optional[Dict[str, Dict[str, bool]]] = None,
    *,
    expires_minutes: Optional[int] = None,
) -> str:
    """Signed token carrying the caller's id, role and per-module permissions."""
    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes

    claims = {
        "sub": str(user_id),
        "role": role,
        "permissions": permissions or {},
        "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def read_access_token(token: str) -> Optional[CurrentUser]:
    """Verify the token and build the caller from its claims. None when invalid, expired or incomplete."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    user_id = payload.get("user_id") or payload.get("sub")
    role = payload.get("role")
    if not user_id or not role:
        return None

    permissions = payload.get("permissions")
    if not isinstance(permissions, dict):
        permissions = {}
    return CurrentUser(id=str(user_id), role=role, permissions=permissions)
