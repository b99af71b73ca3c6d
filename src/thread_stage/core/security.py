"""JWT helpers for bearer-token authentication."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt

from thread_stage.core.auth import Auth
from thread_stage.core.settings import settings


def create_access_token(user_id: int, permissions: set[str] | frozenset[str] = frozenset()) -> str:
    """Create a JWT access token for ``user_id`` carrying its permissions."""
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "permissions": sorted(permissions),
        "exp": datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes),
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> Auth:
    """Decode a bearer token into an ``Auth``.

    Raises:
        jose.JWTError: If the signature or expiry check fails.
        ValueError: If the subject claim is missing or not a user id.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    subject = payload.get("sub")
    if subject is None:
        raise ValueError("token has no subject")
    user_id = int(subject)
    if user_id <= 0:
        raise ValueError(f"invalid user id {user_id}")
    return Auth.for_user(user_id, frozenset(payload.get("permissions") or ()))
