"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from thread_stage.core.auth import Auth
from thread_stage.core.security import decode_access_token
from thread_stage.db.session import get_db

# Reading topics works without a token, so the scheme must not reject missing headers.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_auth(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> Auth:
    """Resolve the caller from an optional bearer token.

    Returns:
        An anonymous ``Auth`` when no token is sent.

    Raises:
        HTTPException: If a token is sent but cannot be validated.
    """
    if credentials is None:
        return Auth.anonymous()

    try:
        return decode_access_token(credentials.credentials)
    except (JWTError, ValueError) as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


def get_current_auth(auth: Annotated[Auth, Depends(get_auth)]) -> Auth:
    """Require a logged-in caller."""
    if not auth.login:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return auth


AuthDep = Annotated[Auth, Depends(get_auth)]
CurrentAuthDep = Annotated[Auth, Depends(get_current_auth)]
