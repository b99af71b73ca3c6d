"""Public user profile lookups."""
from __future__ import annotations

from sqlalchemy.orm import Session

from thread_stage.core.errors import ConsistencyViolationError
from thread_stage.core.settings import settings
from thread_stage.models.user import User
from thread_stage.schemas.user import Avatar, UserSummary

__all__ = ["avatar_urls", "fetch_user_x", "get_user"]


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.query(User).filter(User.id == user_id).first()


def avatar_urls(image: str) -> Avatar:
    """Build the three avatar sizes for a stored image path."""
    img = image or settings.avatar_default_image
    base = settings.avatar_base_url.rstrip("/")
    return Avatar(
        large=f"{base}/l/{img}",
        medium=f"{base}/m/{img}",
        small=f"{base}/s/{img}",
    )


def fetch_user_x(db: Session, user_id: int) -> UserSummary:
    """Return the public profile of a user that must exist.

    Raises:
        ConsistencyViolationError: If no such user is stored.
    """
    user = get_user(db, user_id)
    if user is None:
        raise ConsistencyViolationError(f"user {user_id}")

    return UserSummary(
        id=user.id,
        username=user.username,
        nickname=user.nickname,
        avatar=avatar_urls(user.avatar),
    )
