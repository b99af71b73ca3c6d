# src/thread_stage/models/__init__.py
"""SQLAlchemy models for the Thread Stage application."""

from .topic import (
    DELETED_REPLY_STATES,
    GroupPost,
    GroupTopic,
    ReplyState,
    TopicDisplay,
    TopicType,
)
from .user import User

__all__ = [
    "GroupPost", "GroupTopic",
    "ReplyState", "TopicDisplay", "TopicType", "DELETED_REPLY_STATES",
    "User",
]
