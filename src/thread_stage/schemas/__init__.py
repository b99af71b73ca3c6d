# src/thread_stage/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .topic import (
    PostOut,
    ReplyCreate,
    SubReply,
    TopicDetail,
    TopicPage,
    TopicSummary,
    TopLevelReply,
)
from .user import Avatar, UserSummary

__all__ = [
    "PostOut", "ReplyCreate",
    "SubReply", "TopLevelReply", "TopicDetail",
    "TopicPage", "TopicSummary",
    "Avatar", "UserSummary",
]
