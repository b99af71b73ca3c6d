# src/thread_stage/schemas/topic.py
"""Topic and reply Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from thread_stage.models.topic import TopicType
from thread_stage.schemas.user import UserSummary


class TopicSummary(BaseModel):
    """One row of a topic listing."""

    id: int
    parent_id: int = Field(..., description="Group ID or subject ID")
    creator_id: int
    title: str
    created_at: int
    updated_at: int = Field(..., description="Unix time of the latest reply")
    replies_count: int

    model_config = ConfigDict(from_attributes=True)


class TopicPage(BaseModel):
    """Paginated topic listing."""

    total: int
    limit: int
    offset: int
    data: list[TopicSummary]


class SubReply(BaseModel):
    """A reply as rendered inside a thread."""

    id: int
    replied_to: int
    creator_id: int
    text: str
    state: int
    created_at: int


class TopLevelReply(SubReply):
    """A direct reply to the topic with its nested sub-replies."""

    replies: list[SubReply] = Field(default_factory=list)


class TopicDetail(BaseModel):
    """A topic rendered as a two-level reply tree.

    ``text``, ``creator_id`` and ``created_at`` are taken from the top post.
    """

    id: int
    title: str
    parent_id: int
    text: str
    display: int
    state: int
    created_at: int
    creator_id: int
    top_post: SubReply
    replies: list[TopLevelReply]


class ReplyCreate(BaseModel):
    """Schema for creating a new reply."""

    content: str = Field(..., min_length=1, max_length=10000, description="Reply body")
    replied_to: int = Field(
        0,
        ge=0,
        description="ID of the top-level reply this answers; 0 replies to the topic",
    )


class PostOut(BaseModel):
    """A freshly created reply together with its author."""

    id: int
    type: TopicType
    user: UserSummary
    created_at: int
    state: int
    topic_id: int
    content: str
