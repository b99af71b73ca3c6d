"""Assemble a topic's flat reply list into a two-level thread."""
from __future__ import annotations

from enum import Enum

from sqlalchemy.orm import Session

from thread_stage.core.auth import Auth
from thread_stage.core.errors import ConsistencyViolationError, NotFoundError, UnimplementedError
from thread_stage.models.topic import GroupPost, TopicType
from thread_stage.repositories.topic_repo import ReplyRepository, TopicRepository
from thread_stage.schemas.topic import SubReply, TopicDetail, TopLevelReply
from thread_stage.services.display import can_view_topic_content, filter_reply

class ReplyRole(Enum):
    """Position of a reply in a thread.

    Threads are exactly two levels deep. A reply whose ``replied_to`` points
    at a sub-reply is grouped under that sub-reply's id, which no top-level
    entry looks up, so it does not show up in the rendered thread.
    """

    TOP_LEVEL = "top_level"
    SUB_REPLY = "sub_reply"

    @classmethod
    def of(cls, post: GroupPost) -> ReplyRole:
        return cls.TOP_LEVEL if post.replied_to == 0 else cls.SUB_REPLY


def _to_sub_reply(post: GroupPost) -> SubReply:
    return SubReply(
        id=post.id,
        replied_to=post.replied_to,
        creator_id=post.creator_id,
        text=post.content,
        state=post.state,
        created_at=post.created_at,
    )


def fetch_detail(
    db: Session,
    auth: Auth,
    topic_type: TopicType,
    topic_id: int,
) -> TopicDetail:
    """Render a topic with its replies as seen by ``auth``.

    Raises:
        UnimplementedError: If ``topic_type`` is not ``group``.
        NotFoundError: If the topic does not exist or ``auth`` may not read it.
        ConsistencyViolationError: If the topic has no top post.
    """
    if topic_type != TopicType.group:
        raise UnimplementedError(f"topic type {topic_type.value}")

    topic = TopicRepository(db).get_by_id(topic_id)
    if topic is None:
        raise NotFoundError(f"topic {topic_id}")

    # Hidden topics look exactly like missing ones.
    if not can_view_topic_content(auth, topic):
        raise NotFoundError(f"topic {topic_id}")

    replies = ReplyRepository(db).list_for_topic(topic.id)
    if not replies:
        raise ConsistencyViolationError(f"top reply of topic({topic_type.value}) {topic_id}")
    top, rest = replies[0], replies[1:]

    sub_replies: dict[int, list[SubReply]] = {}
    top_level: list[GroupPost] = []
    for post in rest:
        if ReplyRole.of(post) is ReplyRole.TOP_LEVEL:
            top_level.append(post)
        else:
            sub_replies.setdefault(post.replied_to, []).append(_to_sub_reply(post))

    rendered = [
        filter_reply(
            auth,
            TopLevelReply(
                **_to_sub_reply(post).model_dump(),
                replies=[filter_reply(auth, sub) for sub in sub_replies.get(post.id, [])],
            ),
        )
        for post in top_level
    ]

    return TopicDetail(
        id=topic.id,
        title=topic.title,
        parent_id=topic.parent_id,
        text=top.content,
        display=topic.display,
        state=topic.state,
        created_at=top.created_at,
        creator_id=top.creator_id,
        top_post=_to_sub_reply(top),
        replies=rendered,
    )
