"""Service-level helpers for listing topics and replying to them."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from thread_stage.core.auth import Auth
from thread_stage.core.errors import InvalidPageError, NotFoundError, UnimplementedError
from thread_stage.db.time import unix_now
from thread_stage.models.topic import GroupTopic, ReplyState, TopicType
from thread_stage.repositories.topic_repo import ReplyRepository, TopicRepository
from thread_stage.schemas.topic import PostOut, TopicSummary
from thread_stage.services.display import list_topic_displays
from thread_stage.services.ranking import scored_update_time
from thread_stage.services.user_service import fetch_user_x

logger = logging.getLogger(__name__)


def to_topic_summary(topic: GroupTopic) -> TopicSummary:
    """Convert a GroupTopic ORM instance to a listing row."""
    return TopicSummary(
        id=topic.id,
        parent_id=topic.parent_id,
        creator_id=topic.creator_id,
        title=topic.title,
        created_at=topic.created_at,
        updated_at=topic.last_replied_at,
        replies_count=topic.replies_count,
    )


def fetch_topic_list(
    db: Session,
    auth: Auth,
    topic_type: TopicType,
    parent_id: int,
    *,
    limit: int = 30,
    offset: int = 0,
) -> tuple[int, list[TopicSummary]]:
    """List the topics of a group that ``auth`` may see.

    Args:
        db: Database session.
        auth: The caller.
        topic_type: Container type; only ``group`` is supported.
        parent_id: Group id.
        limit: Page size. Zero yields an empty page with the real total.
        offset: Number of topics to skip.

    Returns:
        The number of visible topics in the group and the requested page,
        ordered by sort timestamp descending.

    Raises:
        UnimplementedError: If ``topic_type`` is not ``group``.
        InvalidPageError: If ``limit`` or ``offset`` is negative.
    """
    if topic_type != TopicType.group:
        raise UnimplementedError(f"topic type {topic_type.value}")
    if limit < 0 or offset < 0:
        raise InvalidPageError(f"invalid page limit={limit} offset={offset}")

    repo = TopicRepository(db)
    displays = list_topic_displays(auth)

    total = repo.count_listed(parent_id, displays)
    if limit == 0:
        return total, []

    topics = repo.list_listed(parent_id, displays, limit=limit, offset=offset)
    return total, [to_topic_summary(topic) for topic in topics]


def create_topic_reply(
    db: Session,
    *,
    topic_type: TopicType,
    topic_id: int,
    user_id: int,
    content: str,
    replied_to: int = 0,
    state: ReplyState = ReplyState.NORMAL,
    now: int | None = None,
) -> PostOut:
    """Store a reply and update its topic's counter and ranking atomically.

    The counter is incremented by the database before the topic is read, so
    the write lock is held for the rest of the transaction and concurrent
    replies cannot lose an increment. Any failure rolls back the reply
    together with the topic update; nothing is retried here.

    The author profile is resolved only after the commit. If it is missing the
    call raises ``ConsistencyViolationError`` (HTTP 500) although the reply is
    already stored, so a client that retries on that error posts it twice.

    Raises:
        UnimplementedError: If ``topic_type`` is not ``group``.
        NotFoundError: If the topic, or the reply named by ``replied_to``,
            does not exist.
        ConsistencyViolationError: If ``user_id`` has no profile. The reply
            has been committed by then.
    """
    if topic_type != TopicType.group:
        raise UnimplementedError(f"creating {topic_type.value} reply")

    timestamp = unix_now() if now is None else now
    topics = TopicRepository(db)
    replies = ReplyRepository(db)

    try:
        # Increment first: it takes the write lock before the counter is read.
        topic = topics.get_for_update(topic_id) if topics.increment_replies(topic_id) else None
        if topic is None:
            raise NotFoundError(f"topic {topic_id}")

        if replied_to and replies.get_in_topic(topic.id, replied_to) is None:
            raise NotFoundError(f"reply {replied_to} in topic {topic_id}")

        post = replies.create(
            topic_id=topic.id,
            creator_id=user_id,
            content=content,
            replied_to=replied_to,
            state=state,
            created_at=timestamp,
        )

        # Ranking uses the count from before this reply.
        sort_timestamp = scored_update_time(
            timestamp,
            topic_type,
            topic,
            replies_before=topic.replies_count - 1,
        )
        topics.apply_ranking(topic.id, sort_timestamp=sort_timestamp, replied_at=timestamp)
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("user %d replied to topic %d with post %d", user_id, topic_id, post.id)

    return PostOut(
        id=post.id,
        type=topic_type,
        user=fetch_user_x(db, post.creator_id),
        created_at=post.created_at,
        state=post.state,
        topic_id=post.topic_id,
        content=post.content,
    )
