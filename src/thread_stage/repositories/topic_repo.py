"""Data access helpers for working with topics and replies."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from thread_stage.models.topic import GroupPost, GroupTopic

__all__ = ["ReplyRepository", "TopicRepository"]


class TopicRepository:
    """Thin wrapper around database access for topic entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, topic_id: int) -> GroupTopic | None:
        """Return a topic by identifier."""
        return self.session.execute(
            select(GroupTopic).where(GroupTopic.id == topic_id)
        ).scalars().first()

    def get_for_update(self, topic_id: int) -> GroupTopic | None:
        """Return a topic and lock its row until the transaction ends."""
        return self.session.execute(
            select(GroupTopic)
            .where(GroupTopic.id == topic_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalars().first()

    def count_listed(self, parent_id: int, displays: Iterable[int]) -> int:
        """Count topics of a group whose display state is in ``displays``."""
        stmt = (
            select(func.count())
            .select_from(GroupTopic)
            .where(GroupTopic.parent_id == parent_id, GroupTopic.display.in_(list(displays)))
        )
        return int(self.session.execute(stmt).scalar_one())

    def list_listed(
        self,
        parent_id: int,
        displays: Iterable[int],
        *,
        limit: int,
        offset: int,
    ) -> list[GroupTopic]:
        """Return one page of listed topics, hottest first.

        Ties on the sort timestamp fall back to ascending id so pages are stable.
        """
        stmt = (
            select(GroupTopic)
            .where(GroupTopic.parent_id == parent_id, GroupTopic.display.in_(list(displays)))
            .order_by(GroupTopic.sort_timestamp.desc(), GroupTopic.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars())

    def increment_replies(self, topic_id: int) -> bool:
        """Add one to the reply counter in the database, returning False if no row matched.

        The increment is computed by the database, so on SQLite it takes the
        write lock and on other backends the row lock before anything else runs.
        """
        result = self.session.execute(
            update(GroupTopic)
            .where(GroupTopic.id == topic_id)
            .values(replies_count=GroupTopic.replies_count + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def apply_ranking(self, topic_id: int, *, sort_timestamp: int, replied_at: int) -> None:
        """Write the ranking fields touched by a new reply."""
        self.session.execute(
            update(GroupTopic)
            .where(GroupTopic.id == topic_id)
            .values(sort_timestamp=sort_timestamp, last_replied_at=replied_at)
        )


class ReplyRepository:
    """Thin wrapper around database access for topic replies."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_for_topic(self, topic_id: int) -> list[GroupPost]:
        """Return every reply of a topic in insertion order, top post first."""
        result = self.session.execute(
            select(GroupPost).where(GroupPost.topic_id == topic_id).order_by(GroupPost.id.asc())
        )
        return list(result.scalars())

    def get_in_topic(self, topic_id: int, reply_id: int) -> GroupPost | None:
        """Return a reply only if it belongs to ``topic_id``."""
        return self.session.execute(
            select(GroupPost).where(GroupPost.id == reply_id, GroupPost.topic_id == topic_id)
        ).scalars().first()

    def count_for_topic(self, topic_id: int) -> int:
        """Count stored rows of a topic, top post included."""
        stmt = select(func.count()).select_from(GroupPost).where(GroupPost.topic_id == topic_id)
        return int(self.session.execute(stmt).scalar_one())

    def create(
        self,
        *,
        topic_id: int,
        creator_id: int,
        content: str,
        replied_to: int,
        state: int,
        created_at: int,
    ) -> GroupPost:
        """Insert a new reply and return the persisted ORM instance."""
        post = GroupPost(
            topic_id=topic_id,
            creator_id=creator_id,
            content=content,
            replied_to=replied_to,
            state=state,
            created_at=created_at,
        )
        self.session.add(post)
        self.session.flush()
        return post
