# src/thread_stage/models/topic.py
"""SQLAlchemy models for group topics and their replies."""

from enum import Enum, IntEnum

from sqlalchemy import BigInteger, ForeignKey, Integer, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from thread_stage.db.session import Base


class TopicType(str, Enum):
    """Kind of container a topic belongs to."""

    group = "group"
    subject = "subject"


class ReplyState(IntEnum):
    """Moderation record shared by topics and replies."""

    NORMAL = 0
    ADMIN_CLOSED = 1
    ADMIN_REOPENED = 2
    ADMIN_PINNED = 3
    ADMIN_MERGED = 4
    # Sunk topics keep their sort timestamp when new replies arrive.
    ADMIN_SUNK = 5
    USER_DELETED = 6
    ADMIN_DELETED = 7


class TopicDisplay(IntEnum):
    """Listing visibility of a topic."""

    BAN = 0
    NORMAL = 1
    REVIEW = 2


DELETED_REPLY_STATES = frozenset({ReplyState.USER_DELETED, ReplyState.ADMIN_DELETED})


class GroupTopic(Base):
    """Discussion thread inside a group.

    ``display`` and ``state`` are independent axes: the first controls who
    may list and read the topic, the second records moderation history.
    """

    __tablename__ = "group_topic"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    parent_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)

    # Unix seconds. created_at never changes; sort_timestamp starts equal to it
    # and is rewritten by the ranking transform on each reply.
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    sort_timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    last_replied_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    # Number of replies excluding the top post.
    replies_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    display: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, default=TopicDisplay.NORMAL
    )
    state: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=ReplyState.NORMAL)


class GroupPost(Base):
    """One message in a topic; the lowest id of a topic is its top post."""

    __tablename__ = "group_post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("group_topic.id"),
        nullable=False,
        index=True,
    )
    creator_id: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    state: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=ReplyState.NORMAL)
    # 0 for the top post and top-level replies, otherwise the parent reply id.
    replied_to: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
