"""topics and replies

Revision ID: 0001_topics
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_topics"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the topic, reply and user profile tables."""
    op.create_table(
        "user_profile",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("nickname", sa.Text(), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "group_topic",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("sort_timestamp", sa.BigInteger(), nullable=False),
        sa.Column("last_replied_at", sa.BigInteger(), nullable=False),
        sa.Column("replies_count", sa.Integer(), nullable=False),
        sa.Column("display", sa.SmallInteger(), nullable=False),
        sa.Column("state", sa.SmallInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_group_topic_parent_id", "group_topic", ["parent_id"])
    op.create_index("ix_group_topic_sort_timestamp", "group_topic", ["sort_timestamp"])
    op.create_table(
        "group_post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("state", sa.SmallInteger(), nullable=False),
        sa.Column("replied_to", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["topic_id"], ["group_topic.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_group_post_topic_id", "group_post", ["topic_id"])


def downgrade() -> None:
    """Drop the topic, reply and user profile tables."""
    op.drop_index("ix_group_post_topic_id", table_name="group_post")
    op.drop_table("group_post")
    op.drop_index("ix_group_topic_sort_timestamp", table_name="group_topic")
    op.drop_index("ix_group_topic_parent_id", table_name="group_topic")
    op.drop_table("group_topic")
    op.drop_table("user_profile")
