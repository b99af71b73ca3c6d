"""Gravity-decay ranking of topics on new replies."""

from __future__ import annotations

import logging
import math
from collections.abc import Collection

from thread_stage.core.settings import settings
from thread_stage.models.topic import GroupTopic, ReplyState, TopicType

logger = logging.getLogger(__name__)

GRAVITY = 1.8
SECONDS_PER_HOUR = 3600


def scored_update_time(
    timestamp: int,
    topic_type: TopicType,
    topic: GroupTopic,
    gravity_groups: Collection[int] | None = None,
    *,
    replies_before: int | None = None,
) -> int:
    """Return the sort timestamp ``topic`` should get for a reply at ``timestamp``.

    Args:
        timestamp: Unix time of the new reply.
        topic_type: Container type of the topic.
        topic: The topic being replied to.
        gravity_groups: Group ids eligible for gravity decay. Defaults to
            ``settings.ranking_gravity_groups``.
        replies_before: Reply count before the new reply. Defaults to
            ``topic.replies_count``; pass it when the row was already incremented.

    Returns:
        ``topic.sort_timestamp`` for sunk topics, a decayed timestamp for busy
        topics in eligible groups, and ``timestamp`` otherwise. The result is
        never later than ``timestamp`` unless the topic is sunk.
    """
    if topic.state == ReplyState.ADMIN_SUNK:
        return topic.sort_timestamp

    if replies_before is None:
        replies_before = topic.replies_count
    if gravity_groups is None:
        gravity_groups = settings.ranking_gravity_groups

    if (
        topic_type == TopicType.group
        and topic.parent_id in gravity_groups
        and replies_before > 0
    ):
        # Clamp so a clock running behind created_at cannot produce a
        # negative base for the fractional power.
        created_hours = max(timestamp - topic.created_at, 0) / SECONDS_PER_HOUR
        base_score = (math.pow(created_hours + 0.1, GRAVITY) / replies_before) * 200
        scored = math.trunc(timestamp - base_score)
        logger.debug(
            "topic %d rescored: decay %.2f over %d replies",
            topic.id or 0,
            base_score,
            replies_before,
        )
        return min(scored, timestamp)

    return timestamp
