"""Visibility rules for topics and replies.

Whether a caller may list a topic, read its content, or see a reply's text
depends on the caller's permissions and on the topic's ``display`` state.
The moderation ``state`` only affects reply redaction here; when the two
fields disagree both are surfaced unchanged to the caller.
"""

from __future__ import annotations

from typing import TypeVar

from thread_stage.core.auth import Auth
from thread_stage.models.topic import DELETED_REPLY_STATES, GroupTopic, TopicDisplay
from thread_stage.schemas.topic import SubReply

ReplyT = TypeVar("ReplyT", bound=SubReply)


def list_topic_displays(auth: Auth) -> list[TopicDisplay]:
    """Return the display states ``auth`` may see in topic listings."""
    if auth.ban_post:
        return [TopicDisplay.BAN, TopicDisplay.NORMAL, TopicDisplay.REVIEW]

    return [TopicDisplay.NORMAL]


def can_view_topic_content(auth: Auth, topic: GroupTopic) -> bool:
    """Return True if ``auth`` may read the replies of ``topic``."""
    if topic.display == TopicDisplay.NORMAL:
        return True

    if auth.ban_post:
        return True

    # Authors can follow their own topic while it waits for review.
    return (
        auth.login
        and topic.display == TopicDisplay.REVIEW
        and auth.user_id == topic.creator_id
    )


def filter_reply(auth: Auth, reply: ReplyT) -> ReplyT:
    """Blank the text of deleted replies for callers without moderation rights.

    The reply itself is always kept so the thread shape does not depend on
    who is looking at it.
    """
    if reply.state in DELETED_REPLY_STATES and not auth.ban_post:
        return reply.model_copy(update={"text": ""})

    return reply
