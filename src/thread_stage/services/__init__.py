# src/thread_stage/services/__init__.py
"""Business logic services for the Thread Stage application."""

from .display import can_view_topic_content, filter_reply, list_topic_displays
from .ranking import scored_update_time
from .thread import fetch_detail
from .topic_service import create_topic_reply, fetch_topic_list
from .user_service import fetch_user_x

__all__ = [
    "can_view_topic_content",
    "filter_reply",
    "list_topic_displays",
    "scored_update_time",
    "fetch_detail",
    "create_topic_reply",
    "fetch_topic_list",
    "fetch_user_x",
]
