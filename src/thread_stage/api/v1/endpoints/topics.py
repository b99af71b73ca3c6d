"""Topic-related endpoints for the Thread Stage API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from sqlalchemy.orm import Session

from thread_stage.core.auth import Auth
from thread_stage.core.settings import settings
from thread_stage.models.topic import TopicType
from thread_stage.schemas.topic import PostOut, ReplyCreate, TopicDetail, TopicPage
from thread_stage.services.thread import fetch_detail
from thread_stage.services.topic_service import create_topic_reply, fetch_topic_list

from ..dependencies import AuthDep, CurrentAuthDep, SessionDep

router = APIRouter(tags=["topics"])


def _topic_page(
    db: Session,
    auth: Auth,
    topic_type: TopicType,
    parent_id: int,
    limit: int,
    offset: int,
) -> TopicPage:
    total, topics = fetch_topic_list(db, auth, topic_type, parent_id, limit=limit, offset=offset)
    return TopicPage(total=total, limit=limit, offset=offset, data=topics)


@router.get("/groups/{group_id}/topics", response_model=TopicPage)
def list_group_topics(
    group_id: int,
    db: SessionDep,
    auth: AuthDep,
    limit: int = Query(settings.default_page_limit, ge=0, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
) -> TopicPage:
    """List the topics of a group, hottest first."""
    return _topic_page(db, auth, TopicType.group, group_id, limit, offset)


@router.get("/subjects/{subject_id}/topics", response_model=TopicPage)
def list_subject_topics(
    subject_id: int,
    db: SessionDep,
    auth: AuthDep,
    limit: int = Query(settings.default_page_limit, ge=0, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
) -> TopicPage:
    """List the topics of a subject."""
    return _topic_page(db, auth, TopicType.subject, subject_id, limit, offset)


@router.get("/topics/{topic_id}", response_model=TopicDetail)
def get_topic(topic_id: int, db: SessionDep, auth: AuthDep) -> TopicDetail:
    """Get a group topic with its two-level reply tree."""
    return fetch_detail(db, auth, TopicType.group, topic_id)


@router.post(
    "/topics/{topic_id}/replies",
    response_model=PostOut,
    status_code=status.HTTP_201_CREATED,
)
def create_reply(
    topic_id: int,
    reply: ReplyCreate,
    db: SessionDep,
    auth: CurrentAuthDep,
) -> PostOut:
    """Reply to a group topic, or to one of its top-level replies."""
    return create_topic_reply(
        db,
        topic_type=TopicType.group,
        topic_id=topic_id,
        user_id=auth.user_id,
        content=reply.content,
        replied_to=reply.replied_to,
    )
