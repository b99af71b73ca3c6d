# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from thread_stage.core.auth import PERMISSION_BAN_POST, Auth
from thread_stage.core.security import create_access_token
from thread_stage.db.session import Base
from thread_stage.db.session import get_db as app_get_session
from thread_stage.main import app as fastapi_app
from thread_stage.models import GroupPost, GroupTopic, ReplyState, TopicDisplay, User

TEST_DB_URL = "sqlite://"

GROUP_ID = 10


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(session_factory: sessionmaker[Session]) -> Iterator[FastAPI]:
    def _get_session_override() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted member."""
    user = User(id=1, username="alice", nickname="Alice", avatar="000/00/00/1.jpg")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second member without an avatar."""
    user = User(id=2, username="bob", nickname="Bob", avatar="")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def member_auth(test_user: User) -> Auth:
    return Auth.for_user(test_user.id)


@pytest.fixture()
def moderator_auth(other_user: User) -> Auth:
    return Auth.for_user(other_user.id, {PERMISSION_BAN_POST})


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the regular member."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture()
def moderator_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for a member allowed to see banned topics."""
    token = create_access_token(other_user.id, {PERMISSION_BAN_POST})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_topic(db_session: Session) -> Callable[..., GroupTopic]:
    """Return a factory that stores a topic together with its top post."""

    def _make_topic(
        *,
        parent_id: int = GROUP_ID,
        creator_id: int = 1,
        title: str = "topic",
        created_at: int = 1000,
        sort_timestamp: int | None = None,
        display: TopicDisplay = TopicDisplay.NORMAL,
        state: ReplyState = ReplyState.NORMAL,
        with_top_post: bool = True,
    ) -> GroupTopic:
        topic = GroupTopic(
            parent_id=parent_id,
            creator_id=creator_id,
            title=title,
            created_at=created_at,
            sort_timestamp=created_at if sort_timestamp is None else sort_timestamp,
            last_replied_at=created_at,
            replies_count=0,
            display=display,
            state=state,
        )
        db_session.add(topic)
        db_session.flush()
        if with_top_post:
            db_session.add(
                GroupPost(
                    topic_id=topic.id,
                    creator_id=creator_id,
                    content=f"top post of {title}",
                    created_at=created_at,
                    state=ReplyState.NORMAL,
                    replied_to=0,
                )
            )
        db_session.commit()
        return topic

    return _make_topic


@pytest.fixture()
def add_reply(db_session: Session) -> Callable[..., GroupPost]:
    """Return a factory that seeds a reply row and keeps the counter in step."""

    def _add_reply(
        topic: GroupTopic,
        *,
        content: str = "reply",
        creator_id: int = 1,
        replied_to: int = 0,
        state: ReplyState = ReplyState.NORMAL,
        created_at: int = 2000,
    ) -> GroupPost:
        post = GroupPost(
            topic_id=topic.id,
            creator_id=creator_id,
            content=content,
            created_at=created_at,
            state=state,
            replied_to=replied_to,
        )
        db_session.add(post)
        topic.replies_count += 1
        db_session.commit()
        return post

    return _add_reply
