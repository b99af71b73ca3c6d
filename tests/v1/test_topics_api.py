# tests/v1/test_topics_api.py
"""Tests for topic endpoints."""

import logging

from fastapi import status

from thread_stage.models import TopicDisplay

GROUP_ID = 10


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_list_group_topics(client, make_topic) -> None:
    for i in range(3):
        make_topic(title=f"t{i}", created_at=1000 + i)

    response = client.get(f"/api/v1/groups/{GROUP_ID}/topics", params={"limit": 2})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 3
    assert data["limit"] == 2
    assert [t["title"] for t in data["data"]] == ["t2", "t1"]


def test_list_rejects_negative_offset(client) -> None:
    response = client.get(f"/api/v1/groups/{GROUP_ID}/topics", params={"offset": -1})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


def test_subject_topics_are_not_supported(client) -> None:
    response = client.get("/api/v1/subjects/1/topics")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "not supported" in response.json()["detail"]


def test_banned_topic_hidden_without_permission(client, make_topic, auth_token, moderator_token) -> None:
    topic = make_topic(display=TopicDisplay.BAN)

    assert client.get(f"/api/v1/topics/{topic.id}").status_code == status.HTTP_404_NOT_FOUND
    assert (
        client.get(f"/api/v1/topics/{topic.id}", headers=auth_token).status_code
        == status.HTTP_404_NOT_FOUND
    )

    response = client.get(f"/api/v1/topics/{topic.id}", headers=moderator_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == topic.id

    listing = client.get(f"/api/v1/groups/{GROUP_ID}/topics", headers=auth_token).json()
    assert listing["total"] == 0


def test_missing_topic_is_404(client) -> None:
    assert client.get("/api/v1/topics/999").status_code == status.HTTP_404_NOT_FOUND


def test_invalid_token_is_rejected(client, make_topic) -> None:
    topic = make_topic()
    response = client.get(
        f"/api/v1/topics/{topic.id}",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_reply_requires_login(client, make_topic) -> None:
    topic = make_topic()
    response = client.post(f"/api/v1/topics/{topic.id}/replies", json={"content": "hi"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_reply_and_read_back(client, make_topic, auth_token, test_user) -> None:
    topic = make_topic()

    created = client.post(
        f"/api/v1/topics/{topic.id}/replies",
        json={"content": "first!"},
        headers=auth_token,
    )
    assert created.status_code == status.HTTP_201_CREATED
    post = created.json()
    assert post["content"] == "first!"
    assert post["type"] == "group"
    assert post["user"]["username"] == test_user.username

    nested = client.post(
        f"/api/v1/topics/{topic.id}/replies",
        json={"content": "second", "replied_to": post["id"]},
        headers=auth_token,
    )
    assert nested.status_code == status.HTTP_201_CREATED

    detail = client.get(f"/api/v1/topics/{topic.id}").json()
    assert [r["text"] for r in detail["replies"]] == ["first!"]
    assert [s["text"] for s in detail["replies"][0]["replies"]] == ["second"]

    listing = client.get(f"/api/v1/groups/{GROUP_ID}/topics").json()
    assert listing["data"][0]["replies_count"] == 2


def test_reply_to_missing_topic_is_404(client, auth_token) -> None:
    response = client.post("/api/v1/topics/999/replies", json={"content": "hi"}, headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_empty_reply_is_rejected(client, make_topic, auth_token) -> None:
    topic = make_topic()
    response = client.post(
        f"/api/v1/topics/{topic.id}/replies",
        json={"content": ""},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


def test_topic_without_top_post_is_500_and_logged_once(client, make_topic, caplog) -> None:
    topic = make_topic(with_top_post=False)

    with caplog.at_level(logging.ERROR):
        response = client.get(f"/api/v1/topics/{topic.id}")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    errors = [r for r in caplog.records if r.name.startswith("thread_stage") and r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "consistency violation" in errors[0].getMessage()
