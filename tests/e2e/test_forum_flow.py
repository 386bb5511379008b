"""End-to-end tests for the forum API."""

import pytest
from fastapi.testclient import TestClient

from salonhub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def create_topic(client: TestClient, title: str, content: str, **extra) -> dict:
    response = client.post(
        "/api/forum/topics", json={"title": title, "content": content, **extra}
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestForumFlow:
    """End-to-end tests for topics, replies and moderation."""

    def test_threaded_discussion(self, client):
        """Replies nest one level; a third level is refused."""
        # Arrange
        topic = create_topic(
            client,
            "Best diffuser?",
            "Looking for recommendations for 3B curls",
            tags=["products"],
            authorName="Sam",
        )

        # Act
        top = client.post(
            f"/api/forum/topics/{topic['id']}/reply",
            json={"content": "I swear by the DevaFuser, it changed everything"},
        )
        nested = client.post(
            f"/api/forum/topics/{topic['id']}/reply",
            json={
                "content": "Agreed, the DevaFuser is worth every penny",
                "parentReplyId": top.json()["id"],
            },
        )
        too_deep = client.post(
            f"/api/forum/topics/{topic['id']}/reply",
            json={
                "content": "Replying to the nested reply should not work",
                "parentReplyId": nested.json()["id"],
            },
        )
        thread = client.get(f"/api/forum/topics/{topic['id']}")

        # Assert
        assert top.status_code == 201
        assert nested.status_code == 201
        assert too_deep.status_code == 400
        assert too_deep.json()["detail"] == "Maximum nesting depth of 2 levels exceeded"

        assert thread.status_code == 200
        data = thread.json()
        assert data["authorName"] == "Sam"
        assert data["tags"] == ["products"]
        assert data["repliesCount"] == 2
        assert len(data["replies"]) == 1
        assert data["replies"][0]["children"][0]["id"] == nested.json()["id"]

    def test_list_topics(self, client):
        create_topic(client, "Wash day", "How often do you all wash?", tags=["routine"])
        create_topic(client, "Cuts", "Dry cut or wet cut for curls?", tags=["cuts"])

        all_topics = client.get("/api/forum/topics")
        by_tag = client.get("/api/forum/topics", params={"tags": "cuts"})
        by_search = client.get("/api/forum/topics", params={"search": "WASH"})
        sorted_topics = client.get(
            "/api/forum/topics", params={"sortBy": "newest", "limit": 1}
        )

        assert [t["title"] for t in all_topics.json()] == ["Cuts", "Wash day"]
        assert [t["title"] for t in by_tag.json()] == ["Cuts"]
        assert [t["title"] for t in by_search.json()] == ["Wash day"]
        assert [t["title"] for t in sorted_topics.json()] == ["Cuts"]

    def test_upvote_and_flag(self, client):
        topic = create_topic(client, "Upvote me", "A topic worth voting for")

        upvote = client.post("/api/forum/upvote", json={"topicId": topic["id"]})
        flags = [
            client.post(
                "/api/forum/flag", json={"contentType": "topic", "contentId": topic["id"]}
            )
            for _ in range(5)
        ]
        listed = client.get("/api/forum/topics")
        direct = client.get(f"/api/forum/topics/{topic['id']}")

        assert upvote.status_code == 200
        assert upvote.json() == {"message": "Topic upvoted successfully"}
        assert all(f.status_code == 200 for f in flags)
        assert flags[0].json() == {"message": "Content flagged successfully"}
        assert listed.json() == []
        assert direct.json()["upvotesCount"] == 1
        assert direct.json()["flagCount"] == 5

    def test_upvote_unknown_topic(self, client):
        response = client.post("/api/forum/upvote", json={"topicId": 999})

        assert response.status_code == 404

    def test_flag_rejects_bad_body(self, client):
        response = client.post(
            "/api/forum/flag", json={"contentType": "comment", "contentId": "1"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation error"
        assert {e["path"] for e in body["errors"]} == {"contentType", "contentId"}

    def test_invalid_topic_id(self, client):
        response = client.get("/api/forum/topics/abc")

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid topic ID"}

    def test_unknown_topic(self, client):
        response = client.get("/api/forum/topics/12345")

        assert response.status_code == 404
        assert response.json() == {"detail": "Topic not found: 12345"}

    def test_missing_title(self, client):
        response = client.post(
            "/api/forum/topics", json={"content": "A body without any title"}
        )

        assert response.status_code == 400


class TestSpamProtection:
    """End-to-end tests for the spam guard."""

    def test_short_content_rejected(self, client):
        response = client.post(
            "/api/forum/topics", json={"title": "Hi", "content": "short"}
        )

        assert response.status_code == 429
        assert response.json() == {
            "detail": "Content too short (minimum 20 characters)"
        }

    def test_sixth_post_rate_limited(self, client):
        for i in range(5):
            create_topic(client, f"Question {i}", f"Distinct body number {i} about curls")

        response = client.post(
            "/api/forum/topics",
            json={"title": "Question 5", "content": "Distinct body number 5 about curls"},
        )

        assert response.status_code == 429
        assert response.json()["detail"] == "Rate limit exceeded (5 posts per hour)"

    def test_duplicate_rejected(self, client):
        create_topic(client, "Same", "Exactly the same content twice")

        response = client.post(
            "/api/forum/topics",
            json={"title": "Same", "content": "Exactly the same content twice"},
        )

        assert response.status_code == 429
        assert response.json()["detail"].startswith("Duplicate content detected")
