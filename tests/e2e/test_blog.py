"""End-to-end tests for the blog API."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from salonhub.interface.api.app import create_app
from salonhub.persistence.repository.inmemory import InMemoryStore
from tests.conftest import make_blog_post
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    return TestClient(create_app(container))


@pytest.fixture
def seeded(container):
    """Seed two posts, the older one featured."""

    async def _seed():
        store = await container.get(InMemoryStore)
        for post in (
            make_blog_post(
                1,
                "why-we-built-this-for-rochester",
                day=2,
                featured=True,
                subtitle="A directory for curly hair",
            ),
            make_blog_post(2, "diffuser-guide", day=8, tags=["Products"]),
        ):
            store.blog_posts[post.id] = post
        return store

    return asyncio.run(_seed())


class TestBlog:
    """End-to-end tests for /api/blog."""

    def test_list_posts(self, client, seeded):
        response = client.get("/api/blog/posts")

        assert response.status_code == 200
        body = response.json()
        assert [p["slug"] for p in body] == [
            "diffuser-guide",
            "why-we-built-this-for-rochester",
        ]
        assert body[1]["authorName"] == "Alex Rivera"
        assert body[1]["readTime"] == 4
        assert body[1]["publishedAt"].startswith("2025-01-02T09:00:00")

    def test_list_posts_by_tag_and_limit(self, client, seeded):
        by_tag = client.get("/api/blog/posts", params={"tag": "Products"})
        limited = client.get("/api/blog/posts", params={"limit": 1})

        assert [p["slug"] for p in by_tag.json()] == ["diffuser-guide"]
        assert len(limited.json()) == 1

    def test_invalid_limit(self, client):
        response = client.get("/api/blog/posts", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation error"

    def test_get_post(self, client, seeded):
        response = client.get("/api/blog/posts/why-we-built-this-for-rochester")

        assert response.status_code == 200
        assert response.json()["subtitle"] == "A directory for curly hair"

    def test_get_post_not_found(self, client):
        response = client.get("/api/blog/posts/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Blog post not found: missing"}

    def test_featured(self, client, seeded):
        response = client.get("/api/blog/featured")

        assert response.status_code == 200
        assert response.json()["slug"] == "why-we-built-this-for-rochester"

    def test_featured_none(self, client):
        response = client.get("/api/blog/featured")

        assert response.status_code == 200
        assert response.json() is None
