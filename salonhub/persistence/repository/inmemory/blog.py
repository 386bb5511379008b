"""In-memory blog repository for testing."""

from typing import Optional

from salonhub.domain.model import BlogPost
from salonhub.domain.repository import BlogRepository

from .store import InMemoryStore


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    def _newest_first(self) -> list[BlogPost]:
        return sorted(
            self.store.blog_posts.values(),
            key=lambda p: (p.published_at, p.id),
            reverse=True,
        )

    async def find_all(self, tag: Optional[str] = None, limit: int = 50) -> list[BlogPost]:
        posts = self._newest_first()
        if tag:
            posts = [p for p in posts if tag in p.tags]
        return posts[:limit]

    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        return next((p for p in self.store.blog_posts.values() if p.slug == slug), None)

    async def find_featured(self) -> Optional[BlogPost]:
        return next((p for p in self._newest_first() if p.featured), None)
