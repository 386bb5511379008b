"""Blog reads."""

from typing import Optional

import logfire

from salonhub.domain.error import NotFoundError
from salonhub.domain.model.blog import BlogPost
from salonhub.domain.repository import BlogRepository

from .base import Service


class BlogService(Service):
    """Domain service for published blog posts."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def list_posts(self, tag: Optional[str] = None, limit: int = 50) -> list[BlogPost]:
        """Newest posts first, optionally only those with the given tag."""
        with logfire.span("blog_service.list_posts", tag=tag, limit=limit):
            return await self.blog_repository.find_all(tag=tag, limit=limit)

    async def get_post(self, slug: str) -> BlogPost:
        """Get a post by slug.

        Raises:
            NotFoundError: If no post has the slug
        """
        post = await self.blog_repository.find_by_slug(slug)
        if post is None:
            raise NotFoundError("Blog post", slug)
        return post

    async def get_featured_post(self) -> Optional[BlogPost]:
        """Most recently published featured post, or None if nothing is featured."""
        return await self.blog_repository.find_featured()
