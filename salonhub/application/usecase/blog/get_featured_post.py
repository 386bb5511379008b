"""Get featured blog post use case."""

from salonhub.application.usecase.blog.common import BlogPostResponse
from salonhub.domain.service import BlogService


class GetFeaturedPostUseCase:
    """Use case for the featured post shown at the top of the blog."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: None = None) -> BlogPostResponse | None:
        post = await self.blog_service.get_featured_post()
        return BlogPostResponse.from_domain(post) if post else None
