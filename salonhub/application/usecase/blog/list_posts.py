"""List blog posts use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.blog.common import BlogPostResponse
from salonhub.config import BlogSettings
from salonhub.domain.service import BlogService


class ListPostsRequest(ApiModel):
    """List blog posts request."""

    tag: str | None = None
    limit: int | None = None


class ListPostsUseCase:
    """Use case for listing blog posts, newest first."""

    def __init__(self, blog_service: BlogService, settings: BlogSettings) -> None:
        self.blog_service = blog_service
        self.settings = settings

    async def execute(self, request: ListPostsRequest) -> list[BlogPostResponse]:
        limit = request.limit if request.limit is not None else self.settings.default_page_size
        limit = max(1, min(limit, self.settings.max_page_size))

        posts = await self.blog_service.list_posts(tag=request.tag or None, limit=limit)
        return [BlogPostResponse.from_domain(p) for p in posts]
