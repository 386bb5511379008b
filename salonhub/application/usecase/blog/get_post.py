"""Get blog post use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.blog.common import BlogPostResponse
from salonhub.domain.service import BlogService


class GetPostRequest(ApiModel):
    """Get blog post request."""

    slug: str


class GetPostUseCase:
    """Use case for reading one blog post."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: GetPostRequest) -> BlogPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If no post has the slug
        """
        post = await self.blog_service.get_post(request.slug)
        return BlogPostResponse.from_domain(post)
