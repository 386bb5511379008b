"""Blog response model shared by the blog use cases."""

from datetime import datetime

from salonhub.application.usecase.base import ApiModel
from salonhub.domain.model import BlogPost


class BlogPostResponse(ApiModel):
    """Blog post as returned by the API."""

    id: int
    slug: str
    title: str
    subtitle: str | None = None
    content: str
    excerpt: str
    author_name: str
    author_bio: str | None = None
    featured: bool
    tags: list[str]
    read_time: int
    published_at: datetime

    @classmethod
    def from_domain(cls, post: BlogPost) -> "BlogPostResponse":
        return cls.model_validate(post.model_dump())
