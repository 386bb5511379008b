"""Blog use cases."""

from .common import BlogPostResponse
from .get_featured_post import GetFeaturedPostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase

__all__ = [
    "BlogPostResponse",
    "GetFeaturedPostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
]
