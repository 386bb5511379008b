"""Blog routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from salonhub.application.usecase.blog import (
    BlogPostResponse,
    GetFeaturedPostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from salonhub.domain.error import DomainError
from salonhub.interface.api.errors import to_http_exception

router = APIRouter(prefix="/api/blog", tags=["blog"], route_class=DishkaRoute)


@router.get("/posts", response_model=list[BlogPostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    tag: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
) -> list[BlogPostResponse]:
    """List posts, newest first, optionally only those tagged ``tag``."""
    return await list_posts_use_case.execute(ListPostsRequest(tag=tag, limit=limit))


@router.get("/posts/{slug}", response_model=BlogPostResponse)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> BlogPostResponse:
    """Get one post.

    Raises:
        HTTPException: 404 if no post has the slug
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/featured", response_model=BlogPostResponse | None)
async def get_featured_post(
    get_featured_post_use_case: FromDishka[GetFeaturedPostUseCase],
) -> BlogPostResponse | None:
    """The featured post, or null when nothing is featured."""
    return await get_featured_post_use_case.execute()
