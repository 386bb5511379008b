"""Directory cache administration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from salonhub.application.usecase.base import MessageResponse
from salonhub.application.usecase.directory import (
    CacheStatsResponse,
    ClearCacheUseCase,
    GetCacheStatsUseCase,
)

router = APIRouter(prefix="/api/cache", tags=["cache"], route_class=DishkaRoute)


@router.post("/clear", response_model=MessageResponse)
async def clear_cache(
    clear_cache_use_case: FromDishka[ClearCacheUseCase],
) -> MessageResponse:
    """Evict the cached directory so the next read rebuilds it."""
    return await clear_cache_use_case.execute()


@router.get("/stats", response_model=CacheStatsResponse)
async def get_cache_stats(
    get_cache_stats_use_case: FromDishka[GetCacheStatsUseCase],
) -> CacheStatsResponse:
    """Key, hit and miss counts of the directory cache."""
    return await get_cache_stats_use_case.execute()
