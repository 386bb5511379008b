"""Analytics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from salonhub.application.usecase.analytics import (
    GetMentionAnalyticsUseCase,
    MentionStatsResponse,
)

router = APIRouter(prefix="/api/analytics", tags=["analytics"], route_class=DishkaRoute)


@router.get("/mentions", response_model=list[MentionStatsResponse])
async def get_mention_analytics(
    get_mention_analytics_use_case: FromDishka[GetMentionAnalyticsUseCase],
) -> list[MentionStatsResponse]:
    """Which stylists are talked about in the forum, most mentioned first."""
    return await get_mention_analytics_use_case.execute()
