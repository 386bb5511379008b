"""Get mention analytics use case."""

from datetime import datetime

from salonhub.application.usecase.base import ApiModel
from salonhub.domain.service import AnalyticsService


class TopicReferenceResponse(ApiModel):
    id: int
    title: str
    created_at: datetime


class MentionStatsResponse(ApiModel):
    """Mention count for one stylist."""

    stylist_id: str
    stylist_name: str
    mention_count: int
    recent_topics: list[TopicReferenceResponse]


class GetMentionAnalyticsUseCase:
    """Use case for per-stylist mention counts, most mentioned first."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: None = None) -> list[MentionStatsResponse]:
        stats = await self.analytics_service.get_mention_analytics()
        return [MentionStatsResponse.model_validate(s.model_dump()) for s in stats]
