"""Analytics use cases."""

from .get_mention_analytics import GetMentionAnalyticsUseCase, MentionStatsResponse

__all__ = [
    "GetMentionAnalyticsUseCase",
    "MentionStatsResponse",
]
