"""Stylist mention analytics."""

import logfire

from salonhub.domain.model.mention import MentionStats, TopicReference
from salonhub.domain.repository import DirectoryRepository, TopicRepository
from salonhub.domain.value import StylistId

from .base import Service


class AnalyticsService(Service):
    """Read model over topics that mention stylists."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        directory_repository: DirectoryRepository,
        recent_topics_per_stylist: int = 5,
    ) -> None:
        self.topic_repository = topic_repository
        self.directory_repository = directory_repository
        self.recent_topics_per_stylist = recent_topics_per_stylist

    async def get_mention_analytics(self) -> list[MentionStats]:
        """Mention counts per stylist, most mentioned first.

        Each entry carries up to the configured number of the newest
        topics mentioning the stylist. Stylists that no longer exist are
        reported as "Unknown".
        """
        with logfire.span("analytics_service.get_mention_analytics"):
            topics = await self.topic_repository.find_with_mentions()

            counts: dict[StylistId, int] = {}
            recent: dict[StylistId, list[TopicReference]] = {}
            # Topics arrive newest first, so the first references kept are the latest
            for topic in topics:
                ref = TopicReference(id=topic.id, title=topic.title, created_at=topic.created_at)
                for raw_id in topic.mentioned_stylist_ids:
                    stylist_id = StylistId(raw_id)
                    counts[stylist_id] = counts.get(stylist_id, 0) + 1
                    refs = recent.setdefault(stylist_id, [])
                    if len(refs) < self.recent_topics_per_stylist:
                        refs.append(ref)

            names = dict(await self.directory_repository.list_stylist_names())
            stats = [
                MentionStats(
                    stylist_id=stylist_id,
                    stylist_name=names.get(stylist_id, "Unknown"),
                    mention_count=count,
                    recent_topics=recent[stylist_id],
                )
                for stylist_id, count in counts.items()
            ]
            stats.sort(key=lambda s: s.mention_count, reverse=True)

            logfire.info(
                "Mention analytics computed",
                topics_scanned=len(topics),
                stylists=len(stats),
            )
            return stats
