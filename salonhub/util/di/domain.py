"""Domain layer DI providers."""

from dishka import Scope, provide

from salonhub.config import (
    ForumSettings,
    MentionSettings,
    RateLimitSettings,
    Settings,
    SyncSettings,
)
from salonhub.domain.repository import (
    BlogRepository,
    DirectoryRepository,
    ReplyRepository,
    TopicRepository,
)
from salonhub.domain.service import (
    AnalyticsService,
    BlogService,
    DirectoryCache,
    DirectoryService,
    EnrichmentService,
    ForumService,
    Geocoder,
    MentionService,
    PlacesClient,
    SpamGuard,
    StylistRoster,
)
from salonhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The guard and the caches they share are APP-scoped: one per process.
    """

    scope = Scope.REQUEST

    # Process-wide state
    @provide(scope=Scope.APP)
    def get_spam_guard(self, settings: RateLimitSettings) -> SpamGuard:
        """Provide the shared spam guard."""
        return SpamGuard(settings=settings)

    @provide(scope=Scope.APP)
    def get_stylist_roster(self, settings: MentionSettings) -> StylistRoster:
        """Provide the shared stylist roster."""
        return StylistRoster(ttl_seconds=settings.roster_ttl_seconds)

    @provide(scope=Scope.APP)
    def get_directory_cache(self, settings: Settings) -> DirectoryCache:
        """Provide the shared directory cache."""
        return DirectoryCache(ttl_seconds=settings.cache.ttl_seconds)

    # Request-scoped services
    @provide
    def get_forum_service(
        self,
        topic_repository: TopicRepository,
        reply_repository: ReplyRepository,
        settings: ForumSettings,
    ) -> ForumService:
        """Provide forum domain service."""
        return ForumService(
            topic_repository=topic_repository,
            reply_repository=reply_repository,
            flag_threshold=settings.flag_threshold,
        )

    @provide
    def get_mention_service(
        self,
        roster: StylistRoster,
        directory_repository: DirectoryRepository,
        settings: MentionSettings,
    ) -> MentionService:
        """Provide mention detection service."""
        return MentionService(
            roster=roster,
            directory_repository=directory_repository,
            threshold=settings.match_threshold,
        )

    @provide
    def get_analytics_service(
        self,
        topic_repository: TopicRepository,
        directory_repository: DirectoryRepository,
        settings: MentionSettings,
    ) -> AnalyticsService:
        """Provide mention analytics service."""
        return AnalyticsService(
            topic_repository=topic_repository,
            directory_repository=directory_repository,
            recent_topics_per_stylist=settings.recent_topics_per_stylist,
        )

    @provide
    def get_enrichment_service(
        self,
        directory_repository: DirectoryRepository,
        geocoder: Geocoder,
        places_client: PlacesClient,
        settings: SyncSettings,
    ) -> EnrichmentService:
        """Provide salon enrichment service."""
        return EnrichmentService(
            directory_repository=directory_repository,
            geocoder=geocoder,
            places_client=places_client,
            settings=settings,
        )

    @provide
    def get_directory_service(
        self,
        directory_repository: DirectoryRepository,
        enrichment_service: EnrichmentService,
        cache: DirectoryCache,
    ) -> DirectoryService:
        """Provide directory domain service."""
        return DirectoryService(
            directory_repository=directory_repository,
            enrichment_service=enrichment_service,
            cache=cache,
        )

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)
