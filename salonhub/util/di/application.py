"""Application layer DI providers."""

from dishka import Scope, provide

from salonhub.application.usecase.analytics import GetMentionAnalyticsUseCase
from salonhub.application.usecase.blog import (
    GetFeaturedPostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from salonhub.application.usecase.directory import (
    ClearCacheUseCase,
    GetCacheStatsUseCase,
    GetDirectoryUseCase,
)
from salonhub.application.usecase.forum import (
    CreateReplyUseCase,
    CreateTopicUseCase,
    FlagContentUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    UpvoteTopicUseCase,
)
from salonhub.config import BlogSettings, ForumSettings
from salonhub.domain.service import (
    AnalyticsService,
    BlogService,
    DirectoryService,
    ForumService,
    MentionService,
    SpamGuard,
)
from salonhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Forum use cases
    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self,
        spam_guard: SpamGuard,
        mention_service: MentionService,
        forum_service: ForumService,
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            spam_guard=spam_guard,
            mention_service=mention_service,
            forum_service=forum_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(
        self, forum_service: ForumService, settings: ForumSettings
    ) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(forum_service=forum_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_topic_use_case(self, forum_service: ForumService) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(forum_service=forum_service)

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, spam_guard: SpamGuard, forum_service: ForumService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(spam_guard=spam_guard, forum_service=forum_service)

    @provide(scope=Scope.REQUEST)
    def get_flag_content_use_case(self, forum_service: ForumService) -> FlagContentUseCase:
        """Provide flag content use case."""
        return FlagContentUseCase(forum_service=forum_service)

    @provide(scope=Scope.REQUEST)
    def get_upvote_topic_use_case(self, forum_service: ForumService) -> UpvoteTopicUseCase:
        """Provide upvote topic use case."""
        return UpvoteTopicUseCase(forum_service=forum_service)

    # Directory use cases
    @provide(scope=Scope.REQUEST)
    def get_get_directory_use_case(
        self, directory_service: DirectoryService
    ) -> GetDirectoryUseCase:
        """Provide get directory use case."""
        return GetDirectoryUseCase(directory_service=directory_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_cache_use_case(
        self, directory_service: DirectoryService
    ) -> ClearCacheUseCase:
        """Provide clear cache use case."""
        return ClearCacheUseCase(directory_service=directory_service)

    @provide(scope=Scope.REQUEST)
    def get_get_cache_stats_use_case(
        self, directory_service: DirectoryService
    ) -> GetCacheStatsUseCase:
        """Provide cache stats use case."""
        return GetCacheStatsUseCase(directory_service=directory_service)

    # Analytics use cases
    @provide(scope=Scope.REQUEST)
    def get_mention_analytics_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetMentionAnalyticsUseCase:
        """Provide mention analytics use case."""
        return GetMentionAnalyticsUseCase(analytics_service=analytics_service)

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, blog_service: BlogService, settings: BlogSettings
    ) -> ListPostsUseCase:
        """Provide list blog posts use case."""
        return ListPostsUseCase(blog_service=blog_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, blog_service: BlogService) -> GetPostUseCase:
        """Provide get blog post use case."""
        return GetPostUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_featured_post_use_case(
        self, blog_service: BlogService
    ) -> GetFeaturedPostUseCase:
        """Provide featured blog post use case."""
        return GetFeaturedPostUseCase(blog_service=blog_service)
