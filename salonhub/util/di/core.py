"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from salonhub.config import (
    BlogSettings,
    ForumSettings,
    MentionSettings,
    RateLimitSettings,
    Settings,
    SyncSettings,
)
from salonhub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        return settings.rate_limit

    @provide(scope=Scope.APP)
    def provide_forum_settings(self, settings: Settings) -> ForumSettings:
        return settings.forum

    @provide(scope=Scope.APP)
    def provide_mention_settings(self, settings: Settings) -> MentionSettings:
        return settings.mentions

    @provide(scope=Scope.APP)
    def provide_sync_settings(self, settings: Settings) -> SyncSettings:
        return settings.sync

    @provide(scope=Scope.APP)
    def provide_blog_settings(self, settings: Settings) -> BlogSettings:
        return settings.blog
