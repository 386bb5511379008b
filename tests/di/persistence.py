"""Mock persistence providers for testing."""

from dishka import Scope, provide

from salonhub.domain.repository import (
    BlogRepository,
    DirectoryRepository,
    ReplyRepository,
    TopicRepository,
)
from salonhub.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryDirectoryRepository,
    InMemoryReplyRepository,
    InMemoryStore,
    InMemoryTopicRepository,
)
from salonhub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are REQUEST-scoped like their Postgres counterparts. They
    share one APP-scoped store, so each container starts empty while
    requests against the same container see each other's writes.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, store: InMemoryStore) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, store: InMemoryStore) -> ReplyRepository:
        """Provide in-memory reply repository."""
        return InMemoryReplyRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_directory_repository(self, store: InMemoryStore) -> DirectoryRepository:
        """Provide in-memory directory repository."""
        return InMemoryDirectoryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_blog_repository(self, store: InMemoryStore) -> BlogRepository:
        """Provide in-memory blog repository."""
        return InMemoryBlogRepository(store)
