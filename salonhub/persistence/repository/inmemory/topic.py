"""In-memory topic repository for testing."""

from datetime import datetime
from typing import Optional

from salonhub.domain.model import NewTopic, Topic
from salonhub.domain.model.common import utcnow
from salonhub.domain.repository import TopicRepository
from salonhub.domain.value import TopicId, TopicSortOrder

from .store import InMemoryStore


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def create(self, topic: NewTopic) -> Topic:
        now = utcnow()
        saved = Topic(
            id=self.store.next_topic_id(),
            **topic.model_dump(),
            created_at=now,
            updated_at=now,
        )
        self.store.topics[saved.id] = saved
        return saved

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        return self.store.topics.get(topic_id)

    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.RECENT,
        tags: Optional[list[str]] = None,
        search: Optional[str] = None,
        max_flags: int = 5,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Topic]:
        topics = [t for t in self.store.topics.values() if t.flag_count < max_flags]

        if tags:
            wanted = set(tags)
            topics = [t for t in topics if wanted.intersection(t.tags)]

        if search:
            needle = search.lower()
            topics = [
                t for t in topics if needle in t.title.lower() or needle in t.content.lower()
            ]

        # Id breaks timestamp ties the way insertion order would
        if sort == TopicSortOrder.REPLIES:
            topics.sort(key=lambda t: (t.replies_count, t.updated_at, t.id), reverse=True)
        elif sort == TopicSortOrder.NEWEST:
            topics.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        else:
            topics.sort(key=lambda t: (t.updated_at, t.id), reverse=True)

        return topics[offset : offset + limit]

    async def record_reply(self, topic_id: TopicId, at: datetime) -> None:
        topic = self.store.topics.get(topic_id)
        if topic is not None:
            self.store.topics[topic_id] = topic.model_copy(
                update={"replies_count": topic.replies_count + 1, "updated_at": at}
            )

    async def increment_upvotes(self, topic_id: TopicId) -> bool:
        topic = self.store.topics.get(topic_id)
        if topic is None:
            return False
        self.store.topics[topic_id] = topic.model_copy(
            update={"upvotes_count": topic.upvotes_count + 1}
        )
        return True

    async def increment_flags(self, topic_id: TopicId) -> bool:
        topic = self.store.topics.get(topic_id)
        if topic is None:
            return False
        self.store.topics[topic_id] = topic.model_copy(
            update={"flag_count": topic.flag_count + 1}
        )
        return True

    async def find_with_mentions(self) -> list[Topic]:
        topics = [t for t in self.store.topics.values() if t.mentioned_stylist_ids]
        topics.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        return topics
