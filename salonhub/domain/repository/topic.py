"""Topic repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from salonhub.domain.model.topic import NewTopic, Topic
from salonhub.domain.value import TopicId, TopicSortOrder


class TopicRepository(ABC):
    """Repository for Topic entity.

    Counter updates must be expressed as atomic increments in the store,
    never as read-modify-write in process memory.
    """

    @abstractmethod
    async def create(self, topic: NewTopic) -> Topic:
        """Insert a topic with zeroed counters.

        Args:
            topic: Topic data

        Returns:
            The stored topic with its assigned id and timestamps
        """
        pass

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID, regardless of flags."""
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.RECENT,
        tags: Optional[List[str]] = None,
        search: Optional[str] = None,
        max_flags: int = 5,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Topic]:
        """Find visible topics with filtering, sorting and pagination.

        Args:
            sort: Sort order
            tags: Keep topics sharing at least one of these tags
            search: Case-insensitive substring matched against title and content
            max_flags: Topics with flag_count >= max_flags are excluded
            limit: Maximum number of topics to return
            offset: Number of topics to skip

        Returns:
            Matching topics
        """
        pass

    @abstractmethod
    async def record_reply(self, topic_id: TopicId, at: datetime) -> None:
        """Atomically add one to replies_count and set updated_at."""
        pass

    @abstractmethod
    async def increment_upvotes(self, topic_id: TopicId) -> bool:
        """Atomically add one to upvotes_count.

        Returns:
            False if the topic does not exist
        """
        pass

    @abstractmethod
    async def increment_flags(self, topic_id: TopicId) -> bool:
        """Atomically add one to flag_count.

        Returns:
            False if the topic does not exist
        """
        pass

    @abstractmethod
    async def find_with_mentions(self) -> List[Topic]:
        """Topics that mention at least one stylist, newest first."""
        pass
