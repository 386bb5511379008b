"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from salonhub.domain.model.reply import NewReply, Reply
from salonhub.domain.value import ReplyId, TopicId


class ReplyRepository(ABC):
    """Repository for Reply entity."""

    @abstractmethod
    async def create(self, reply: NewReply) -> Reply:
        """Insert a reply.

        Args:
            reply: Reply data

        Returns:
            The stored reply with its assigned id and timestamp
        """
        pass

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID, regardless of flags."""
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId, max_flags: int = 5) -> List[Reply]:
        """Find visible replies of a topic in creation order.

        Args:
            topic_id: Owning topic
            max_flags: Replies with flag_count >= max_flags are excluded

        Returns:
            Flat list of replies, oldest first
        """
        pass

    @abstractmethod
    async def increment_flags(self, reply_id: ReplyId) -> bool:
        """Atomically add one to flag_count.

        Returns:
            False if the reply does not exist
        """
        pass
