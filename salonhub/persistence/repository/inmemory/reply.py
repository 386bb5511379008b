"""In-memory reply repository for testing."""

from typing import Optional

from salonhub.domain.model import NewReply, Reply
from salonhub.domain.model.common import utcnow
from salonhub.domain.repository import ReplyRepository
from salonhub.domain.value import ReplyId, TopicId

from .store import InMemoryStore


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def create(self, reply: NewReply) -> Reply:
        saved = Reply(id=self.store.next_reply_id(), **reply.model_dump(), created_at=utcnow())
        self.store.replies[saved.id] = saved
        return saved

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        return self.store.replies.get(reply_id)

    async def find_by_topic(self, topic_id: TopicId, max_flags: int = 5) -> list[Reply]:
        replies = [
            r
            for r in self.store.replies.values()
            if r.topic_id == topic_id and r.flag_count < max_flags
        ]
        replies.sort(key=lambda r: (r.created_at, r.id))
        return replies

    async def increment_flags(self, reply_id: ReplyId) -> bool:
        reply = self.store.replies.get(reply_id)
        if reply is None:
            return False
        self.store.replies[reply_id] = reply.model_copy(
            update={"flag_count": reply.flag_count + 1}
        )
        return True
