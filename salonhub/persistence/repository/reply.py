"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonhub.domain.model import NewReply, Reply
from salonhub.domain.repository import ReplyRepository
from salonhub.domain.value import ReplyId, TopicId
from salonhub.persistence.mappers import new_reply_to_dict, row_to_reply
from salonhub.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, reply: NewReply) -> Reply:
        """Insert a reply."""
        with logfire.span("reply_repository.create", topic_id=reply.topic_id):
            stmt = (
                replies_table.insert()
                .values(**new_reply_to_dict(reply))
                .returning(replies_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_reply(row._asdict())

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId, max_flags: int = 5) -> List[Reply]:
        """Find visible replies of a topic, oldest first."""
        with logfire.span("reply_repository.find_by_topic", topic_id=topic_id):
            stmt = (
                select(replies_table)
                .where(
                    replies_table.c.topic_id == topic_id,
                    replies_table.c.flag_count < max_flags,
                )
                .order_by(asc(replies_table.c.created_at), asc(replies_table.c.id))
            )
            result = await self.session.execute(stmt)
            replies = [row_to_reply(row._asdict()) for row in result.fetchall()]
            logfire.info("Found replies", topic_id=topic_id, count=len(replies))
            return replies

    async def increment_flags(self, reply_id: ReplyId) -> bool:
        """Atomically increment flag_count by 1."""
        stmt = (
            replies_table.update()
            .where(replies_table.c.id == reply_id)
            .values(flag_count=replies_table.c.flag_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
