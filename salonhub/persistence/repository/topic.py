"""PostgreSQL implementation of Topic repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonhub.domain.model import NewTopic, Topic
from salonhub.domain.repository import TopicRepository
from salonhub.domain.value import TopicId, TopicSortOrder
from salonhub.persistence.mappers import new_topic_to_dict, row_to_topic
from salonhub.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, topic: NewTopic) -> Topic:
        """Insert a topic with zeroed counters."""
        with logfire.span("topic_repository.create", title=topic.title):
            stmt = (
                topics_table.insert()
                .values(**new_topic_to_dict(topic))
                .returning(topics_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_topic(row._asdict())

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find a topic by ID."""
        stmt = select(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all(
        self,
        sort: TopicSortOrder = TopicSortOrder.RECENT,
        tags: Optional[List[str]] = None,
        search: Optional[str] = None,
        max_flags: int = 5,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Topic]:
        """Find visible topics with filtering and pagination."""
        with logfire.span(
            "topic_repository.find_all",
            sort=sort.value,
            tags=tags or [],
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = select(topics_table).where(topics_table.c.flag_count < max_flags)

            if tags:
                stmt = stmt.where(topics_table.c.tags.overlap(tags))

            if search:
                stmt = stmt.where(
                    or_(
                        topics_table.c.title.icontains(search, autoescape=True),
                        topics_table.c.content.icontains(search, autoescape=True),
                    )
                )

            if sort == TopicSortOrder.REPLIES:
                stmt = stmt.order_by(
                    desc(topics_table.c.replies_count), desc(topics_table.c.updated_at)
                )
            elif sort == TopicSortOrder.NEWEST:
                stmt = stmt.order_by(desc(topics_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(topics_table.c.updated_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            topics = [row_to_topic(row._asdict()) for row in result.fetchall()]
            logfire.info("Found topics", count=len(topics))
            return topics

    async def record_reply(self, topic_id: TopicId, at: datetime) -> None:
        """Atomically increment replies_count and bump updated_at."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(
                replies_count=topics_table.c.replies_count + 1,
                updated_at=at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_upvotes(self, topic_id: TopicId) -> bool:
        """Atomically increment upvotes_count by 1."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(upvotes_count=topics_table.c.upvotes_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def increment_flags(self, topic_id: TopicId) -> bool:
        """Atomically increment flag_count by 1."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(flag_count=topics_table.c.flag_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_with_mentions(self) -> List[Topic]:
        """Topics mentioning at least one stylist, newest first."""
        with logfire.span("topic_repository.find_with_mentions"):
            stmt = (
                select(topics_table)
                .where(func.cardinality(topics_table.c.mentioned_stylist_ids) > 0)
                .order_by(desc(topics_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_topic(row._asdict()) for row in result.fetchall()]
