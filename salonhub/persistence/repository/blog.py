"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from salonhub.domain.model import BlogPost
from salonhub.domain.repository import BlogRepository
from salonhub.persistence.mappers import row_to_blog_post
from salonhub.persistence.tables import blog_posts_table


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self, tag: Optional[str] = None, limit: int = 50) -> List[BlogPost]:
        """Posts newest first, optionally restricted to one tag."""
        with logfire.span("blog_repository.find_all", tag=tag, limit=limit):
            stmt = select(blog_posts_table)
            if tag:
                stmt = stmt.where(blog_posts_table.c.tags.contains([tag]))
            stmt = stmt.order_by(
                desc(blog_posts_table.c.published_at), desc(blog_posts_table.c.id)
            ).limit(limit)

            result = await self.session.execute(stmt)
            return [row_to_blog_post(row._asdict()) for row in result.fetchall()]

    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        stmt = select(blog_posts_table).where(blog_posts_table.c.slug == slug)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog_post(row._asdict()) if row else None

    async def find_featured(self) -> Optional[BlogPost]:
        stmt = (
            select(blog_posts_table)
            .where(blog_posts_table.c.featured.is_(True))
            .order_by(desc(blog_posts_table.c.published_at), desc(blog_posts_table.c.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog_post(row._asdict()) if row else None
