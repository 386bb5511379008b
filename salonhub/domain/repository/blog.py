"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from salonhub.domain.model.blog import BlogPost


class BlogRepository(ABC):
    """Read-only repository for blog posts, newest first."""

    @abstractmethod
    async def find_all(self, tag: Optional[str] = None, limit: int = 50) -> List[BlogPost]:
        """Posts by publication date, newest first.

        Args:
            tag: Only posts carrying this exact tag
            limit: Maximum number of posts
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        pass

    @abstractmethod
    async def find_featured(self) -> Optional[BlogPost]:
        """The most recently published featured post."""
        pass
