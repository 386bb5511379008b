"""Blog post entity.

Posts are loaded into the database out of band; the API only reads them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from salonhub.domain.model.common import DomainModel, utcnow
from salonhub.domain.value import BlogPostId


class BlogPost(DomainModel):
    """Published blog post, addressed publicly by its slug."""

    id: BlogPostId
    slug: str
    title: str
    subtitle: Optional[str] = None
    content: str
    excerpt: str
    author_name: str
    author_bio: Optional[str] = None
    featured: bool = False
    tags: list[str] = Field(default_factory=list)
    read_time: int = Field(ge=0)  # Minutes
    published_at: datetime = Field(default_factory=utcnow)
