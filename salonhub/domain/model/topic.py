"""Topic entity.

A topic is a top-level forum discussion thread. Counters are denormalized
and only ever changed through atomic increments in the repository.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from salonhub.domain.model.common import DomainModel, utcnow
from salonhub.domain.value import TopicId


class Topic(DomainModel):
    """Forum topic.

    Invariants:
    - replies_count equals the number of replies attached to the topic
    - flag_count only ever increases
    - updated_at moves forward whenever a reply is added
    """

    id: TopicId
    title: str
    content: str
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    mentioned_stylist_ids: list[str] = Field(default_factory=list)
    upvotes_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)
    flag_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class NewTopic(DomainModel):
    """Topic data before the database assigns an id."""

    title: str
    content: str
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    mentioned_stylist_ids: list[str] = Field(default_factory=list)
