"""Shared state behind the in-memory repositories.

Repositories are created per request while the store lives for the whole
app, so data written in one request is visible to the next.
"""

from dataclasses import dataclass, field
from itertools import count

from salonhub.domain.model import (
    BlogPost,
    Certification,
    Reply,
    Salon,
    Stylist,
    StylistCertification,
    Topic,
)
from salonhub.domain.value import BlogPostId, ReplyId, SalonId, StylistId, TopicId


@dataclass
class InMemoryStore:
    """Tables held as plain dicts and lists."""

    topics: dict[TopicId, Topic] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    salons: dict[SalonId, Salon] = field(default_factory=dict)
    stylists: dict[StylistId, Stylist] = field(default_factory=dict)
    certifications: list[Certification] = field(default_factory=list)
    stylist_certifications: list[StylistCertification] = field(default_factory=list)
    blog_posts: dict[BlogPostId, BlogPost] = field(default_factory=dict)
    _topic_ids: count = field(default_factory=lambda: count(1))
    _reply_ids: count = field(default_factory=lambda: count(1))

    def next_topic_id(self) -> TopicId:
        return TopicId(next(self._topic_ids))

    def next_reply_id(self) -> ReplyId:
        return ReplyId(next(self._reply_ids))
