"""Reply entity and threaded views.

Replies are stored flat with a parent pointer and rebuilt into a tree when
a topic is read. Nesting is capped at two levels: a reply may answer the
topic or a top-level reply, never a sub-reply.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from salonhub.domain.model.common import DomainModel, utcnow
from salonhub.domain.model.topic import Topic
from salonhub.domain.value import ReplyId, TopicId

MAX_REPLY_DEPTH = 2


class Reply(DomainModel):
    """Reply to a topic or to a top-level reply."""

    id: ReplyId
    topic_id: TopicId
    parent_reply_id: Optional[ReplyId] = None
    content: str
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    flag_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)


class NewReply(DomainModel):
    """Reply data before the database assigns an id."""

    topic_id: TopicId
    parent_reply_id: Optional[ReplyId] = None
    content: str
    author_name: Optional[str] = None
    author_email: Optional[str] = None


@dataclass
class ReplyNode:
    """Reply with its direct children attached, in creation order."""

    reply: Reply
    children: list["ReplyNode"] = field(default_factory=list)


@dataclass
class TopicThread:
    """Topic with its visible replies arranged as a tree."""

    topic: Topic
    replies: list[ReplyNode]
