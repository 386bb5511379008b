"""Forum response models shared by the forum use cases."""

from datetime import datetime

from salonhub.application.usecase.base import ApiModel
from salonhub.domain.model import Reply, ReplyNode, Topic


class TopicResponse(ApiModel):
    """Topic as returned by the API."""

    id: int
    title: str
    content: str
    author_name: str | None = None
    author_email: str | None = None
    tags: list[str]
    mentioned_stylist_ids: list[str]
    upvotes_count: int
    replies_count: int
    flag_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, topic: Topic) -> "TopicResponse":
        return cls.model_validate(topic.model_dump())


class ReplyResponse(ApiModel):
    """Reply as returned by the API."""

    id: int
    topic_id: int
    parent_reply_id: int | None = None
    content: str
    author_name: str | None = None
    author_email: str | None = None
    flag_count: int
    created_at: datetime

    @classmethod
    def from_domain(cls, reply: Reply) -> "ReplyResponse":
        return cls.model_validate(reply.model_dump())


class ReplyNodeResponse(ReplyResponse):
    """Reply with its direct children."""

    children: list["ReplyNodeResponse"] = []

    @classmethod
    def from_node(cls, node: ReplyNode) -> "ReplyNodeResponse":
        return cls(
            **node.reply.model_dump(),
            children=[cls.from_node(child) for child in node.children],
        )
