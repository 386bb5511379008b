"""Forum domain service: topics, threaded replies, moderation counters."""

import logfire

from salonhub.domain.error import MaxNestingDepthError, NotFoundError, ValidationError
from salonhub.domain.model.common import utcnow
from salonhub.domain.model.reply import (
    MAX_REPLY_DEPTH,
    NewReply,
    Reply,
    ReplyNode,
    TopicThread,
)
from salonhub.domain.model.topic import NewTopic, Topic
from salonhub.domain.repository import ReplyRepository, TopicRepository
from salonhub.domain.value import FlaggableType, ReplyId, StylistId, TopicId, TopicSortOrder

from .base import Service


def build_reply_tree(replies: list[Reply]) -> list[ReplyNode]:
    """Arrange a flat, creation-ordered reply list into a tree.

    First pass indexes every reply; second pass attaches each one to its
    parent. A reply whose parent is missing from the list (for example,
    hidden by flags) is surfaced at the top level.
    """
    nodes: dict[ReplyId, ReplyNode] = {r.id: ReplyNode(reply=r) for r in replies}
    roots: list[ReplyNode] = []
    for reply in replies:
        node = nodes[reply.id]
        parent = (
            nodes.get(reply.parent_reply_id)
            if reply.parent_reply_id is not None
            else None
        )
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)
    return roots


class ForumService(Service):
    """Domain service for forum operations."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        reply_repository: ReplyRepository,
        flag_threshold: int = 5,
    ) -> None:
        """Initialize forum service.

        Args:
            topic_repository: Topic repository
            reply_repository: Reply repository
            flag_threshold: Flag count at which content is hidden
        """
        self.topic_repository = topic_repository
        self.reply_repository = reply_repository
        self.flag_threshold = flag_threshold

    async def create_topic(
        self,
        title: str,
        content: str,
        tags: list[str] | None = None,
        author_name: str | None = None,
        author_email: str | None = None,
        mentioned_stylist_ids: set[StylistId] | list[StylistId] | None = None,
    ) -> Topic:
        """Create a topic with zeroed counters.

        Args:
            title: Topic title
            content: Topic body
            tags: Free-form tags
            author_name: Optional display name
            author_email: Optional contact email
            mentioned_stylist_ids: Stylists detected in the text

        Returns:
            Stored topic
        """
        with logfire.span("forum_service.create_topic", tags=tags or []):
            topic = await self.topic_repository.create(
                NewTopic(
                    title=title,
                    content=content,
                    author_name=author_name,
                    author_email=author_email,
                    tags=list(tags or []),
                    mentioned_stylist_ids=sorted(mentioned_stylist_ids or []),
                )
            )
            logfire.info(
                "Topic created",
                topic_id=topic.id,
                tags=topic.tags,
                mentions=len(topic.mentioned_stylist_ids),
            )
            return topic

    async def list_topics(
        self,
        sort: TopicSortOrder = TopicSortOrder.RECENT,
        tags: list[str] | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Topic]:
        """List visible topics.

        Args:
            sort: Sort order
            tags: Keep topics sharing any of these tags
            search: Case-insensitive match on title or content
            limit: Page size
            offset: Page start

        Returns:
            Topics below the flag threshold
        """
        with logfire.span(
            "forum_service.list_topics",
            sort=sort.value,
            tags=tags or [],
            search=search,
            limit=limit,
            offset=offset,
        ):
            topics = await self.topic_repository.find_all(
                sort=sort,
                tags=tags or None,
                search=search or None,
                max_flags=self.flag_threshold,
                limit=limit,
                offset=offset,
            )
            logfire.info("Topics listed", count=len(topics))
            return topics

    async def get_topic(self, topic_id: TopicId) -> TopicThread:
        """Get a topic with its visible replies as a tree.

        Raises:
            NotFoundError: If the topic does not exist
        """
        with logfire.span("forum_service.get_topic", topic_id=topic_id):
            topic = await self.topic_repository.find_by_id(topic_id)
            if topic is None:
                logfire.warn("Topic not found", topic_id=topic_id)
                raise NotFoundError("Topic", str(topic_id))

            replies = await self.reply_repository.find_by_topic(
                topic_id, max_flags=self.flag_threshold
            )
            return TopicThread(topic=topic, replies=build_reply_tree(replies))

    async def create_reply(
        self,
        topic_id: TopicId,
        content: str,
        author_name: str | None = None,
        author_email: str | None = None,
        parent_reply_id: ReplyId | None = None,
    ) -> Reply:
        """Reply to a topic or to a top-level reply.

        The insert and the topic's counter update run in the caller's
        transaction, so either both happen or neither does.

        Raises:
            NotFoundError: If the topic or parent reply does not exist
            ValidationError: If the parent belongs to another topic
            MaxNestingDepthError: If the parent is itself a sub-reply
        """
        with logfire.span(
            "forum_service.create_reply",
            topic_id=topic_id,
            parent_reply_id=parent_reply_id,
        ):
            topic = await self.topic_repository.find_by_id(topic_id)
            if topic is None:
                logfire.warn("Reply to missing topic", topic_id=topic_id)
                raise NotFoundError("Topic", str(topic_id))

            if parent_reply_id is not None:
                parent = await self.reply_repository.find_by_id(parent_reply_id)
                if parent is None:
                    logfire.warn(
                        "Parent reply not found",
                        topic_id=topic_id,
                        parent_reply_id=parent_reply_id,
                    )
                    raise NotFoundError("Reply", str(parent_reply_id))
                if parent.topic_id != topic_id:
                    logfire.warn(
                        "Parent reply belongs to another topic",
                        topic_id=topic_id,
                        parent_topic_id=parent.topic_id,
                    )
                    raise ValidationError("Parent reply does not belong to this topic")
                if parent.parent_reply_id is not None:
                    logfire.warn(
                        "Reply nesting too deep",
                        topic_id=topic_id,
                        parent_reply_id=parent_reply_id,
                    )
                    raise MaxNestingDepthError(MAX_REPLY_DEPTH)

            reply = await self.reply_repository.create(
                NewReply(
                    topic_id=topic_id,
                    parent_reply_id=parent_reply_id,
                    content=content,
                    author_name=author_name,
                    author_email=author_email,
                )
            )
            await self.topic_repository.record_reply(topic_id, at=utcnow())

            logfire.info(
                "Reply created",
                reply_id=reply.id,
                topic_id=topic_id,
                nested=parent_reply_id is not None,
            )
            return reply

    async def flag_content(self, kind: FlaggableType, content_id: int) -> None:
        """Add one flag to a topic or reply.

        Raises:
            NotFoundError: If the content does not exist
        """
        with logfire.span("forum_service.flag_content", kind=kind.value, id=content_id):
            if kind == FlaggableType.TOPIC:
                found = await self.topic_repository.increment_flags(TopicId(content_id))
                resource = "Topic"
            else:
                found = await self.reply_repository.increment_flags(ReplyId(content_id))
                resource = "Reply"

            if not found:
                logfire.warn("Flag on missing content", kind=kind.value, id=content_id)
                raise NotFoundError(resource, str(content_id))
            logfire.info("Content flagged", kind=kind.value, id=content_id)

    async def upvote_topic(self, topic_id: TopicId) -> None:
        """Add one upvote to a topic.

        Raises:
            NotFoundError: If the topic does not exist
        """
        with logfire.span("forum_service.upvote_topic", topic_id=topic_id):
            if not await self.topic_repository.increment_upvotes(topic_id):
                logfire.warn("Upvote on missing topic", topic_id=topic_id)
                raise NotFoundError("Topic", str(topic_id))
            logfire.info("Topic upvoted", topic_id=topic_id)
