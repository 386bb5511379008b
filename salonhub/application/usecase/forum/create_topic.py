"""Create topic use case."""

import logfire

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.forum.common import TopicResponse
from salonhub.domain.error import RateLimitError
from salonhub.domain.service import ForumService, MentionService, SpamGuard


class CreateTopicRequest(ApiModel):
    """Create topic request."""

    title: str
    content: str
    author_name: str | None = None
    author_email: str | None = None
    tags: list[str] = []
    client_key: str  # Requesting client, used for rate limiting


class CreateTopicUseCase:
    """Use case for starting a forum topic.

    Runs the spam guard, links mentioned stylists, then stores the topic.
    """

    def __init__(
        self,
        spam_guard: SpamGuard,
        mention_service: MentionService,
        forum_service: ForumService,
    ) -> None:
        """Initialize create topic use case.

        Args:
            spam_guard: Shared spam guard
            mention_service: Mention detection
            forum_service: Forum domain service
        """
        self.spam_guard = spam_guard
        self.mention_service = mention_service
        self.forum_service = forum_service

    async def execute(self, request: CreateTopicRequest) -> TopicResponse:
        """Execute create topic flow.

        Raises:
            RateLimitError: If the spam guard rejects the post
        """
        decision = self.spam_guard.evaluate(
            request.content, request.client_key, title=request.title
        )
        if not decision.allowed:
            raise RateLimitError(decision.reason or "Rejected")

        mentioned = await self.mention_service.detect(request.content, title=request.title)

        topic = await self.forum_service.create_topic(
            title=request.title,
            content=request.content,
            tags=request.tags,
            author_name=request.author_name,
            author_email=request.author_email,
            mentioned_stylist_ids=mentioned,
        )
        logfire.info("Topic posted", topic_id=topic.id, client_key=request.client_key)
        return TopicResponse.from_domain(topic)
