"""Create reply use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.forum.common import ReplyResponse
from salonhub.domain.error import RateLimitError
from salonhub.domain.service import ForumService, SpamGuard
from salonhub.domain.value import ReplyId, TopicId


class CreateReplyRequest(ApiModel):
    """Create reply request."""

    topic_id: int
    content: str
    author_name: str | None = None
    author_email: str | None = None
    parent_reply_id: int | None = None
    client_key: str


class CreateReplyUseCase:
    """Use case for replying to a topic or to a top-level reply."""

    def __init__(self, spam_guard: SpamGuard, forum_service: ForumService) -> None:
        """Initialize create reply use case.

        Args:
            spam_guard: Shared spam guard
            forum_service: Forum domain service
        """
        self.spam_guard = spam_guard
        self.forum_service = forum_service

    async def execute(self, request: CreateReplyRequest) -> ReplyResponse:
        """Execute create reply flow.

        Raises:
            RateLimitError: If the spam guard rejects the post
            NotFoundError: If the topic or parent reply does not exist
            ValidationError: If the parent belongs to another topic
            MaxNestingDepthError: If the parent is itself a sub-reply
        """
        decision = self.spam_guard.evaluate(request.content, request.client_key)
        if not decision.allowed:
            raise RateLimitError(decision.reason or "Rejected")

        reply = await self.forum_service.create_reply(
            topic_id=TopicId(request.topic_id),
            content=request.content,
            author_name=request.author_name,
            author_email=request.author_email,
            parent_reply_id=(
                ReplyId(request.parent_reply_id)
                if request.parent_reply_id is not None
                else None
            ),
        )
        return ReplyResponse.from_domain(reply)
