"""Upvote topic use case."""

from salonhub.application.usecase.base import ApiModel, MessageResponse
from salonhub.domain.service import ForumService
from salonhub.domain.value import TopicId


class UpvoteTopicRequest(ApiModel):
    """Upvote topic request."""

    topic_id: int


class UpvoteTopicUseCase:
    """Use case for upvoting a topic."""

    def __init__(self, forum_service: ForumService) -> None:
        self.forum_service = forum_service

    async def execute(self, request: UpvoteTopicRequest) -> MessageResponse:
        """Execute upvote flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        await self.forum_service.upvote_topic(TopicId(request.topic_id))
        return MessageResponse(message="Topic upvoted successfully")
