"""Get topic use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.forum.common import ReplyNodeResponse, TopicResponse
from salonhub.domain.service import ForumService
from salonhub.domain.value import TopicId


class GetTopicRequest(ApiModel):
    """Get topic request."""

    topic_id: int


class GetTopicResponse(TopicResponse):
    """Topic with its visible replies as a tree."""

    replies: list[ReplyNodeResponse]


class GetTopicUseCase:
    """Use case for reading a topic thread."""

    def __init__(self, forum_service: ForumService) -> None:
        self.forum_service = forum_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        thread = await self.forum_service.get_topic(TopicId(request.topic_id))
        return GetTopicResponse(
            **thread.topic.model_dump(),
            replies=[ReplyNodeResponse.from_node(node) for node in thread.replies],
        )
