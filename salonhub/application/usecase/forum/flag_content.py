"""Flag content use case."""

from salonhub.application.usecase.base import ApiModel, MessageResponse
from salonhub.domain.service import ForumService
from salonhub.domain.value import FlaggableType


class FlagContentRequest(ApiModel):
    """Flag content request."""

    content_type: FlaggableType
    content_id: int


class FlagContentUseCase:
    """Use case for flagging a topic or reply as inappropriate."""

    def __init__(self, forum_service: ForumService) -> None:
        self.forum_service = forum_service

    async def execute(self, request: FlagContentRequest) -> MessageResponse:
        """Execute flag flow.

        Raises:
            NotFoundError: If the content does not exist
        """
        await self.forum_service.flag_content(request.content_type, request.content_id)
        return MessageResponse(message="Content flagged successfully")
