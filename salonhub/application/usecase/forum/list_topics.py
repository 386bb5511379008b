"""List topics use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.application.usecase.forum.common import TopicResponse
from salonhub.config import ForumSettings
from salonhub.domain.service import ForumService
from salonhub.domain.value import TopicSortOrder


class ListTopicsRequest(ApiModel):
    """List topics request."""

    sort_by: str | None = None  # Unrecognized values fall back to "recent"
    tags: list[str] | None = None
    search: str | None = None
    limit: int | None = None
    offset: int = 0


class ListTopicsUseCase:
    """Use case for listing visible forum topics."""

    def __init__(self, forum_service: ForumService, settings: ForumSettings) -> None:
        """Initialize list topics use case.

        Args:
            forum_service: Forum domain service
            settings: Page size limits
        """
        self.forum_service = forum_service
        self.settings = settings

    async def execute(self, request: ListTopicsRequest) -> list[TopicResponse]:
        """Execute list topics flow."""
        try:
            sort = TopicSortOrder(request.sort_by or TopicSortOrder.RECENT.value)
        except ValueError:
            sort = TopicSortOrder.RECENT

        limit = request.limit if request.limit is not None else self.settings.default_page_size
        limit = max(1, min(limit, self.settings.max_page_size))

        topics = await self.forum_service.list_topics(
            sort=sort,
            tags=request.tags,
            search=request.search,
            limit=limit,
            offset=max(0, request.offset),
        )
        return [TopicResponse.from_domain(t) for t in topics]
