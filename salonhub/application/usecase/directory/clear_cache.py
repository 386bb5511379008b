"""Clear cache use case."""

from salonhub.application.usecase.base import MessageResponse
from salonhub.domain.service import DirectoryService


class ClearCacheUseCase:
    """Use case for evicting the cached directory after data changes."""

    def __init__(self, directory_service: DirectoryService) -> None:
        self.directory_service = directory_service

    async def execute(self, request: None = None) -> MessageResponse:
        self.directory_service.clear_cache()
        return MessageResponse(message="Cache cleared successfully")
