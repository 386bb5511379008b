"""Get cache stats use case."""

from salonhub.application.usecase.base import ApiModel
from salonhub.domain.service import DirectoryService


class CacheStatsResponse(ApiModel):
    """Directory cache counters."""

    keys: int
    hits: int
    misses: int
    ttl: float


class GetCacheStatsUseCase:
    """Use case for reading directory cache counters."""

    def __init__(self, directory_service: DirectoryService) -> None:
        self.directory_service = directory_service

    async def execute(self, request: None = None) -> CacheStatsResponse:
        stats = self.directory_service.get_cache_stats()
        return CacheStatsResponse(
            keys=stats.keys, hits=stats.hits, misses=stats.misses, ttl=stats.ttl
        )
