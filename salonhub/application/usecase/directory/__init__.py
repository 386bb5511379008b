"""Directory use cases."""

from .clear_cache import ClearCacheUseCase
from .get_cache_stats import CacheStatsResponse, GetCacheStatsUseCase
from .get_directory import GetDirectoryResponse, GetDirectoryUseCase

__all__ = [
    "CacheStatsResponse",
    "ClearCacheUseCase",
    "GetCacheStatsUseCase",
    "GetDirectoryResponse",
    "GetDirectoryUseCase",
]
