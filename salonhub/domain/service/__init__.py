"""Domain services."""

from .analytics_service import AnalyticsService
from .base import Service
from .blog_service import BlogService
from .directory_service import DirectoryCache, DirectoryService
from .enrichment_service import EnrichmentService, Geocoder, PlacesClient
from .forum_service import ForumService
from .mention_service import MentionService, StylistRoster
from .spam_guard import RateLimitInfo, SpamGuard

__all__ = [
    "AnalyticsService",
    "BlogService",
    "DirectoryCache",
    "DirectoryService",
    "EnrichmentService",
    "ForumService",
    "Geocoder",
    "MentionService",
    "PlacesClient",
    "RateLimitInfo",
    "Service",
    "SpamGuard",
    "StylistRoster",
]
