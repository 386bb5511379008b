"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from salonhub.domain.value.common import ValueObject

# Stored as a salon's google_place_id once every lookup strategy has failed.
# Salons carrying it are never looked up again.
PLACE_NOT_FOUND = "NOT_FOUND"


class TopicSortOrder(str, Enum):
    """Sort order for topic listings."""

    RECENT = "recent"  # Most recently active first (updated_at DESC)
    REPLIES = "replies"  # Most replies first, ties broken by recent activity
    NEWEST = "newest"  # Newest first (created_at DESC)


class FlaggableType(str, Enum):
    """Type of forum content that can be flagged."""

    TOPIC = "topic"
    REPLY = "reply"


class GuardDecision(ValueObject):
    """Outcome of a spam guard evaluation."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "GuardDecision":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reason: str) -> "GuardDecision":
        return cls(allowed=False, reason=reason)


class Coordinates(ValueObject):
    """Geographic point in decimal degrees."""

    lat: float
    lng: float


class PlaceDetails(ValueObject):
    """Reputation data for a Google Place."""

    place_id: str
    rating: float | None = None
    review_count: int | None = None
    reviews_url: str | None = None
