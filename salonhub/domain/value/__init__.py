"""Domain value objects."""

from salonhub.domain.value.identifiers import (
    BlogPostId,
    CertificationId,
    ReplyId,
    SalonId,
    StylistId,
    TopicId,
)
from salonhub.domain.value.types import (
    PLACE_NOT_FOUND,
    Coordinates,
    FlaggableType,
    GuardDecision,
    PlaceDetails,
    TopicSortOrder,
)

__all__ = [
    # Identifiers
    "TopicId",
    "ReplyId",
    "SalonId",
    "StylistId",
    "CertificationId",
    "BlogPostId",
    # Types
    "PLACE_NOT_FOUND",
    "Coordinates",
    "FlaggableType",
    "GuardDecision",
    "PlaceDetails",
    "TopicSortOrder",
]
