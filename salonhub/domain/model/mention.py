"""Stylist mention analytics."""

from datetime import datetime

from salonhub.domain.model.common import DomainModel
from salonhub.domain.value import StylistId, TopicId


class TopicReference(DomainModel):
    """Topic that mentioned a stylist."""

    id: TopicId
    title: str
    created_at: datetime


class MentionStats(DomainModel):
    """How often a stylist is mentioned, with the latest mentioning topics."""

    stylist_id: StylistId
    stylist_name: str
    mention_count: int
    recent_topics: list[TopicReference]
