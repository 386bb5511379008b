"""Domain model entities."""

from salonhub.domain.model.blog import BlogPost
from salonhub.domain.model.directory import (
    Certification,
    DirectoryData,
    Salon,
    SalonListing,
    Stylist,
    StylistCertification,
    StylistListing,
)
from salonhub.domain.model.mention import MentionStats, TopicReference
from salonhub.domain.model.reply import NewReply, Reply, ReplyNode, TopicThread
from salonhub.domain.model.topic import NewTopic, Topic

__all__ = [
    "Topic",
    "NewTopic",
    "Reply",
    "NewReply",
    "ReplyNode",
    "TopicThread",
    "Salon",
    "Stylist",
    "Certification",
    "StylistCertification",
    "SalonListing",
    "StylistListing",
    "DirectoryData",
    "MentionStats",
    "TopicReference",
    "BlogPost",
]
