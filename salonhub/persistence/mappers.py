"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from salonhub.domain.model import (
    BlogPost,
    Certification,
    NewReply,
    NewTopic,
    Reply,
    Salon,
    Stylist,
    StylistCertification,
    Topic,
)
from salonhub.domain.value import (
    BlogPostId,
    CertificationId,
    ReplyId,
    SalonId,
    StylistId,
    TopicId,
)


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    """NUMERIC columns come back as Decimal."""
    return float(value) if value is not None else None


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic(
        id=TopicId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_name=row.get("author_name"),
        author_email=row.get("author_email"),
        tags=list(row.get("tags") or []),
        mentioned_stylist_ids=list(row.get("mentioned_stylist_ids") or []),
        upvotes_count=row["upvotes_count"],
        replies_count=row["replies_count"],
        flag_count=row["flag_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_topic_to_dict(topic: NewTopic) -> Dict[str, Any]:
    """Convert NewTopic to an insert dict; counters and timestamps use server defaults."""
    return topic.model_dump()


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    parent_id = row.get("parent_reply_id")
    return Reply(
        id=ReplyId(row["id"]),
        topic_id=TopicId(row["topic_id"]),
        parent_reply_id=ReplyId(parent_id) if parent_id is not None else None,
        content=row["content"],
        author_name=row.get("author_name"),
        author_email=row.get("author_email"),
        flag_count=row["flag_count"],
        created_at=row["created_at"],
    )


def new_reply_to_dict(reply: NewReply) -> Dict[str, Any]:
    """Convert NewReply to an insert dict."""
    return reply.model_dump()


def row_to_certification(row: Dict[str, Any]) -> Certification:
    """Convert database row to Certification domain model."""
    return Certification(
        id=CertificationId(row["id"]),
        name=row["name"],
        level=row.get("level") or None,
        organization=row.get("organization") or None,
        description=row.get("description") or None,
    )


def row_to_salon(row: Dict[str, Any]) -> Salon:
    """Convert database row to Salon domain model."""
    return Salon(
        id=SalonId(row["id"]),
        name=row["name"],
        street_address=row["street_address"],
        suite_unit=row.get("suite_unit") or None,
        city=row["city"],
        state=row["state"],
        zip_code=row["zip_code"],
        full_address=row["full_address"],
        phone=row.get("phone") or None,
        website=row.get("website") or None,
        photo=row.get("photo") or None,
        lat=_to_float(row.get("lat")),
        lng=_to_float(row.get("lng")),
        google_place_id=row.get("google_place_id") or None,
        google_rating=_to_float(row.get("google_rating")),
        google_review_count=row.get("google_review_count"),
        google_reviews_url=row.get("google_reviews_url") or None,
        last_google_sync=row.get("last_google_sync"),
    )


def row_to_stylist(row: Dict[str, Any]) -> Stylist:
    """Convert database row to Stylist domain model."""
    salon_id = row.get("salon_id")
    return Stylist(
        id=StylistId(row["id"]),
        name=row["name"],
        salon_id=SalonId(salon_id) if salon_id else None,
        phone=row.get("phone") or None,
        email=row.get("email") or None,
        website=row.get("website") or None,
        instagram=row.get("instagram") or None,
        profile_photo=row.get("profile_photo") or None,
        verified=row["verified"],
        can_book_online=row["can_book_online"],
        # A zero price is treated as unknown
        curly_cut_price=_to_float(row.get("curly_cut_price")) or None,
    )


def row_to_stylist_certification(row: Dict[str, Any]) -> StylistCertification:
    """Convert database row to StylistCertification domain model."""
    return StylistCertification(
        stylist_id=StylistId(row["stylist_id"]),
        certification_id=CertificationId(row["certification_id"]),
    )


def row_to_blog_post(row: Dict[str, Any]) -> BlogPost:
    """Convert database row to BlogPost domain model."""
    return BlogPost(
        id=BlogPostId(row["id"]),
        slug=row["slug"],
        title=row["title"],
        subtitle=row.get("subtitle"),
        content=row["content"],
        excerpt=row["excerpt"],
        author_name=row["author_name"],
        author_bio=row.get("author_bio"),
        featured=row["featured"],
        tags=list(row.get("tags") or []),
        read_time=row["read_time"],
        published_at=row["published_at"],
    )
