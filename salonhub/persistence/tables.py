"""SQLAlchemy table definitions for the salon directory and forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# DIRECTORY TABLES
# ============================================================================
certifications_table = Table(
    "certifications",
    metadata,
    Column("id", String(255), primary_key=True),  # Slug of the name
    Column("name", Text, nullable=False),
    Column("level", Text, nullable=True),
    Column("organization", Text, nullable=True),
    Column("description", Text, nullable=True),
)

salons_table = Table(
    "salons",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", Text, nullable=False),
    Column("street_address", Text, nullable=False),
    Column("suite_unit", Text, nullable=True),
    Column("city", Text, nullable=False),
    Column("state", String(2), nullable=False),
    Column("zip_code", String(10), nullable=False),
    Column("full_address", Text, nullable=False),
    Column("phone", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column("photo", Text, nullable=True),
    Column("lat", Numeric(10, 7), nullable=True),
    Column("lng", Numeric(10, 7), nullable=True),
    # Place ID, or 'NOT_FOUND' once every search strategy has failed
    Column("google_place_id", Text, nullable=True),
    Column("google_rating", Numeric(2, 1), nullable=True),
    Column("google_review_count", Integer, nullable=True),
    Column("google_reviews_url", Text, nullable=True),
    Column("last_google_sync", TIMESTAMP(timezone=True), nullable=True),
)

stylists_table = Table(
    "stylists",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", Text, nullable=False),
    Column(
        "salon_id",
        String(255),
        ForeignKey("salons.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("phone", Text, nullable=True),
    Column("email", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column("instagram", Text, nullable=True),  # May hold several handles split by '|'
    Column("profile_photo", Text, nullable=True),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("can_book_online", Boolean, nullable=False, server_default="false"),
    Column("curly_cut_price", Numeric(10, 2), nullable=True),
)

Index("idx_stylists_salon_id", stylists_table.c.salon_id)

stylist_certifications_table = Table(
    "stylist_certifications",
    metadata,
    Column(
        "stylist_id",
        String(255),
        ForeignKey("stylists.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "certification_id",
        String(255),
        ForeignKey("certifications.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

# ============================================================================
# FORUM TABLES
# ============================================================================
topics_table = Table(
    "forum_topics",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("author_name", Text, nullable=True),
    Column("author_email", Text, nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("mentioned_stylist_ids", ARRAY(Text), nullable=False, server_default="{}"),
    Column("upvotes_count", Integer, nullable=False, server_default="0"),
    Column("replies_count", Integer, nullable=False, server_default="0"),
    Column("flag_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Last activity: creation or newest reply
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_forum_topics_updated_at", topics_table.c.updated_at.desc())
Index("idx_forum_topics_created_at", topics_table.c.created_at.desc())
Index("idx_forum_topics_tags", topics_table.c.tags, postgresql_using="gin")

replies_table = Table(
    "forum_replies",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "topic_id",
        Integer,
        ForeignKey("forum_topics.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_reply_id",
        Integer,
        ForeignKey("forum_replies.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("author_name", Text, nullable=True),
    Column("author_email", Text, nullable=True),
    Column("flag_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_forum_replies_topic_id", replies_table.c.topic_id, replies_table.c.created_at)

# ============================================================================
# BLOG TABLES
# ============================================================================
blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slug", String(255), nullable=False, unique=True),
    Column("title", Text, nullable=False),
    Column("subtitle", Text, nullable=True),
    Column("content", Text, nullable=False),  # Markdown
    Column("excerpt", Text, nullable=False),
    Column("author_name", Text, nullable=False),
    Column("author_bio", Text, nullable=True),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("read_time", Integer, nullable=False),
    Column(
        "published_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blog_posts_published_at", blog_posts_table.c.published_at.desc())
