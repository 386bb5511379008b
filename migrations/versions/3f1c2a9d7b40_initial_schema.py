"""initial_schema

Create the schema for the salon directory and community forum:
- Certifications, salons, stylists and the stylist/certification link
- Forum topics (tags and mentioned stylists as arrays)
- Forum replies (one level of nesting below top-level replies)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2025-11-02 10:14:52.381204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # CERTIFICATIONS table
    # ========================================================================
    op.create_table(
        "certifications",
        sa.Column("id", sa.String(255), nullable=False),  # Slug of the name
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("level", sa.Text(), nullable=True),
        sa.Column("organization", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # SALONS table
    # ========================================================================
    op.create_table(
        "salons",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("street_address", sa.Text(), nullable=False),
        sa.Column("suite_unit", sa.Text(), nullable=True),
        sa.Column("city", sa.Text(), nullable=False),
        sa.Column("state", sa.String(2), nullable=False),
        sa.Column("zip_code", sa.String(10), nullable=False),
        sa.Column("full_address", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("photo", sa.Text(), nullable=True),
        sa.Column("lat", sa.Numeric(10, 7), nullable=True),
        sa.Column("lng", sa.Numeric(10, 7), nullable=True),
        sa.Column("google_place_id", sa.Text(), nullable=True),  # or 'NOT_FOUND'
        sa.Column("google_rating", sa.Numeric(2, 1), nullable=True),
        sa.Column("google_review_count", sa.Integer(), nullable=True),
        sa.Column("google_reviews_url", sa.Text(), nullable=True),
        sa.Column("last_google_sync", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # STYLISTS table
    # ========================================================================
    op.create_table(
        "stylists",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("salon_id", sa.String(255), nullable=True),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("instagram", sa.Text(), nullable=True),  # '|'-separated handles
        sa.Column("profile_photo", sa.Text(), nullable=True),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "can_book_online", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("curly_cut_price", sa.Numeric(10, 2), nullable=True),
        sa.ForeignKeyConstraint(["salon_id"], ["salons.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_stylists_salon_id", "stylists", ["salon_id"])

    op.create_table(
        "stylist_certifications",
        sa.Column("stylist_id", sa.String(255), nullable=False),
        sa.Column("certification_id", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["stylist_id"], ["stylists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["certification_id"], ["certifications.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("stylist_id", "certification_id"),
    )

    # ========================================================================
    # FORUM_TOPICS table
    # ========================================================================
    op.create_table(
        "forum_topics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_name", sa.Text(), nullable=True),
        sa.Column("author_email", sa.Text(), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "mentioned_stylist_ids",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("upvotes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("replies_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("flag_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_forum_topics_updated_at",
        "forum_topics",
        [sa.text("updated_at DESC")],
    )
    op.create_index(
        "idx_forum_topics_created_at",
        "forum_topics",
        [sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_forum_topics_tags",
        "forum_topics",
        ["tags"],
        postgresql_using="gin",
    )

    # ========================================================================
    # FORUM_REPLIES table
    # ========================================================================
    op.create_table(
        "forum_replies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("parent_reply_id", sa.Integer(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_name", sa.Text(), nullable=True),
        sa.Column("author_email", sa.Text(), nullable=True),
        sa.Column("flag_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["forum_topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_reply_id"], ["forum_replies.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_forum_replies_topic_id", "forum_replies", ["topic_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("forum_replies")
    op.drop_table("forum_topics")
    op.drop_table("stylist_certifications")
    op.drop_table("stylists")
    op.drop_table("salons")
    op.drop_table("certifications")
