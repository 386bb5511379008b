"""Test configuration and fixtures."""

from datetime import datetime, timezone

from salonhub.domain.model import BlogPost, Salon, Stylist
from salonhub.domain.value import BlogPostId, SalonId, StylistId


class FakeClock:
    """Monotonic clock the test moves by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_salon(salon_id: str = "curl-studio", **overrides) -> Salon:
    """Helper function to build a salon row.

    Defaults describe a salon that has never been geocoded or synced.
    """
    fields = {
        "id": SalonId(salon_id),
        "name": "Curl Studio",
        "street_address": "12 Main St",
        "city": "Rochester",
        "state": "NY",
        "zip_code": "14604",
        "full_address": "12 Main St, Rochester, NY 14604",
    }
    fields.update(overrides)
    return Salon(**fields)


def make_stylist(
    stylist_id: str = "jane-doe",
    name: str = "Jane Doe",
    salon_id: str | None = "curl-studio",
    **overrides,
) -> Stylist:
    """Helper function to build a stylist row."""
    return Stylist(
        id=StylistId(stylist_id),
        name=name,
        salon_id=SalonId(salon_id) if salon_id else None,
        **overrides,
    )


def make_blog_post(post_id: int, slug: str, day: int = 1, **overrides) -> BlogPost:
    """Helper function to build a blog post published on a day of January 2025."""
    fields = {
        "id": BlogPostId(post_id),
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "content": "# Heading\n\nBody text.",
        "excerpt": "A short summary.",
        "author_name": "Alex Rivera",
        "tags": ["Rochester"],
        "read_time": 4,
        "published_at": datetime(2025, 1, day, 9, 0, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return BlogPost(**fields)
