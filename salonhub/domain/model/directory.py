"""Directory entities and the aggregated directory read model.

Rows (Salon, Stylist, Certification) mirror the persisted tables. The
listing models are the projection served by GET /api/directory.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from salonhub.domain.model.common import DomainModel
from salonhub.domain.value import CertificationId, SalonId, StylistId


class Certification(DomainModel):
    """Certification a stylist can hold."""

    id: CertificationId
    name: str
    level: Optional[str] = None
    organization: Optional[str] = None
    description: Optional[str] = None


class Salon(DomainModel):
    """Salon row, including lazily enriched fields."""

    id: SalonId
    name: str
    street_address: str
    suite_unit: Optional[str] = None
    city: str
    state: str
    zip_code: str
    full_address: str
    phone: Optional[str] = None
    website: Optional[str] = None
    photo: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    google_place_id: Optional[str] = None
    google_rating: Optional[float] = None
    google_review_count: Optional[int] = None
    google_reviews_url: Optional[str] = None
    last_google_sync: Optional[datetime] = None

    @property
    def display_address(self) -> str:
        """Street, optional suite, and 'City, ST ZIP' joined with commas."""
        parts = [
            self.street_address,
            self.suite_unit,
            f"{self.city}, {self.state} {self.zip_code}",
        ]
        return ", ".join(p for p in parts if p)


class Stylist(DomainModel):
    """Stylist row."""

    id: StylistId
    name: str
    salon_id: Optional[SalonId] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    profile_photo: Optional[str] = None
    verified: bool = False
    can_book_online: bool = False
    curly_cut_price: Optional[float] = None


class StylistCertification(DomainModel):
    """Link between a stylist and a certification."""

    stylist_id: StylistId
    certification_id: CertificationId


class StylistListing(DomainModel):
    """Stylist as shown in the directory."""

    id: StylistId
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    instagram: Optional[str] = None
    photo: Optional[str] = None
    verified: bool = False
    can_book_online: bool = False
    price: Optional[float] = None
    certifications: list[Certification] = Field(default_factory=list)


class SalonListing(DomainModel):
    """Salon as shown in the directory, always with coordinates."""

    id: SalonId
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: Optional[str] = None
    website: Optional[str] = None
    photo: Optional[str] = None
    lat: float
    lng: float
    google_place_id: Optional[str] = None
    google_rating: Optional[float] = None
    google_review_count: Optional[int] = None
    google_reviews_url: Optional[str] = None
    stylists: list[StylistListing]


class DirectoryData(DomainModel):
    """Complete directory aggregate."""

    salons: list[SalonListing]
    certifications: list[Certification]


def normalize_instagram(handle: Optional[str]) -> Optional[str]:
    """Return the primary Instagram handle with a leading '@'.

    Multiple handles may be stored separated by '|'; only the first is used.
    """
    if not handle:
        return None
    trimmed = handle.strip()
    if not trimmed:
        return None
    primary = trimmed.split("|")[0].strip()
    if not primary:
        return None
    return primary if primary.startswith("@") else f"@{primary}"
