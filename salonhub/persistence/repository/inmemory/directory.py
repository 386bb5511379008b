"""In-memory directory repository for testing."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

from salonhub.domain.model import Certification, Salon, Stylist, StylistCertification
from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import (
    PLACE_NOT_FOUND,
    Coordinates,
    PlaceDetails,
    SalonId,
    StylistId,
)

from .store import InMemoryStore


class InMemoryDirectoryRepository(DirectoryRepository):
    """In-memory implementation of DirectoryRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def list_salons(self) -> list[Salon]:
        return sorted(self.store.salons.values(), key=lambda s: s.name)

    async def list_stylists(self) -> list[Stylist]:
        return sorted(self.store.stylists.values(), key=lambda s: s.name)

    async def list_certifications(self) -> list[Certification]:
        return sorted(self.store.certifications, key=lambda c: c.name)

    async def list_stylist_certifications(self) -> list[StylistCertification]:
        return list(self.store.stylist_certifications)

    async def list_stylist_names(self) -> list[tuple[StylistId, str]]:
        return [(s.id, s.name) for s in self.store.stylists.values()]

    def _update(self, salon_id: SalonId, **changes) -> None:
        salon = self.store.salons.get(salon_id)
        if salon is not None:
            self.store.salons[salon_id] = salon.model_copy(update=changes)

    async def update_coordinates(self, salon_id: SalonId, coords: Coordinates) -> None:
        self._update(salon_id, lat=coords.lat, lng=coords.lng)

    async def update_place_id(self, salon_id: SalonId, place_id: str) -> None:
        self._update(salon_id, google_place_id=place_id)

    async def mark_place_not_found(self, salon_id: SalonId, synced_at: datetime) -> None:
        self._update(salon_id, google_place_id=PLACE_NOT_FOUND, last_google_sync=synced_at)

    async def update_place_details(
        self, salon_id: SalonId, details: PlaceDetails, synced_at: datetime
    ) -> None:
        self._update(
            salon_id,
            google_rating=details.rating,
            google_review_count=details.review_count,
            google_reviews_url=details.reviews_url,
            last_google_sync=synced_at,
        )

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        snapshot = dict(self.store.salons)
        try:
            yield
        except Exception:
            self.store.salons.clear()
            self.store.salons.update(snapshot)
            raise
