"""Lazy enrichment of salons with coordinates and Google reputation data.

Enrichment runs while the directory is rebuilt. Each salon is handled on
its own: a failure is logged and the salon is served with whatever data
it already has.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timedelta

import logfire

from salonhub.config import SyncSettings
from salonhub.domain.model.common import utcnow
from salonhub.domain.model.directory import Salon
from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import PLACE_NOT_FOUND, Coordinates, PlaceDetails

from .base import Service

_STATE_ZIP = re.compile(r"([A-Z]{2})\s+\d{5}")


class Geocoder(ABC):
    """Address to coordinates lookup."""

    @abstractmethod
    async def geocode(self, address: str) -> Coordinates | None:
        """Resolve an address.

        Returns:
            Coordinates, or None if the provider has no result

        Raises:
            ProviderError: If the provider could not be reached or
                answered with an error status
        """
        pass


class PlacesClient(ABC):
    """Google Places lookups."""

    @abstractmethod
    async def search_place(self, query: str) -> str | None:
        """Find the best matching Place ID for a free-text query.

        Returns:
            Place ID, or None if nothing matched

        Raises:
            ProviderError: If the provider could not be reached or
                answered with an error status
        """
        pass

    @abstractmethod
    async def get_place_details(self, place_id: str) -> PlaceDetails | None:
        """Fetch rating, review count and review link for a place.

        Returns:
            Details, or None if the provider returned no result

        Raises:
            ProviderError: If the provider could not be reached or
                answered with an error status
        """
        pass


def extract_city_state(address: str) -> str | None:
    """Pull "City, ST" out of an address shaped like "Street, City, ST 12345"."""
    parts = [p.strip() for p in address.split(",")]
    if len(parts) < 2:
        return None
    match = _STATE_ZIP.search(parts[-1])
    if not match:
        return None
    return f"{parts[-2]}, {match.group(1)}"


class EnrichmentService(Service):
    """Fills in missing coordinates and refreshes stale Places data."""

    def __init__(
        self,
        directory_repository: DirectoryRepository,
        geocoder: Geocoder,
        places_client: PlacesClient,
        settings: SyncSettings,
    ) -> None:
        """Initialize enrichment service.

        Args:
            directory_repository: Where enrichment results are persisted
            geocoder: Address lookup
            places_client: Google Places lookup
            settings: Sync interval and fallback coordinate
        """
        self.directory_repository = directory_repository
        self.geocoder = geocoder
        self.places_client = places_client
        self.settings = settings

    @property
    def default_coordinates(self) -> Coordinates:
        return Coordinates(lat=self.settings.default_lat, lng=self.settings.default_lng)

    async def enrich(self, salon: Salon) -> Salon | None:
        """Bring one salon up to date.

        Returns:
            The salon with coordinates always set and any refreshed Places
            data applied, or None if it could not be geocoded and such
            salons are excluded
        """
        coords = await self.ensure_coordinates(salon)
        if coords is None:
            if self.settings.exclude_ungeocoded:
                logfire.warn("Salon excluded, no coordinates", salon_id=salon.id)
                return None
            coords = self.default_coordinates

        salon = salon.model_copy(update={"lat": coords.lat, "lng": coords.lng})
        return await self.sync_place_data(salon)

    async def ensure_coordinates(self, salon: Salon) -> Coordinates | None:
        """Stored coordinates, or a fresh geocode persisted on success.

        A failed lookup is not persisted, so it is retried on the next
        rebuild.
        """
        if salon.lat is not None and salon.lng is not None:
            return Coordinates(lat=salon.lat, lng=salon.lng)

        with logfire.span("enrichment_service.geocode", salon_id=salon.id):
            try:
                coords = await self.geocoder.geocode(salon.full_address)
            except Exception as e:
                logfire.error(
                    "Geocoding failed",
                    salon_id=salon.id,
                    address=salon.full_address,
                    error=str(e),
                )
                return None

            if coords is None:
                logfire.warn(
                    "No geocoding result", salon_id=salon.id, address=salon.full_address
                )
                return None

            try:
                async with self.directory_repository.savepoint():
                    await self.directory_repository.update_coordinates(salon.id, coords)
            except Exception as e:
                # Served unpersisted; the next rebuild geocodes again
                logfire.error("Saving coordinates failed", salon_id=salon.id, error=str(e))
                return coords

            logfire.info("Salon geocoded", salon_id=salon.id, lat=coords.lat, lng=coords.lng)
            return coords

    def needs_place_sync(self, salon: Salon, now: datetime | None = None) -> bool:
        """Whether Places data should be fetched for a salon.

        Never-synced salons always sync; salons marked not found never do;
        the rest sync once their data is older than the sync interval.
        """
        if not salon.google_place_id:
            return True
        if salon.google_place_id == PLACE_NOT_FOUND:
            return False
        if salon.last_google_sync is None:
            return True
        age = (now or utcnow()) - salon.last_google_sync
        return age > timedelta(days=self.settings.google_places_sync_days)

    async def find_place_id(self, name: str, address: str) -> str | None:
        """Resolve a Place ID with progressively looser queries.

        Tries name with full address, then name with city and state, then
        the name alone.
        """
        place_id = await self.places_client.search_place(f"{name} {address}")

        if not place_id:
            city_state = extract_city_state(address)
            if city_state:
                logfire.info("Retrying place search with city/state", name=name)
                place_id = await self.places_client.search_place(f"{name} {city_state}")

        if not place_id:
            logfire.info("Retrying place search with name only", name=name)
            place_id = await self.places_client.search_place(name)

        return place_id

    async def sync_place_data(self, salon: Salon) -> Salon:
        """Refresh Places data for a salon if due.

        Errors are logged and swallowed so one salon cannot fail the
        directory. The writes run in a savepoint: on failure none of them
        are kept and the salon is returned as it was.

        Returns:
            The salon with any newly persisted fields applied
        """
        if not self.needs_place_sync(salon):
            return salon

        with logfire.span("enrichment_service.sync_place_data", salon_id=salon.id):
            unsynced = salon
            try:
                async with self.directory_repository.savepoint():
                    place_id = salon.google_place_id
                    if not place_id:
                        place_id = await self.find_place_id(salon.name, salon.full_address)
                        if not place_id:
                            synced_at = utcnow()
                            await self.directory_repository.mark_place_not_found(
                                salon.id, synced_at
                            )
                            logfire.warn("Place not found", salon_id=salon.id, name=salon.name)
                            return salon.model_copy(
                                update={
                                    "google_place_id": PLACE_NOT_FOUND,
                                    "last_google_sync": synced_at,
                                }
                            )

                        await self.directory_repository.update_place_id(salon.id, place_id)
                        salon = salon.model_copy(update={"google_place_id": place_id})

                    details = await self.places_client.get_place_details(place_id)
                    if details is None:
                        logfire.warn("No place details", salon_id=salon.id, place_id=place_id)
                        return salon

                    synced_at = utcnow()
                    await self.directory_repository.update_place_details(
                        salon.id, details, synced_at
                    )
                    logfire.info(
                        "Place data synced",
                        salon_id=salon.id,
                        rating=details.rating,
                        review_count=details.review_count,
                    )
                    return salon.model_copy(
                        update={
                            "google_rating": details.rating,
                            "google_review_count": details.review_count,
                            "google_reviews_url": details.reviews_url,
                            "last_google_sync": synced_at,
                        }
                    )
            except Exception as e:
                logfire.error(
                    "Place sync failed",
                    salon_id=salon.id,
                    name=salon.name,
                    error=str(e),
                )
                return unsynced
