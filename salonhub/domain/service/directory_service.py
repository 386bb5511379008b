"""Directory read model served through a process-wide cache."""

import time

import logfire

from salonhub.domain.model.directory import (
    Certification,
    DirectoryData,
    Salon,
    SalonListing,
    StylistListing,
    normalize_instagram,
)
from salonhub.domain.repository import DirectoryRepository
from salonhub.domain.value import CertificationId, SalonId
from salonhub.util.cache import CacheStats, Clock, SingleFlight, TTLCache

from .base import Service
from .enrichment_service import EnrichmentService

DIRECTORY_KEY = "directory"


class DirectoryCache:
    """Cache slot for the directory aggregate.

    Concurrent misses share one rebuild through the single-flight guard.
    """

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic) -> None:
        self.store: TTLCache[str, DirectoryData] = TTLCache(
            ttl_seconds, name=DIRECTORY_KEY, clock=clock
        )
        self.rebuilds: SingleFlight[str, DirectoryData] = SingleFlight()

    def get(self) -> DirectoryData | None:
        return self.store.get(DIRECTORY_KEY)

    def set(self, data: DirectoryData) -> None:
        self.store.set(DIRECTORY_KEY, data)

    def clear(self) -> None:
        self.store.clear()

    def stats(self) -> CacheStats:
        return self.store.stats()


class DirectoryService(Service):
    """Domain service for the salon directory."""

    def __init__(
        self,
        directory_repository: DirectoryRepository,
        enrichment_service: EnrichmentService,
        cache: DirectoryCache,
    ) -> None:
        """Initialize directory service.

        Args:
            directory_repository: Directory rows
            enrichment_service: Per-salon geocoding and Places sync
            cache: Shared directory cache
        """
        self.directory_repository = directory_repository
        self.enrichment_service = enrichment_service
        self.cache = cache

    async def get_directory(self) -> DirectoryData:
        """Cached directory, rebuilt on a miss."""
        with logfire.span("directory_service.get_directory"):
            cached = self.cache.get()
            if cached is not None:
                logfire.info("Directory cache hit")
                return cached

            logfire.info("Directory cache miss")
            return await self.cache.rebuilds.do(DIRECTORY_KEY, self._rebuild)

    async def _rebuild(self) -> DirectoryData:
        data = await self.build_directory()
        self.cache.set(data)
        return data

    async def build_directory(self) -> DirectoryData:
        """Join salons, stylists and certifications, enriching salons as needed.

        Salons without stylists are left out.
        """
        with logfire.span("directory_service.build_directory"):
            certifications = await self.directory_repository.list_certifications()
            salons = await self.directory_repository.list_salons()
            stylists = await self.directory_repository.list_stylists()
            links = await self.directory_repository.list_stylist_certifications()

            cert_by_id: dict[CertificationId, Certification] = {
                c.id: c for c in certifications
            }
            certs_by_stylist: dict[str, list[Certification]] = {}
            for link in links:
                cert = cert_by_id.get(link.certification_id)
                if cert is not None:
                    certs_by_stylist.setdefault(link.stylist_id, []).append(cert)

            stylists_by_salon: dict[SalonId, list[StylistListing]] = {}
            for stylist in stylists:
                if stylist.salon_id is None:
                    continue
                stylists_by_salon.setdefault(stylist.salon_id, []).append(
                    StylistListing(
                        id=stylist.id,
                        name=stylist.name,
                        phone=stylist.phone,
                        email=stylist.email,
                        website=stylist.website,
                        instagram=normalize_instagram(stylist.instagram),
                        photo=stylist.profile_photo,
                        verified=stylist.verified,
                        can_book_online=stylist.can_book_online,
                        price=stylist.curly_cut_price,
                        certifications=certs_by_stylist.get(stylist.id, []),
                    )
                )

            listings: list[SalonListing] = []
            for salon in salons:
                salon_stylists = stylists_by_salon.get(salon.id)
                if not salon_stylists:
                    continue

                enriched = await self.enrichment_service.enrich(salon)
                if enriched is None or enriched.lat is None or enriched.lng is None:
                    continue
                listings.append(
                    self._to_listing(enriched, enriched.lat, enriched.lng, salon_stylists)
                )

            logfire.info(
                "Directory rebuilt",
                salons=len(listings),
                stylists=sum(len(s.stylists) for s in listings),
                certifications=len(certifications),
            )
            return DirectoryData(salons=listings, certifications=certifications)

    @staticmethod
    def _to_listing(
        salon: Salon, lat: float, lng: float, stylists: list[StylistListing]
    ) -> SalonListing:
        return SalonListing(
            id=salon.id,
            name=salon.name,
            address=salon.display_address,
            city=salon.city,
            state=salon.state,
            zip=salon.zip_code,
            phone=salon.phone,
            website=salon.website,
            photo=salon.photo,
            lat=lat,
            lng=lng,
            google_place_id=salon.google_place_id,
            google_rating=salon.google_rating,
            google_review_count=salon.google_review_count,
            google_reviews_url=salon.google_reviews_url,
            stylists=stylists,
        )

    def clear_cache(self) -> None:
        """Evict the cached directory."""
        self.cache.clear()
        logfire.info("Directory cache cleared")

    def get_cache_stats(self) -> CacheStats:
        """Directory cache counters."""
        return self.cache.stats()
