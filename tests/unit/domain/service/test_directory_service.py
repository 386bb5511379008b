"""Unit tests for DirectoryService."""

import asyncio

import pytest

from salonhub.adapter.error import ProviderError
from salonhub.adapter.google.geocoding import MockGeocoder
from salonhub.adapter.google.places import MockPlacesClient
from salonhub.config import SyncSettings
from salonhub.domain.model import Certification, StylistCertification
from salonhub.domain.service import DirectoryCache, DirectoryService, EnrichmentService
from salonhub.domain.service.enrichment_service import PlacesClient
from salonhub.domain.value import (
    CertificationId,
    Coordinates,
    PlaceDetails,
    StylistId,
)
from salonhub.persistence.repository.inmemory import (
    InMemoryDirectoryRepository,
    InMemoryStore,
)
from tests.conftest import FakeClock, make_salon, make_stylist


def seeded_store() -> InMemoryStore:
    with_stylists = make_salon("curl-studio", lat=43.0, lng=-77.0)
    empty = make_salon("empty-salon", name="Empty Salon", lat=43.0, lng=-77.0)
    jane = make_stylist("jane-doe", "Jane Doe", instagram="janecurls|backup")
    cert = Certification(id=CertificationId("devacut"), name="DevaCut", level="Advanced")
    return InMemoryStore(
        salons={with_stylists.id: with_stylists, empty.id: empty},
        stylists={jane.id: jane},
        certifications=[cert],
        stylist_certifications=[
            StylistCertification(
                stylist_id=StylistId("jane-doe"),
                certification_id=CertificationId("devacut"),
            )
        ],
    )


def make_service(
    store: InMemoryStore,
    cache: DirectoryCache | None = None,
    geocoder: MockGeocoder | None = None,
    places: PlacesClient | None = None,
) -> DirectoryService:
    repo = InMemoryDirectoryRepository(store)
    enrichment = EnrichmentService(
        directory_repository=repo,
        geocoder=geocoder or MockGeocoder(),
        places_client=places or MockPlacesClient(),
        settings=SyncSettings(),
    )
    return DirectoryService(
        directory_repository=repo,
        enrichment_service=enrichment,
        cache=cache or DirectoryCache(ttl_seconds=3600, clock=FakeClock()),
    )


class TestBuildDirectory:
    """Tests for build_directory method."""

    @pytest.mark.asyncio
    async def test_joins_stylists_and_certifications(self):
        """Salons carry their stylists; salons without stylists are left out."""
        # Arrange
        service = make_service(seeded_store())

        # Act
        data = await service.build_directory()

        # Assert
        assert [s.id for s in data.salons] == ["curl-studio"]
        salon = data.salons[0]
        assert salon.address == "12 Main St, Rochester, NY 14604"
        assert salon.zip == "14604"
        assert (salon.lat, salon.lng) == (43.0, -77.0)
        stylist = salon.stylists[0]
        assert stylist.instagram == "@janecurls"
        assert [c.name for c in stylist.certifications] == ["DevaCut"]
        assert [c.id for c in data.certifications] == ["devacut"]

    @pytest.mark.asyncio
    async def test_unattached_stylists_skipped(self):
        store = seeded_store()
        loner = make_stylist("loner", "Lone Stylist", salon_id=None)
        store.stylists[loner.id] = loner
        service = make_service(store)

        data = await service.build_directory()

        assert [st.id for s in data.salons for st in s.stylists] == ["jane-doe"]


    @pytest.mark.asyncio
    async def test_failing_salon_does_not_affect_others(self):
        """A Places failure for one salon leaves the rest of the rebuild intact."""

        class PartlyBrokenPlaces(MockPlacesClient):
            async def search_place(self, query: str) -> str | None:
                if query.startswith("Broken Salon"):
                    raise ProviderError("google-places", "Find Place status UNKNOWN_ERROR")
                return await super().search_place(query)

        # Arrange
        store = seeded_store()
        broken = make_salon("broken-salon", name="Broken Salon", lat=42.0, lng=-76.0)
        store.salons[broken.id] = broken
        ann = make_stylist("ann-lee", "Ann Lee", salon_id="broken-salon")
        store.stylists[ann.id] = ann
        curl = store.salons["curl-studio"]
        places = PartlyBrokenPlaces(
            places={f"Curl Studio {curl.full_address}": "place-1"},
            details={"place-1": PlaceDetails(place_id="place-1", rating=4.8)},
        )
        service = make_service(store, places=places)

        # Act
        data = await service.build_directory()

        # Assert
        by_id = {s.id: s for s in data.salons}
        assert set(by_id) == {"broken-salon", "curl-studio"}
        assert by_id["broken-salon"].google_place_id is None
        assert (by_id["broken-salon"].lat, by_id["broken-salon"].lng) == (42.0, -76.0)
        assert by_id["curl-studio"].google_rating == 4.8
        assert store.salons["curl-studio"].google_place_id == "place-1"
        assert store.salons["broken-salon"].google_place_id is None


class TestGetDirectory:
    """Tests for get_directory and the cache."""

    @pytest.mark.asyncio
    async def test_miss_then_hit(self):
        """First read rebuilds; second read is served from cache."""
        # Arrange
        service = make_service(seeded_store())

        # Act
        first = await service.get_directory()
        second = await service.get_directory()

        # Assert
        assert first == second
        stats = service.get_cache_stats()
        assert stats.keys == 1
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.ttl == 3600

    @pytest.mark.asyncio
    async def test_clear_forces_rebuild(self):
        store = seeded_store()
        service = make_service(store)
        await service.get_directory()

        service.clear_cache()
        store.salons.pop("curl-studio")
        data = await service.get_directory()

        assert data.salons == []
        assert service.get_cache_stats().misses == 2

    @pytest.mark.asyncio
    async def test_expiry_forces_rebuild(self):
        clock = FakeClock()
        service = make_service(seeded_store(), DirectoryCache(60, clock=clock))
        await service.get_directory()

        clock.advance(61)
        await service.get_directory()

        assert service.get_cache_stats().misses == 2

    @pytest.mark.asyncio
    async def test_concurrent_misses_share_one_rebuild(self):
        """Requests arriving during a rebuild wait for it instead of starting another."""

        class SlowGeocoder(MockGeocoder):
            async def geocode(self, address: str) -> Coordinates | None:
                self.calls.append(address)
                await asyncio.sleep(0.01)
                return Coordinates(lat=1.0, lng=2.0)

        # Arrange
        store = seeded_store()
        salon = store.salons["curl-studio"]
        store.salons[salon.id] = salon.model_copy(update={"lat": None, "lng": None})
        geocoder = SlowGeocoder()
        cache = DirectoryCache(ttl_seconds=3600, clock=FakeClock())
        services = [make_service(store, cache, geocoder) for _ in range(3)]

        # Act
        results = await asyncio.gather(*(s.get_directory() for s in services))

        # Assert
        assert len(geocoder.calls) == 1
        assert results[0] == results[1] == results[2]

    @pytest.mark.asyncio
    async def test_rebuild_after_clear_skips_synced_salons(self):
        """Places data persisted by one rebuild is reused by the next."""
        # Arrange
        store = seeded_store()
        curl = store.salons["curl-studio"]
        places = MockPlacesClient(
            places={f"Curl Studio {curl.full_address}": "place-1"},
            details={"place-1": PlaceDetails(place_id="place-1", rating=4.8)},
        )
        service = make_service(store, places=places)

        # Act
        first = await service.get_directory()
        service.clear_cache()
        second = await service.get_directory()

        # Assert
        assert first == second
        assert places.queries == [f"Curl Studio {curl.full_address}"]
        assert places.detail_requests == ["place-1"]
