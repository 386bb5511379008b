"""Mock Google providers for testing."""

from dishka import Scope, provide

from salonhub.adapter.google.geocoding import MockGeocoder
from salonhub.adapter.google.places import MockPlacesClient
from salonhub.domain.service import Geocoder, PlacesClient
from salonhub.util.di.infrastructure.google import GoogleProvider


class MockGoogleProvider(GoogleProvider):
    """Mock Google provider answering from in-memory tables.

    APP-scoped so a test can seed the tables and inspect recorded calls
    through the container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_geocoder(self) -> MockGeocoder:
        return MockGeocoder()

    @provide(scope=Scope.APP)
    def get_geocoder(self, geocoder: MockGeocoder) -> Geocoder:
        """Provide mock geocoder."""
        return geocoder

    @provide(scope=Scope.APP)
    def get_mock_places_client(self) -> MockPlacesClient:
        return MockPlacesClient()

    @provide(scope=Scope.APP)
    def get_places_client(self, places_client: MockPlacesClient) -> PlacesClient:
        """Provide mock Places client."""
        return places_client
