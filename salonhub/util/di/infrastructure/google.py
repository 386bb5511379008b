"""Google Maps Platform infrastructure providers."""

from dishka import Scope, provide
import logfire

from salonhub.adapter.google.geocoding import GoogleGeocoder
from salonhub.adapter.google.places import GooglePlacesClient
from salonhub.config import Settings
from salonhub.domain.service import Geocoder, PlacesClient
from salonhub.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider.

    Missing API keys do not stop the app from starting: the clients raise
    on use, and enrichment logs the failure and serves salons unenriched.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_geocoder(self, settings: Settings) -> Geocoder:
        """Provide geocoder."""
        if not settings.google.maps_api_key:
            logfire.warn("Google Maps API key not configured, geocoding disabled")
        return GoogleGeocoder(
            api_key=settings.google.maps_api_key,
            timeout=settings.google.timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_places_client(self, settings: Settings) -> PlacesClient:
        """Provide Google Places client."""
        if not settings.google.places_api_key:
            logfire.warn("Google Places API key not configured, place sync disabled")
        return GooglePlacesClient(
            api_key=settings.google.places_api_key,
            timeout=settings.google.timeout_seconds,
        )
