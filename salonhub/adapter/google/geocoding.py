"""Google Geocoding API client."""

import httpx
import logfire

from salonhub.adapter.error import ProviderError
from salonhub.domain.service.enrichment_service import Geocoder
from salonhub.domain.value import Coordinates


class GoogleGeocoder(Geocoder):
    """Geocoder calling the Google Geocoding JSON API.

    Successful lookups are kept in memory for the life of the process, so
    an address is resolved at most once.
    """

    def __init__(self, api_key: str, timeout: float = 10.0) -> None:
        """Initialize geocoder.

        Args:
            api_key: Google Maps API key
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout
        self.url = "https://maps.googleapis.com/maps/api/geocode/json"
        self._cache: dict[str, Coordinates] = {}

    async def geocode(self, address: str) -> Coordinates | None:
        """Resolve an address to coordinates.

        Args:
            address: Full postal address

        Returns:
            Coordinates of the first result, or None when Google has none

        Raises:
            ProviderError: If the key is missing, the request fails, or
                Google answers with an error status
        """
        cached = self._cache.get(address)
        if cached is not None:
            return cached

        if not self.api_key:
            raise ProviderError("google-geocoding", "GOOGLE__MAPS_API_KEY not set")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.url,
                    params={"address": address, "key": self.api_key},
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logfire.error("Geocoding HTTP error", address=address, error=str(e))
            raise ProviderError("google-geocoding", f"HTTP error: {e}") from e

        status = data.get("status")
        results = data.get("results") or []
        if status not in ("OK", "ZERO_RESULTS"):
            logfire.warn("Geocoding failed", address=address, status=status)
            raise ProviderError("google-geocoding", f"status {status}")

        if not results:
            logfire.warn("Geocoding returned no result", address=address, status=status)
            return None

        location = results[0]["geometry"]["location"]
        coords = Coordinates(lat=location["lat"], lng=location["lng"])
        self._cache[address] = coords
        return coords


class MockGeocoder(Geocoder):
    """Geocoder answering from a fixed table, for tests and local runs."""

    def __init__(self, results: dict[str, Coordinates] | None = None) -> None:
        self.results: dict[str, Coordinates] = dict(results or {})
        self.calls: list[str] = []

    async def geocode(self, address: str) -> Coordinates | None:
        self.calls.append(address)
        return self.results.get(address)
