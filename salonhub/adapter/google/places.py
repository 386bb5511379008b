"""Google Places API client (Find Place and Place Details)."""

import httpx
import logfire

from salonhub.adapter.error import ProviderError
from salonhub.domain.service.enrichment_service import PlacesClient
from salonhub.domain.value import PlaceDetails


class GooglePlacesClient(PlacesClient):
    """Places client calling the legacy Places JSON web service."""

    def __init__(self, api_key: str, timeout: float = 10.0) -> None:
        """Initialize Places client.

        Args:
            api_key: Google Places API key
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout
        self.find_place_url = (
            "https://maps.googleapis.com/maps/api/place/findplacefromtext/json"
        )
        self.details_url = "https://maps.googleapis.com/maps/api/place/details/json"

    async def _get(self, url: str, params: dict[str, str]) -> dict:
        if not self.api_key:
            raise ProviderError("google-places", "GOOGLE__PLACES_API_KEY not set")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    params={**params, "key": self.api_key},
                    timeout=self.timeout,
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logfire.error("Google Places HTTP error", url=url, error=str(e))
            raise ProviderError("google-places", f"HTTP error: {e}") from e

    async def search_place(self, query: str) -> str | None:
        """Find Place from free text.

        Args:
            query: Business name, optionally with an address

        Returns:
            Place ID of the first candidate, or None when Google has no
            candidate for the query

        Raises:
            ProviderError: If the key is missing, the request fails, or
                Google answers with an error status (quota, denied key)
        """
        data = await self._get(
            self.find_place_url,
            {"input": query, "inputtype": "textquery", "fields": "place_id"},
        )

        status = data.get("status")
        candidates = data.get("candidates") or []
        if status == "OK" and candidates:
            place_id = candidates[0]["place_id"]
            logfire.info("Place ID found", query=query, place_id=place_id)
            return place_id

        if status in ("OK", "ZERO_RESULTS"):
            return None

        logfire.warn("Place search failed", query=query, status=status)
        raise ProviderError("google-places", f"Find Place status {status}")

    async def get_place_details(self, place_id: str) -> PlaceDetails | None:
        """Fetch rating, total ratings and Maps URL for a place.

        Returns:
            Details, or None if Google no longer knows the place

        Raises:
            ProviderError: If the key is missing, the request fails, or
                Google answers with an error status
        """
        data = await self._get(
            self.details_url,
            {"place_id": place_id, "fields": "rating,user_ratings_total,url"},
        )

        status = data.get("status")
        result = data.get("result")
        if status not in ("OK", "NOT_FOUND", "ZERO_RESULTS"):
            logfire.warn("Place details failed", place_id=place_id, status=status)
            raise ProviderError("google-places", f"Place Details status {status}")

        if not result:
            logfire.warn("Place details unavailable", place_id=place_id, status=status)
            return None

        return PlaceDetails(
            place_id=place_id,
            rating=result.get("rating"),
            review_count=result.get("user_ratings_total"),
            reviews_url=result.get("url"),
        )


class MockPlacesClient(PlacesClient):
    """Places client answering from fixed tables, for tests and local runs."""

    def __init__(
        self,
        places: dict[str, str] | None = None,
        details: dict[str, PlaceDetails] | None = None,
    ) -> None:
        """Initialize mock client.

        Args:
            places: Query to Place ID
            details: Place ID to details
        """
        self.places: dict[str, str] = dict(places or {})
        self.details: dict[str, PlaceDetails] = dict(details or {})
        self.queries: list[str] = []
        self.detail_requests: list[str] = []

    async def search_place(self, query: str) -> str | None:
        self.queries.append(query)
        return self.places.get(query)

    async def get_place_details(self, place_id: str) -> PlaceDetails | None:
        self.detail_requests.append(place_id)
        return self.details.get(place_id)
