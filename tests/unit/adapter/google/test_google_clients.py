"""Unit tests for the Google Geocoding and Places clients."""

from unittest.mock import patch

import httpx
import pytest

from salonhub.adapter.error import ProviderError
from salonhub.adapter.google.geocoding import GoogleGeocoder
from salonhub.adapter.google.places import GooglePlacesClient
from salonhub.domain.value import Coordinates

_RealAsyncClient = httpx.AsyncClient


def serve(handler):
    """Patch httpx.AsyncClient so every request goes to handler."""
    transport = httpx.MockTransport(handler)
    return patch(
        "httpx.AsyncClient",
        side_effect=lambda **kwargs: _RealAsyncClient(transport=transport),
    )


class TestGoogleGeocoder:
    """Tests for GoogleGeocoder."""

    @pytest.mark.asyncio
    async def test_returns_first_result_and_caches(self):
        """Coordinates come from the first result; repeats skip the network."""
        # Arrange
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={
                    "status": "OK",
                    "results": [{"geometry": {"location": {"lat": 43.1, "lng": -77.6}}}],
                },
            )

        geocoder = GoogleGeocoder(api_key="test-key")

        # Act
        with serve(handler):
            first = await geocoder.geocode("12 Main St, Rochester, NY 14604")
            second = await geocoder.geocode("12 Main St, Rochester, NY 14604")

        # Assert
        assert first == second == Coordinates(lat=43.1, lng=-77.6)
        assert len(requests) == 1
        assert requests[0].url.params["key"] == "test-key"
        assert requests[0].url.params["address"] == "12 Main St, Rochester, NY 14604"

    @pytest.mark.asyncio
    async def test_zero_results(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

        with serve(handler):
            result = await GoogleGeocoder(api_key="k").geocode("nowhere")

        assert result is None

    @pytest.mark.asyncio
    async def test_http_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        with serve(handler), pytest.raises(ProviderError):
            await GoogleGeocoder(api_key="k").geocode("12 Main St")

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with pytest.raises(ProviderError):
            await GoogleGeocoder(api_key="").geocode("12 Main St")

    @pytest.mark.asyncio
    async def test_error_status_raises_provider_error(self):
        """Quota or key errors are failures, not an empty answer."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "REQUEST_DENIED", "results": []})

        with serve(handler), pytest.raises(ProviderError, match="REQUEST_DENIED"):
            await GoogleGeocoder(api_key="k").geocode("12 Main St")


class TestGooglePlacesClient:
    """Tests for GooglePlacesClient."""

    @pytest.mark.asyncio
    async def test_search_place(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["input"] == "Curl Studio Rochester, NY"
            assert request.url.params["inputtype"] == "textquery"
            return httpx.Response(
                200, json={"status": "OK", "candidates": [{"place_id": "place-1"}]}
            )

        with serve(handler):
            place_id = await GooglePlacesClient(api_key="k").search_place(
                "Curl Studio Rochester, NY"
            )

        assert place_id == "place-1"

    @pytest.mark.asyncio
    async def test_search_place_no_candidates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ZERO_RESULTS", "candidates": []})

        with serve(handler):
            place_id = await GooglePlacesClient(api_key="k").search_place("Nothing")

        assert place_id is None

    @pytest.mark.asyncio
    async def test_get_place_details(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["place_id"] == "place-1"
            return httpx.Response(
                200,
                json={
                    "status": "OK",
                    "result": {
                        "rating": 4.7,
                        "user_ratings_total": 88,
                        "url": "https://maps.google.com/?cid=9",
                    },
                },
            )

        with serve(handler):
            details = await GooglePlacesClient(api_key="k").get_place_details("place-1")

        assert details is not None
        assert details.rating == 4.7
        assert details.review_count == 88
        assert details.reviews_url == "https://maps.google.com/?cid=9"

    @pytest.mark.asyncio
    async def test_transport_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with serve(handler), pytest.raises(ProviderError):
            await GooglePlacesClient(api_key="k").search_place("Curl Studio")

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with pytest.raises(ProviderError):
            await GooglePlacesClient(api_key="").get_place_details("place-1")

    @pytest.mark.asyncio
    async def test_search_place_over_query_limit_raises(self):
        """OVER_QUERY_LIMIT must not look like a place with no candidates."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "OVER_QUERY_LIMIT"})

        with serve(handler), pytest.raises(ProviderError, match="OVER_QUERY_LIMIT"):
            await GooglePlacesClient(api_key="k").search_place("Curl Studio")

    @pytest.mark.asyncio
    async def test_get_place_details_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "NOT_FOUND"})

        with serve(handler):
            details = await GooglePlacesClient(api_key="k").get_place_details("gone")

        assert details is None

    @pytest.mark.asyncio
    async def test_get_place_details_denied_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "REQUEST_DENIED"})

        with serve(handler), pytest.raises(ProviderError):
            await GooglePlacesClient(api_key="k").get_place_details("place-1")
