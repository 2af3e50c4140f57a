"""
Unit tests for the storefront API client.

Tests error mapping, retry with backoff on HTTP 429, coalescing of
identical in-flight requests and the resource helpers. All traffic goes
through httpx.MockTransport.
"""

import asyncio
import json

import httpx
import pytest

from tripgo.client import (
    ApiClient,
    ApiError,
    calculate_departure_price,
    departure_status_text,
    format_departure_dates,
)

BASE_URL = "http://api.test/api"


def make_client(handler, **kwargs) -> ApiClient:
    return ApiClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.fixture
def sleeps(monkeypatch):
    """Record backoff waits instead of sleeping"""
    recorded = []

    async def fake_sleep(delay):
        recorded.append(delay)

    monkeypatch.setattr("tripgo.client.api_client.asyncio.sleep", fake_sleep)
    return recorded


class TestRequest:
    """Test ApiClient.request response handling."""

    async def test_returns_parsed_json(self):
        async with make_client(lambda r: httpx.Response(200, json={"success": True, "data": [1]})) as api:
            assert await api.request("GET", "/cruises") == {"success": True, "data": [1]}

    async def test_sends_tenant_and_token_headers(self):
        seen = {}

        def handler(request):
            seen["tenant"] = request.headers.get("X-Tenant-ID")
            seen["auth"] = request.headers.get("Authorization")
            seen["path"] = request.url.path
            return httpx.Response(200, json={})

        async with make_client(handler, tenant="tripgo-cruises", token="abc") as api:
            await api.request("GET", "/hotels")

        assert seen == {"tenant": "tripgo-cruises", "auth": "Bearer abc", "path": "/api/hotels"}

    async def test_drops_none_params(self):
        seen = {}

        def handler(request):
            seen["query"] = dict(request.url.params)
            return httpx.Response(200, json={})

        async with make_client(handler) as api:
            await api.request("GET", "/cruises", params={"page": 2, "search": None})

        assert seen["query"] == {"page": "2"}

    async def test_error_message_from_body(self):
        handler = lambda r: httpx.Response(404, json={"success": False, "error": "Cruise not found"})  # noqa: E731
        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("GET", "/cruises/99")

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Cruise not found"
        assert exc_info.value.data["success"] is False

    async def test_message_field_preferred(self):
        handler = lambda r: httpx.Response(400, json={"message": "Bad dates", "error": "x"})  # noqa: E731
        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("GET", "/x")
        assert exc_info.value.message == "Bad dates"

    async def test_non_json_error(self):
        async with make_client(lambda r: httpx.Response(502, text="<html>Bad Gateway</html>")) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("GET", "/cruises")

        assert exc_info.value.status == 502
        assert exc_info.value.message == "HTTP error! status: 502"

    async def test_non_json_success_is_empty_dict(self):
        async with make_client(lambda r: httpx.Response(204)) as api:
            assert await api.request("DELETE", "/hero/home") == {}

    async def test_network_error_maps_to_500(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("GET", "/cruises")

        assert exc_info.value.status == 500
        assert exc_info.value.message.startswith("Network error:")

    async def test_rate_limited(self):
        handler = lambda r: httpx.Response(429, headers={"Retry-After": "7"}, json={})  # noqa: E731
        async with make_client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("GET", "/cruises")

        assert exc_info.value.status == 429
        assert exc_info.value.message == "Too many requests. Please try again later."
        assert exc_info.value.data == {"retry_after": "7"}


class TestCoalescing:
    """Test that identical in-flight requests share one round trip."""

    async def test_concurrent_gets_share_one_request(self):
        calls = []

        async def handler(request):
            calls.append(str(request.url))
            await asyncio.sleep(0.01)
            return httpx.Response(200, json={"data": {"id": 1}})

        async with make_client(handler) as api:
            first, second = await asyncio.gather(
                api.request("GET", "/cruises/1"),
                api.request("GET", "/cruises/1"),
            )

        assert len(calls) == 1
        assert first == second == {"data": {"id": 1}}
        assert api._inflight == {}

    async def test_different_queries_are_separate(self):
        calls = []

        async def handler(request):
            calls.append(str(request.url))
            await asyncio.sleep(0.01)
            return httpx.Response(200, json={})

        async with make_client(handler) as api:
            await asyncio.gather(
                api.request("GET", "/cruises", params={"page": 1}),
                api.request("GET", "/cruises", params={"page": 2}),
            )

        assert len(calls) == 2

    async def test_waiters_receive_the_same_error(self):
        calls = []

        async def handler(request):
            calls.append(1)
            await asyncio.sleep(0.01)
            return httpx.Response(404, json={"error": "Hotel not found"})

        async with make_client(handler) as api:
            results = await asyncio.gather(
                api.request("GET", "/hotels/9"),
                api.request("GET", "/hotels/9"),
                return_exceptions=True,
            )

        assert len(calls) == 1
        assert all(isinstance(r, ApiError) and r.status == 404 for r in results)

    async def test_transport_failure_reaches_every_waiter(self):
        calls = []

        async def handler(request):
            calls.append(1)
            await asyncio.sleep(0.05)
            raise RuntimeError("stream broke")

        async with make_client(handler) as api:
            results = await asyncio.wait_for(
                asyncio.gather(
                    api.request("GET", "/cruises/1"),
                    api.request("GET", "/cruises/1"),
                    return_exceptions=True,
                ),
                timeout=1,
            )

        assert len(calls) == 1
        for result in results:
            assert isinstance(result, ApiError)
            assert result.status == 500
            assert result.message == "Network error: stream broke"
        assert api._inflight == {}

    async def test_cancelled_caller_does_not_cancel_others(self):
        calls = []

        async def handler(request):
            calls.append(1)
            await asyncio.sleep(0.05)
            return httpx.Response(200, json={"data": {"id": 1}})

        async with make_client(handler) as api:
            first = asyncio.create_task(api.request("GET", "/cruises/1"))
            await asyncio.sleep(0.01)
            second = asyncio.create_task(api.request("GET", "/cruises/1"))
            await asyncio.sleep(0.01)
            first.cancel()

            result = await asyncio.wait_for(second, timeout=1)

            with pytest.raises(asyncio.CancelledError):
                await first

        assert result == {"data": {"id": 1}}
        assert len(calls) == 1

    async def test_requests_with_body_are_never_shared(self):
        calls = []

        async def handler(request):
            calls.append(json.loads(request.content))
            await asyncio.sleep(0.01)
            return httpx.Response(200, json={"data": {"token": "t"}})

        async with make_client(handler) as api:
            await asyncio.gather(
                api.request("POST", "/auth/login", json={"email": "a@example.com", "password": "x"}),
                api.request("POST", "/auth/login", json={"email": "b@example.com", "password": "y"}),
            )

        assert len(calls) == 2

    async def test_sequential_requests_are_sent_again(self):
        calls = []

        def handler(request):
            calls.append(1)
            return httpx.Response(200, json={})

        async with make_client(handler) as api:
            await api.request("GET", "/cruises")
            await api.request("GET", "/cruises")

        assert len(calls) == 2


class TestRetry:
    """Test request_with_retry backoff on HTTP 429."""

    async def test_retries_then_succeeds(self, sleeps):
        responses = iter([
            httpx.Response(429, json={}),
            httpx.Response(429, json={}),
            httpx.Response(200, json={"ok": True}),
        ])

        async with make_client(lambda r: next(responses), base_delay=1.0, max_jitter=0.0) as api:
            assert await api.request_with_retry("GET", "/cruises") == {"ok": True}

        assert sleeps == [1.0, 2.0]

    async def test_honours_retry_after(self, sleeps):
        responses = iter([
            httpx.Response(429, headers={"Retry-After": "2"}, json={}),
            httpx.Response(200, json={}),
        ])

        async with make_client(lambda r: next(responses)) as api:
            await api.request_with_retry("GET", "/cruises")

        assert sleeps == [2.0]

    async def test_gives_up_after_max_retries(self, sleeps):
        calls = []

        def handler(request):
            calls.append(1)
            return httpx.Response(429, json={})

        async with make_client(handler, max_retries=3, base_delay=0.5, max_jitter=0.0) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request_with_retry("GET", "/cruises")

        assert exc_info.value.status == 429
        assert len(calls) == 4
        assert sleeps == [0.5, 1.0, 2.0]

    async def test_other_errors_not_retried(self, sleeps):
        calls = []

        def handler(request):
            calls.append(1)
            return httpx.Response(500, json={"error": "Internal Server Error"})

        async with make_client(handler) as api:
            with pytest.raises(ApiError):
                await api.request_with_retry("GET", "/cruises")

        assert len(calls) == 1
        assert sleeps == []

    def test_jitter_is_bounded(self):
        api = ApiClient(BASE_URL, base_delay=1.0, max_jitter=1.0)
        error = ApiError(429, "Too many requests")
        for attempt in range(3):
            delay = api.retry_delay(error, attempt)
            assert 2**attempt <= delay <= 2**attempt + 1.0


class TestResources:
    """Test resource helpers build the right requests."""

    async def test_catalog_get_all_unwraps_items(self):
        def handler(request):
            assert request.url.path == "/api/hotels"
            assert request.url.params["city"] == "Miami"
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": {
                        "hotels": [{"id": 1}],
                        "pagination": {"page": 1, "limit": 10, "total": 1, "pages": 1},
                    },
                },
            )

        async with make_client(handler) as api:
            result = await api.hotels.get_all(city="Miami")

        assert result["data"] == [{"id": 1}]
        assert result["pagination"]["total"] == 1

    async def test_availability_and_route_paths(self):
        paths = []

        def handler(request):
            paths.append((request.url.path, dict(request.url.params)))
            return httpx.Response(200, json={"data": {}})

        async with make_client(handler) as api:
            await api.cruises.check_availability(3, date="2030-01-01", guests=2)
            await api.ships.get_route(4)

        assert paths == [
            ("/api/cruises/3/availability", {"date": "2030-01-01", "guests": "2"}),
            ("/api/ships/4/route", {}),
        ]

    async def test_categories_and_departures(self):
        def handler(request):
            if request.url.path == "/api/cruise-categories":
                return httpx.Response(200, json={"data": {"categories": [{"slug": "luxury"}]}})
            if request.url.path == "/api/cruise-departures/cruise/5":
                return httpx.Response(200, json={"data": [{"id": 10}]})
            return httpx.Response(404, json={"error": "not found"})

        async with make_client(handler) as api:
            assert await api.cruise_categories.get_all() == [{"slug": "luxury"}]
            assert await api.cruise_departures.for_voyage(5) == [{"id": 10}]

    async def test_login_stores_token_and_logout_clears_it(self):
        seen_auth = []

        def handler(request):
            seen_auth.append(request.headers.get("Authorization"))
            if request.url.path == "/api/auth/login":
                return httpx.Response(200, json={"data": {"token": "jwt-123", "user": {}}})
            return httpx.Response(200, json={"data": {}})

        async with make_client(handler) as api:
            await api.auth.login("casey@example.com", "secret123")
            assert api.token == "jwt-123"
            await api.auth.get_profile()
            await api.auth.logout()
            assert api.token is None

        assert seen_auth == [None, "Bearer jwt-123", "Bearer jwt-123"]

    async def test_booking_create_path(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"data": {"id": 1}})

        async with make_client(handler, token="t") as api:
            await api.bookings.create("HOTEL", 7, {"guests": 2})

        assert seen == {"method": "POST", "path": "/api/bookings/hotel/7", "body": {"guests": 2}}

    def test_from_config_reads_client_section(self, config_service):
        config_service.set("client.max_retries", 5)
        api = ApiClient.from_config(BASE_URL, tenant="tripgo-main", timeout=10)

        assert api.max_retries == 5
        assert api.timeout == 10
        assert api.tenant == "tripgo-main"


class TestDisplayHelpers:
    """Test departure display helpers."""

    def test_calculate_departure_price(self):
        assert calculate_departure_price(1000, 1.15) == 1150
        assert calculate_departure_price(999) == 999

    def test_format_departure_dates(self):
        assert format_departure_dates("2026-03-01", "2026-03-08") == "Mar 1, 2026 - Mar 8, 2026"
        assert (
            format_departure_dates("2026-12-28T10:00:00Z", "2027-01-04T10:00:00Z")
            == "Dec 28, 2026 - Jan 4, 2027"
        )

    def test_departure_status_text(self):
        assert departure_status_text("FILLING_FAST") == "Filling Fast"
        assert departure_status_text("SOLD_OUT") == "Sold Out"
        assert departure_status_text("WAITLIST") == "WAITLIST"
