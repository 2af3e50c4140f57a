"""
TripGo API Client

Async HTTP client used by storefronts to call the TripGo API.

- Concurrent identical requests (same method and endpoint) share one
  round trip
- HTTP 429 responses are retried with exponential backoff and jitter,
  honouring the server's Retry-After header
- Failures surface as ApiError carrying the status and parsed body
"""

import asyncio
import logging
import random
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:4000/api"
RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."

STATUS_TEXT = {
    "AVAILABLE": "Available",
    "FILLING_FAST": "Filling Fast",
    "SOLD_OUT": "Sold Out",
    "CANCELLED": "Cancelled",
}


class ApiError(Exception):
    """Raised when the API answers with an error or cannot be reached"""

    def __init__(self, status: int, message: str, data: Any = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.data = data

    def __repr__(self):
        return f"<ApiError(status={self.status}, message='{self.message}')>"


class ApiClient:
    """
    HTTP client for the TripGo API.

    Resource helpers are exposed as attributes:

        async with ApiClient("https://api.tripgo.com/api", tenant="tripgo-cruises") as api:
            page = await api.cruises.get_all(limit=6)
            cruise = await api.cruises.get_by_slug("caribbean-queen")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        tenant: str | None = None,
        token: str | None = None,
        timeout: int = 30,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_jitter: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root including the prefix (e.g., "http://localhost:4000/api")
            tenant: Tenant id, slug or domain sent as X-Tenant-ID
            token: Bearer token for authenticated endpoints
            timeout: Request timeout in seconds
            max_retries: Retries on HTTP 429
            base_delay: Backoff base in seconds, doubled per attempt
            max_jitter: Upper bound of the random delay added to each wait
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.tenant = tenant
        self.token = token
        self.timeout = timeout
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_jitter = max_jitter
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._inflight: dict[str, asyncio.Future] = {}

        self.cruises = VoyageResource(self, "/cruises", "cruises")
        self.ships = VoyageResource(self, "/ships", "ships")
        self.hotels = CatalogResource(self, "/hotels", "hotels")
        self.packages = CatalogResource(self, "/packages", "packages")
        self.cruise_categories = CategoryResource(self, "/cruise-categories")
        self.ship_categories = CategoryResource(self, "/ship-categories")
        self.cruise_departures = DepartureResource(self, "/cruise-departures", "cruise")
        self.ship_departures = DepartureResource(self, "/ship-departures", "ship")
        self.auth = AuthResource(self)
        self.bookings = BookingResource(self)
        self.hero = HeroResource(self)
        self.tenants = TenantResource(self)

    @classmethod
    def from_config(cls, base_url: str = DEFAULT_API_URL, tenant: str | None = None, **overrides) -> "ApiClient":
        """Build a client using the `client` section of config.yaml"""
        from tripgo.config_schema import ClientConfig
        from tripgo.services.config_service import _to_plain, get_config_service

        settings = ClientConfig(**(_to_plain(get_config_service().get("client", {})) or {})).model_dump()
        settings.update(overrides)
        return cls(base_url=base_url, tenant=tenant, **settings)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _headers(self) -> dict[str, str]:
        headers = {}
        if self.tenant:
            headers["X-Tenant-ID"] = str(self.tenant)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    # ----------------------------------------
    # Requests
    # ----------------------------------------

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> dict:
        """
        Send one request and return the parsed JSON body.

        Identical body-less requests already in flight are not sent again;
        callers wait for the pending one and receive its result or error.

        Raises:
            ApiError: Non-2xx response, HTTP 429 or network failure
        """
        method = method.upper()
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if query:
            endpoint = f"{endpoint}?{urlencode(query)}"

        if json is not None:
            return await self._send(method, endpoint, json)

        key = f"{method}-{endpoint}"
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._send(method, endpoint, None))
            self._inflight[key] = task
            task.add_done_callback(lambda done, key=key: self._settle(key, done))
        # A cancelled caller leaves the shared send running for the others
        return await asyncio.shield(task)

    def _settle(self, key: str, task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark retrieved so a request without waiters logs nothing
            task.exception()

    async def _send(self, method: str, endpoint: str, json: Any) -> dict:
        client = await self._get_client()
        try:
            response = await client.request(method, endpoint, json=json, headers=self._headers())
        except Exception as e:
            # Transport failures of any kind reach callers as ApiError
            raise ApiError(500, f"Network error: {e}") from e

        if response.status_code == 429:
            raise ApiError(429, RATE_LIMIT_MESSAGE, {"retry_after": response.headers.get("Retry-After")})

        try:
            data = response.json()
        except ValueError:
            if not response.is_success:
                raise ApiError(response.status_code, f"HTTP error! status: {response.status_code}")
            data = {}

        if not response.is_success:
            message = None
            if isinstance(data, dict):
                message = data.get("message") or data.get("error")
            raise ApiError(response.status_code, message or f"HTTP error! status: {response.status_code}", data)

        return data

    def retry_delay(self, error: ApiError, attempt: int) -> float:
        """
        Seconds to wait before retry number `attempt` (0-based).

        Retry-After wins when the server sent one; otherwise
        base_delay * 2**attempt plus up to max_jitter seconds.
        """
        retry_after = (error.data or {}).get("retry_after") if isinstance(error.data, dict) else None
        if retry_after:
            try:
                return max(0.0, float(retry_after))
            except (TypeError, ValueError):
                pass
        return self.base_delay * 2**attempt + random.random() * self.max_jitter

    async def request_with_retry(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> dict:
        """
        Like request(), retrying HTTP 429 up to max_retries times.

        Other errors are raised immediately; the last 429 is raised once
        the retries are used up.
        """
        attempt = 0
        while True:
            try:
                return await self.request(method, endpoint, params=params, json=json)
            except ApiError as exc:
                if exc.status != 429 or attempt >= self.max_retries:
                    raise
                delay = self.retry_delay(exc, attempt)
                logger.warning(
                    f"Rate limited on {method.upper()} {endpoint}. "
                    f"Retrying in {delay:.1f}s (attempt {attempt + 1}/{self.max_retries})"
                )
                await asyncio.sleep(delay)
                attempt += 1


# ========================================
# Resource helpers
# ========================================

class Resource:
    def __init__(self, client: ApiClient, path: str = ""):
        self._client = client
        self.path = path

    async def _get(self, endpoint: str, **params) -> dict:
        return await self._client.request_with_retry("GET", endpoint, params=params)


class CatalogResource(Resource):
    """Hotels, packages and the shared part of voyages"""

    def __init__(self, client: ApiClient, path: str, items_key: str):
        super().__init__(client, path)
        self.items_key = items_key

    async def get_all(self, **params) -> dict:
        """
        List items, unwrapped from the envelope.

        Returns:
            {"data": [...items], "pagination": {...}}
        """
        response = await self._get(self.path, **params)
        data = response.get("data") or {}
        if isinstance(data, dict):
            return {"data": data.get(self.items_key, []), "pagination": data.get("pagination")}
        return {"data": data, "pagination": response.get("pagination")}

    async def get_by_id(self, item_id: int | str) -> dict:
        return await self._get(f"{self.path}/{item_id}")

    async def get_by_slug(self, slug: str) -> dict:
        return await self._get(f"{self.path}/{slug}")

    async def get_reviews(self, item_id: int | str, **params) -> dict:
        return await self._get(f"{self.path}/{item_id}/reviews", **params)


class VoyageResource(CatalogResource):
    async def check_availability(self, item_id: int | str, date: str | None = None, guests: int = 1) -> dict:
        return await self._get(f"{self.path}/{item_id}/availability", date=date, guests=guests)

    async def get_route(self, item_id: int | str) -> dict:
        return await self._get(f"{self.path}/{item_id}/route")


class CategoryResource(Resource):
    async def get_all(self, **params) -> list:
        response = await self._get(self.path, **params)
        return (response.get("data") or {}).get("categories", [])

    async def get_by_slug(self, slug: str) -> dict:
        """Category with its active voyages"""
        return await self._get(f"{self.path}/slug/{slug}")


class DepartureResource(Resource):
    def __init__(self, client: ApiClient, path: str, voyage_segment: str):
        super().__init__(client, path)
        self.voyage_segment = voyage_segment

    async def for_voyage(self, voyage_id: int, **params) -> list:
        response = await self._get(f"{self.path}/{self.voyage_segment}/{voyage_id}", **params)
        return response.get("data") or []

    async def get_by_id(self, departure_id: int) -> dict:
        return await self._get(f"{self.path}/{departure_id}")


class AuthResource(Resource):
    """Login and registration store the returned token on the client"""

    async def login(self, email: str, password: str) -> dict:
        response = await self._client.request("POST", "/auth/login", json={"email": email, "password": password})
        self._client.token = (response.get("data") or {}).get("token") or self._client.token
        return response

    async def register(self, **user_data) -> dict:
        response = await self._client.request("POST", "/auth/register", json=user_data)
        self._client.token = (response.get("data") or {}).get("token") or self._client.token
        return response

    async def logout(self) -> dict:
        response = await self._client.request("POST", "/auth/logout")
        self._client.token = None
        return response

    async def get_profile(self) -> dict:
        return await self._client.request("GET", "/auth/profile")


class BookingResource(Resource):
    async def create(self, booking_type: str, item_id: int, booking_data: dict) -> dict:
        """Book a cruise, ship, hotel or package"""
        return await self._client.request("POST", f"/bookings/{booking_type.lower()}/{item_id}", json=booking_data)

    async def get_my_bookings(self, **params) -> dict:
        return await self._client.request("GET", "/bookings/user", params=params)

    async def get_by_id(self, booking_id: int) -> dict:
        return await self._client.request("GET", f"/bookings/{booking_id}")

    async def confirm_payment(self, booking_id: int, payment_reference: str) -> dict:
        return await self._client.request(
            "POST",
            f"/bookings/{booking_id}/confirm-payment",
            json={"payment_reference": payment_reference},
        )


class HeroResource(Resource):
    async def get(self, page: str) -> dict:
        return await self._get(f"/hero/{page}")


class TenantResource(Resource):
    async def get_by_domain(self, domain: str) -> dict:
        return await self._get(f"/tenants/domain/{domain}")


# ========================================
# Departure display helpers
# ========================================

def calculate_departure_price(base_price: float, price_modifier: float = 1.0) -> int:
    """Final price of a departure, rounded to whole currency units"""
    return round(base_price * price_modifier)


def _as_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_departure_dates(departure_date: datetime | str, return_date: datetime | str) -> str:
    """
    Example:
        format_departure_dates("2026-03-01", "2026-03-08") -> "Mar 1, 2026 - Mar 8, 2026"
    """
    start, end = _as_datetime(departure_date), _as_datetime(return_date)
    return f"{start:%b} {start.day}, {start.year} - {end:%b} {end.day}, {end.year}"


def departure_status_text(status: str) -> str:
    """Display label of a departure status; unknown values pass through"""
    return STATUS_TEXT.get(status, status)
