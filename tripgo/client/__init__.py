"""
TripGo storefront client

Async API client with retry on rate limiting, plus a session cache for
navbar data.
"""

from .api_client import (
    ApiClient,
    ApiError,
    calculate_departure_price,
    departure_status_text,
    format_departure_dates,
)
from .session_cache import SessionCache

__all__ = [
    "ApiClient",
    "ApiError",
    "SessionCache",
    "calculate_departure_price",
    "departure_status_text",
    "format_departure_dates",
]
