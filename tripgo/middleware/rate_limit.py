### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Rate Limiting Middleware -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Rate Limiting Middleware

Implements per-client rate limiting using slowapi.
Clients are identified by bearer token when present, otherwise by IP.
Exceeded limits answer 429 with a Retry-After header, which the
storefront client honours when backing off.
"""

import hashlib

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from tripgo.config import get_api_settings
from tripgo.schemas.responses import RateLimitErrorResponse
from tripgo.utils import get_logger

logger = get_logger("tripgo.rate_limit")

settings = get_api_settings()

DEFAULT_RETRY_AFTER = 60


def get_client_identifier(request: Request) -> str:
    """
    Get rate limit identifier for the caller.
    Falls back to IP address if no token present.
    """
    auth = request.headers.get("Authorization", "")
    if auth.lower().startswith("bearer ") and len(auth) > 7:
        digest = hashlib.sha256(auth[7:].encode()).hexdigest()[:16]
        return f"token:{digest}"
    return f"ip:{get_remote_address(request)}"


def default_rate_limit() -> str:
    return f"{settings.rate_limit_per_minute}/minute"


def auth_rate_limit() -> str:
    return f"{settings.auth_rate_limit_per_minute}/minute"


# Create limiter instance
limiter = Limiter(
    key_func=get_client_identifier,
    default_limits=[default_rate_limit()],
    storage_uri="memory://",
)


def _retry_after_seconds(exc: RateLimitExceeded) -> int:
    limit = getattr(exc, "limit", None)
    try:
        return int(limit.limit.get_expiry())
    except (AttributeError, TypeError, ValueError):
        return DEFAULT_RETRY_AFTER


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors"""
    retry_after = _retry_after_seconds(exc)
    logger.warning(
        f"Rate limit exceeded for {get_client_identifier(request)} on "
        f"{request.method} {request.url.path} ({exc.detail})"
    )
    return JSONResponse(
        status_code=429,
        content=RateLimitErrorResponse(
            error=f"Too many requests. Rate limit exceeded: {exc.detail}",
            request_id=getattr(request.state, "request_id", None),
            retry_after=retry_after,
        ).model_dump(),
        headers={"Retry-After": str(retry_after)},
    )
