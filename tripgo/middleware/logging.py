### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Request Logging Middleware -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Request Logging Middleware

Logs all API requests with attribution information:
- Who: tenant and user
- What: Endpoint, method, parameters
- When: Timestamp
- Result: Status code, response time

Logs to both file and the database for the admin access log.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from tripgo.config import get_api_settings
from tripgo.database import SessionLocal
from tripgo.models.access_log import AccessLog
from tripgo.utils import setup_logger

# Set up API logger
api_logger = setup_logger(
    "tripgo.api",
    log_to_file=get_api_settings().log_to_file,
    log_to_console=False,
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all API requests

    Captures:
    - Request ID (short UUID, echoed in X-Request-ID)
    - Method, path and query string
    - Tenant and user (when resolved by the route)
    - Client IP
    - Response status and time

    Excludes admin and documentation requests from database logging
    (still logs to file).
    """

    EXCLUDE_FROM_DB = (
        "/health",
        "/api/admin/",
        "/api/docs",
        "/api/redoc",
        "/api/openapi.json",
        "/favicon.ico",
    )

    def _should_log_to_db(self, path: str) -> bool:
        """Check if request should be logged to database"""
        return not any(path.startswith(prefix) for prefix in self.EXCLUDE_FROM_DB)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()

        method = request.method
        path = request.url.path
        query = str(request.url.query) if request.url.query else ""
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            api_logger.error(f"[{request_id}] ERROR {method} {path} - {e!s}")
            raise

        response_time = (time.time() - start_time) * 1000  # ms

        tenant_id = getattr(request.state, "tenant_id", None)
        user_id = getattr(request.state, "user_id", None)

        log_entry = (
            f"[{request_id}] "
            f"{method} {path}"
            f"{f'?{query}' if query else ''} "
            f"| tenant={tenant_id or '-'} "
            f"| user={user_id or '-'} "
            f"| ip={client_ip} "
            f"| status={status_code} "
            f"| time={response_time:.2f}ms"
        )

        if status_code >= 500:
            api_logger.error(log_entry)
        elif status_code >= 400:
            api_logger.warning(log_entry)
        else:
            api_logger.info(log_entry)

        response.headers["X-Request-ID"] = request_id

        if self._should_log_to_db(path):
            self._save_access_log(
                AccessLog.create_from_request(
                    request_id=request_id,
                    method=method,
                    path=path,
                    status_code=status_code,
                    response_time_ms=response_time,
                    tenant_id=tenant_id,
                    user_id=user_id,
                    query_string=query or None,
                    client_ip=client_ip,
                    user_agent=request.headers.get("User-Agent"),
                )
            )

        return response

    def _save_access_log(self, entry: AccessLog) -> None:
        """Save access log entry in its own session"""
        try:
            db = SessionLocal()
            try:
                db.add(entry)
                db.commit()
            finally:
                db.close()
        except Exception as e:
            # Log the error but don't fail the request
            api_logger.error(f"Failed to save access log: {e!s}")
