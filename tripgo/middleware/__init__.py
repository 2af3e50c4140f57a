### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Middleware Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Middleware Package

Contains middleware and request dependencies:
- auth: JWT validation and role checks
- tenant: Per-request tenant resolution
- logging: Request/response logging
- rate_limit: Per-client rate limiting
"""

from .auth import (
    create_access_token,
    get_current_user,
    get_optional_user,
    require_admin,
    require_customer,
    require_role,
)
from .logging import RequestLoggingMiddleware
from .tenant import (
    TenantResolver,
    get_current_tenant,
    get_tenant_user,
    require_platform_admin,
    require_tenant_admin,
    require_tenant_customer,
    require_tenant_role,
)

__all__ = [
    "RequestLoggingMiddleware",
    "TenantResolver",
    "create_access_token",
    "get_current_tenant",
    "get_current_user",
    "get_optional_user",
    "get_tenant_user",
    "require_admin",
    "require_customer",
    "require_platform_admin",
    "require_role",
    "require_tenant_admin",
    "require_tenant_customer",
    "require_tenant_role",
]
