### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Tenant Resolution -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Tenant Resolution

Determines which storefront a request belongs to. Sources are tried in
order:

1. X-Tenant-ID / X-Tenant-Domain header (id, domain, subdomain or slug)
2. Request host (domain == host, or subdomain == first label)
3. ?tenant= query parameter (id, slug or subdomain)
4. The configured default tenant

An explicitly identified tenant that is suspended is refused with 403.
"""

from urllib.parse import urlsplit

from fastapi import Depends, Request, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from tripgo.config import get_api_settings
from tripgo.database import get_db
from tripgo.errors import AppError
from tripgo.middleware.auth import get_current_user, require_admin
from tripgo.models import Tenant, TenantStatus, User, UserRole
from tripgo.services.config_service import get_config_service
from tripgo.utils import get_logger

logger = get_logger("tripgo.tenancy")

DEFAULT_RESERVED_LABELS = ("localhost", "api", "www")


class TenantResolver:
    """Resolve the tenant for a request"""

    def __init__(self, db: Session, default_slug: str | None = None, reserved_labels=None):
        self.db = db
        self.default_slug = default_slug or get_api_settings().default_tenant_slug
        if reserved_labels is None:
            reserved_labels = get_config_service().get("tenancy.reserved_subdomains", DEFAULT_RESERVED_LABELS)
        self.reserved_labels = {label.lower() for label in reserved_labels}

    @staticmethod
    def normalize_host(host: str) -> str:
        """
        Lowercase a host and strip scheme, port and path.

        Examples:
            "HTTPS://Cruises.TripGo.com:8080/x" -> "cruises.tripgo.com"
            "hotels.tripgo.com, proxy" -> "hotels.tripgo.com"
        """
        normalized = (host or "").split(",")[0].strip().lower()
        if not normalized:
            return ""

        if "://" in normalized:
            return (urlsplit(normalized).hostname or "").lower()

        normalized = normalized.split("/")[0].strip()
        if ":" in normalized:
            normalized = normalized.split(":")[0].strip()
        return normalized

    @staticmethod
    def _id_clause(value: str):
        return [Tenant.id == int(value)] if value.isdigit() else []

    def find_by_hint(self, hint: str) -> Tenant | None:
        """Header lookup: id, domain, subdomain or slug"""
        normalized = self.normalize_host(hint) or hint.strip().lower()
        return (
            self.db.query(Tenant)
            .filter(
                or_(
                    *self._id_clause(hint.strip()),
                    Tenant.domain == normalized,
                    Tenant.subdomain == normalized,
                    Tenant.slug == normalized,
                )
            )
            .first()
        )

    def find_by_host(self, host: str) -> Tenant | None:
        """Host lookup: full domain, or first label as subdomain"""
        normalized = self.normalize_host(host)
        if not normalized:
            return None

        label = normalized.split(".")[0]
        if label in self.reserved_labels:
            # Still allow a custom domain such as "www.example.com"
            return self.db.query(Tenant).filter(Tenant.domain == normalized).first()

        return (
            self.db.query(Tenant)
            .filter(or_(Tenant.domain == normalized, Tenant.subdomain == label))
            .first()
        )

    def find_by_query(self, value: str) -> Tenant | None:
        """Query parameter lookup: id, slug or subdomain"""
        value = value.strip().lower()
        return (
            self.db.query(Tenant)
            .filter(or_(*self._id_clause(value), Tenant.slug == value, Tenant.subdomain == value))
            .first()
        )

    def find_default(self) -> Tenant | None:
        return (
            self.db.query(Tenant)
            .filter(Tenant.slug == self.default_slug, Tenant.status == TenantStatus.ACTIVE)
            .first()
        )

    def resolve(self, headers, host: str | None, query_value: str | None) -> Tenant:
        """
        Run the resolution chain.

        Raises:
            AppError 403: Identified tenant is suspended
            AppError 404: No tenant could be resolved
        """
        hint = headers.get("x-tenant-id") or headers.get("x-tenant-domain")

        tenant = None
        if hint:
            tenant = self.find_by_hint(hint)
        if tenant is None and host:
            tenant = self.find_by_host(host)
        if tenant is None and query_value:
            tenant = self.find_by_query(query_value)

        if tenant is not None:
            if tenant.status == TenantStatus.SUSPENDED:
                raise AppError("Tenant is currently suspended", status.HTTP_403_FORBIDDEN)
            if tenant.status == TenantStatus.ACTIVE:
                return tenant
            # Inactive tenants fall through to the default

        tenant = self.find_default()
        if tenant is None:
            raise AppError("No tenant found", status.HTTP_404_NOT_FOUND)
        return tenant


async def get_current_tenant(request: Request, db: Session = Depends(get_db)) -> Tenant:
    """
    Dependency that provides the tenant for the current request.

    The resolved tenant is also stored on request.state for access logging.
    """
    cached = getattr(request.state, "tenant", None)
    if cached is not None:
        return cached

    host = request.headers.get("x-forwarded-host") or request.headers.get("host")
    tenant = TenantResolver(db).resolve(request.headers, host, request.query_params.get("tenant"))
    logger.debug(f"Tenant resolved: {tenant.slug} for {request.method} {request.url.path}")

    request.state.tenant = tenant
    request.state.tenant_id = tenant.id
    return tenant


async def get_tenant_user(
    tenant: Tenant = Depends(get_current_tenant),
    user: User = Depends(get_current_user),
) -> User:
    """Authenticated user who belongs to the current tenant"""
    if user.tenant_id != tenant.id:
        raise AppError("Token tenant mismatch", status.HTTP_403_FORBIDDEN)
    return user


def require_tenant_role(*roles: UserRole):
    """
    Dependency factory for role checks on tenant-scoped routes

    Usage:
        @router.post("")
        async def create_hotel(user: User = Depends(require_tenant_admin)):
            ...
    """

    async def check_role(user: User = Depends(get_tenant_user)) -> User:
        if user.role not in roles:
            raise AppError("Insufficient permissions", status.HTTP_403_FORBIDDEN)
        return user

    return check_role


require_tenant_admin = require_tenant_role(UserRole.ADMIN)
require_tenant_customer = require_tenant_role(UserRole.CUSTOMER, UserRole.ADMIN)


async def require_platform_admin(user: User = Depends(require_admin)) -> User:
    """
    Admin of the default tenant.

    Guards platform-wide operations (tenant management, config.yaml) that
    affect every storefront, so admins of other tenants are refused.
    """
    if user.tenant is None or user.tenant.slug != get_api_settings().default_tenant_slug:
        raise AppError("Platform admin access required", status.HTTP_403_FORBIDDEN)
    return user
