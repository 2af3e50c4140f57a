### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Tenant API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Tenant API Endpoints

Platform administration of tenants:
- GET /tenants - List tenants with counts (admin)
- GET /tenants/domain/{domain} - Public lookup of an active tenant
- GET /tenants/{tenant_id} - Tenant details (admin)
- POST /tenants - Create tenant (admin)
- PUT /tenants/{tenant_id} - Update tenant (admin)
- DELETE /tenants/{tenant_id} - Delete tenant without users or bookings (admin)
- GET /tenants/{tenant_id}/stats - Statistics (admin)
- POST /tenants/{tenant_id}/suspend, /activate - Lifecycle (admin)
- POST /tenants/initialize/defaults - Seed default tenants (admin)

"admin" here means an admin of the default tenant.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from tripgo.dependencies import get_tenant_service
from tripgo.middleware.rate_limit import default_rate_limit, limiter
from tripgo.middleware.tenant import require_platform_admin
from tripgo.models import TenantPlan, TenantStatus, User
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.schemas.tenant import (
    InitializeDefaultsResponse,
    TenantCreate,
    TenantListData,
    TenantPublicResponse,
    TenantResponse,
    TenantStats,
    TenantSuspendRequest,
    TenantUpdate,
)
from tripgo.services.tenant_service import TenantService

router = APIRouter()


def _with_counts(service: TenantService, tenant) -> TenantResponse:
    response = TenantResponse.model_validate(tenant)
    response.counts = service.get_counts(tenant.id)
    return response


@router.get(
    "",
    response_model=APIResponse[TenantListData],
    summary="List tenants",
)
async def list_tenants(
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=100, description="Items per page"),
    status_filter: Optional[TenantStatus] = Query(None, alias="status", description="Filter by status"),
    plan: Optional[TenantPlan] = Query(None, description="Filter by plan"),
    search: Optional[str] = Query(None, description="Search name, slug, domain or subdomain"),
) -> APIResponse[TenantListData]:
    """
    List tenants, newest first

    - **status**: ACTIVE, INACTIVE or SUSPENDED
    - **plan**: BASIC, STANDARD, PREMIUM or ENTERPRISE
    - **search**: Case-insensitive match on name, slug, domain or subdomain
    """
    tenants, pagination = service.list_tenants(
        page=page, limit=limit, status_filter=status_filter, plan=plan, search=search
    )
    return APIResponse(
        data=TenantListData(
            tenants=[_with_counts(service, t) for t in tenants],
            pagination=pagination,
        )
    )


@router.get(
    "/domain/{domain}",
    response_model=APIResponse[TenantPublicResponse],
    summary="Look up tenant by domain",
    description="Find an active tenant by domain or subdomain. Used by storefronts at startup.",
)
@limiter.limit(default_rate_limit())
async def get_tenant_by_domain(
    request: Request,
    domain: str,
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantPublicResponse]:
    tenant = service.get_by_domain(domain)
    return APIResponse(data=TenantPublicResponse.model_validate(tenant))


@router.post(
    "/initialize/defaults",
    response_model=APIResponse[InitializeDefaultsResponse],
    summary="Seed default tenants",
)
async def initialize_default_tenants(
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[InitializeDefaultsResponse]:
    """Create TripGo Main, TripGo Cruises and TripGo Hotels if they are missing"""
    created, skipped = service.initialize_defaults()
    return APIResponse(
        message=f"{len(created)} default tenant(s) created",
        data=InitializeDefaultsResponse(created=created, skipped=skipped),
    )


@router.get(
    "/{tenant_id}",
    response_model=APIResponse[TenantResponse],
    summary="Get tenant",
)
async def get_tenant(
    tenant_id: int,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantResponse]:
    tenant = service.get_tenant(tenant_id)
    return APIResponse(data=_with_counts(service, tenant))


@router.post(
    "",
    response_model=APIResponse[TenantResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
)
async def create_tenant(
    data: TenantCreate,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantResponse]:
    """
    Create a tenant

    Slug, domain and subdomain must each be unused by every other tenant.
    """
    tenant = service.create_tenant(data)
    return APIResponse(message="Tenant created successfully", data=TenantResponse.model_validate(tenant))


@router.put(
    "/{tenant_id}",
    response_model=APIResponse[TenantResponse],
    summary="Update tenant",
)
async def update_tenant(
    tenant_id: int,
    data: TenantUpdate,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantResponse]:
    tenant = service.update_tenant(tenant_id, data)
    return APIResponse(message="Tenant updated successfully", data=TenantResponse.model_validate(tenant))


@router.delete(
    "/{tenant_id}",
    response_model=MessageResponse,
    summary="Delete tenant",
)
async def delete_tenant(
    tenant_id: int,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> MessageResponse:
    service.delete_tenant(tenant_id)
    return MessageResponse(message="Tenant deleted successfully")


@router.get(
    "/{tenant_id}/stats",
    response_model=APIResponse[TenantStats],
    summary="Tenant statistics",
)
async def get_tenant_stats(
    tenant_id: int,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantStats]:
    """Users by role, bookings by status, paid revenue and content counts"""
    return APIResponse(data=service.get_stats(tenant_id))


# PUT is kept for older admin clients
@router.api_route(
    "/{tenant_id}/suspend",
    methods=["POST", "PUT"],
    response_model=APIResponse[TenantResponse],
    summary="Suspend tenant",
)
async def suspend_tenant(
    tenant_id: int,
    data: Optional[TenantSuspendRequest] = None,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantResponse]:
    tenant = service.suspend_tenant(tenant_id, reason=data.reason if data else None)
    return APIResponse(message="Tenant suspended successfully", data=TenantResponse.model_validate(tenant))


@router.api_route(
    "/{tenant_id}/activate",
    methods=["POST", "PUT"],
    response_model=APIResponse[TenantResponse],
    summary="Activate tenant",
)
async def activate_tenant(
    tenant_id: int,
    _: User = Depends(require_platform_admin),
    service: TenantService = Depends(get_tenant_service),
) -> APIResponse[TenantResponse]:
    tenant = service.activate_tenant(tenant_id)
    return APIResponse(message="Tenant activated successfully", data=TenantResponse.model_validate(tenant))
