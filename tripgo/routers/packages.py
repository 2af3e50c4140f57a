### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Package API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Travel Package API Endpoints

- GET /packages - List available packages with filters
- GET /packages/{id_or_slug} - Package details
- POST /packages - Create (admin)
- PUT /packages/{item_id} - Update (admin)
- DELETE /packages/{item_id} - Delete (admin)
- GET|POST /packages/{item_id}/reviews - Reviews
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.database import get_db
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import Tenant, User
from tripgo.routers.reviews import add_review_routes
from tripgo.schemas.catalog import PackageCreate, PackageListData, PackageResponse, PackageUpdate
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.services.catalog_service import PackageService

router = APIRouter()


def get_package_service(
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_current_tenant),
) -> PackageService:
    return PackageService(db, tenant)


def _to_response(package, review_count: int = 0) -> PackageResponse:
    response = PackageResponse.model_validate(package)
    response.review_count = review_count
    return response


@router.get("", response_model=APIResponse[PackageListData], summary="List packages")
async def list_packages(
    service: PackageService = Depends(get_package_service),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
    destination: Optional[str] = Query(None, description="Destination or any listed destination"),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    duration: Optional[int] = Query(None, ge=1, description="Exact length in days"),
    rating: Optional[float] = Query(None, ge=0, le=5, description="Minimum rating"),
    search: Optional[str] = Query(None, description="Search name, description, destination"),
    sort_by: Optional[str] = Query(None, description="created_at, name, price, rating or duration"),
    sort_order: Optional[str] = Query(None, pattern="^(asc|desc)$"),
) -> APIResponse[PackageListData]:
    packages, pagination = service.list_items(
        page,
        limit,
        sort_by=sort_by,
        sort_order=sort_order,
        destination=destination,
        min_price=min_price,
        max_price=max_price,
        duration=duration,
        rating=rating,
        search=search,
    )
    counts = service.review_counts(packages)
    return APIResponse(
        data=PackageListData(
            packages=[_to_response(p, counts.get(p.id, 0)) for p in packages],
            pagination=pagination,
        )
    )


@router.get("/{id_or_slug}", response_model=APIResponse[PackageResponse], summary="Get package")
async def get_package(
    id_or_slug: str,
    service: PackageService = Depends(get_package_service),
) -> APIResponse[PackageResponse]:
    package = service.get(id_or_slug)
    return APIResponse(data=_to_response(package, service.review_counts([package]).get(package.id, 0)))


@router.post(
    "",
    response_model=APIResponse[PackageResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create package",
)
async def create_package(
    data: PackageCreate,
    _: User = Depends(require_tenant_admin),
    service: PackageService = Depends(get_package_service),
) -> APIResponse[PackageResponse]:
    package = service.create(data.model_dump())
    return APIResponse(message="Package created successfully", data=_to_response(package))


@router.put("/{item_id}", response_model=APIResponse[PackageResponse], summary="Update package")
async def update_package(
    item_id: int,
    data: PackageUpdate,
    _: User = Depends(require_tenant_admin),
    service: PackageService = Depends(get_package_service),
) -> APIResponse[PackageResponse]:
    package = service.update(item_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return APIResponse(
        message="Package updated successfully",
        data=_to_response(package, service.review_counts([package]).get(package.id, 0)),
    )


@router.delete("/{item_id}", response_model=MessageResponse, summary="Delete package")
async def delete_package(
    item_id: int,
    _: User = Depends(require_tenant_admin),
    service: PackageService = Depends(get_package_service),
) -> MessageResponse:
    service.delete(item_id)
    return MessageResponse(message="Package deleted successfully")


add_review_routes(router, get_package_service)
