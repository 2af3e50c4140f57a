### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Category API Routers -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Cruise and Ship Category API Endpoints

Mounted at /cruise-categories and /ship-categories:
- GET / - List categories with voyage counts
- GET /{category_id} - Category with its active voyages
- GET /slug/{slug} - Same, by slug
- POST / - Create (admin)
- PUT /{category_id} - Update (admin)
- DELETE /{category_id} - Delete an unused category (admin)
- PATCH /{category_id}/toggle-status - Flip is_active (admin)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.database import get_db
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import Tenant, User
from tripgo.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryListData,
    CategoryResponse,
    CategoryUpdate,
)
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.services.category_service import CategoryService, CruiseCategoryService, ShipCategoryService


def build_category_router(service_cls: type[CategoryService]) -> APIRouter:
    router = APIRouter()

    def get_service(
        db: Session = Depends(get_db),
        tenant: Tenant = Depends(get_current_tenant),
    ) -> CategoryService:
        return service_cls(db, tenant)

    @router.get("", response_model=APIResponse[CategoryListData], summary="List categories")
    async def list_categories(
        service: CategoryService = Depends(get_service),
        page: int = Query(1, ge=1),
        limit: int = Query(50, ge=1, le=100),
        search: Optional[str] = Query(None, description="Search name or description"),
        is_active: Optional[bool] = Query(None),
    ) -> APIResponse[CategoryListData]:
        categories, pagination = service.list_categories(page, limit, search=search, is_active=is_active)
        return APIResponse(data=CategoryListData(categories=categories, pagination=pagination))

    @router.get("/slug/{slug}", response_model=APIResponse[CategoryDetailResponse], summary="Get category by slug")
    async def get_category_by_slug(
        slug: str,
        service: CategoryService = Depends(get_service),
    ) -> APIResponse[CategoryDetailResponse]:
        return APIResponse(data=service.detail_response(service.get_by_slug(slug)))

    @router.get("/{category_id}", response_model=APIResponse[CategoryDetailResponse], summary="Get category")
    async def get_category(
        category_id: int,
        service: CategoryService = Depends(get_service),
    ) -> APIResponse[CategoryDetailResponse]:
        return APIResponse(data=service.detail_response(service.get(category_id)))

    @router.post(
        "",
        response_model=APIResponse[CategoryResponse],
        status_code=status.HTTP_201_CREATED,
        summary="Create category",
    )
    async def create_category(
        data: CategoryCreate,
        _: User = Depends(require_tenant_admin),
        service: CategoryService = Depends(get_service),
    ) -> APIResponse[CategoryResponse]:
        category = service.create(data.model_dump())
        return APIResponse(message="Category created successfully", data=CategoryResponse.model_validate(category))

    @router.put("/{category_id}", response_model=APIResponse[CategoryResponse], summary="Update category")
    async def update_category(
        category_id: int,
        data: CategoryUpdate,
        _: User = Depends(require_tenant_admin),
        service: CategoryService = Depends(get_service),
    ) -> APIResponse[CategoryResponse]:
        category = service.update(category_id, data.model_dump(exclude_unset=True))
        return APIResponse(message="Category updated successfully", data=CategoryResponse.model_validate(category))

    @router.delete("/{category_id}", response_model=MessageResponse, summary="Delete category")
    async def delete_category(
        category_id: int,
        _: User = Depends(require_tenant_admin),
        service: CategoryService = Depends(get_service),
    ) -> MessageResponse:
        service.delete(category_id)
        return MessageResponse(message="Category deleted successfully")

    @router.patch(
        "/{category_id}/toggle-status",
        response_model=APIResponse[CategoryResponse],
        summary="Toggle category status",
    )
    async def toggle_category_status(
        category_id: int,
        _: User = Depends(require_tenant_admin),
        service: CategoryService = Depends(get_service),
    ) -> APIResponse[CategoryResponse]:
        category = service.toggle_status(category_id)
        state = "activated" if category.is_active else "deactivated"
        return APIResponse(message=f"Category {state} successfully", data=CategoryResponse.model_validate(category))

    return router


cruise_categories_router = build_category_router(CruiseCategoryService)
ship_categories_router = build_category_router(ShipCategoryService)
