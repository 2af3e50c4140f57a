### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Voyage API Routers -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Cruise and Ship API Endpoints

Both routers share one layout, mounted at /cruises and /ships:
- GET / - List available voyages with filters
- GET /{id_or_slug} - Voyage with its upcoming departures
- POST / - Create (admin)
- PUT /{item_id} - Update (admin)
- DELETE /{item_id} - Delete (admin)
- GET|POST /{item_id}/reviews - Reviews
- GET /{item_id}/availability - Availability for a date and party size
- GET /{item_id}/route - Route map data
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.config_schema import CatalogConfig
from tripgo.database import get_db
from tripgo.dependencies import get_catalog_config
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import Tenant, User
from tripgo.routers.reviews import add_review_routes
from tripgo.schemas.catalog import (
    AvailabilityResponse,
    CruiseListData,
    RouteResponse,
    ShipListData,
    VoyageCreate,
    VoyageResponse,
    VoyageUpdate,
)
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.services.voyage_service import CruiseService, ShipService, VoyageService


def build_voyage_router(service_cls: type[VoyageService], items_key: str, list_model) -> APIRouter:
    """
    Build the router for one voyage type.

    Args:
        service_cls: CruiseService or ShipService
        items_key: Key of the item list in list responses ("cruises")
        list_model: Data model of list responses
    """
    router = APIRouter()
    label = service_cls.label.lower()

    def get_service(
        db: Session = Depends(get_db),
        tenant: Tenant = Depends(get_current_tenant),
        catalog: CatalogConfig = Depends(get_catalog_config),
    ) -> VoyageService:
        return service_cls(db, tenant, catalog)

    @router.get("", response_model=APIResponse[list_model], summary=f"List {items_key}")
    async def list_voyages(
        service: VoyageService = Depends(get_service),
        page: int = Query(1, ge=1, description="Page number"),
        limit: int = Query(10, ge=1, le=100, description="Items per page"),
        min_price: Optional[float] = Query(None, ge=0),
        max_price: Optional[float] = Query(None, ge=0),
        duration: Optional[int] = Query(None, ge=1, description="Exact length in days"),
        type: Optional[str] = Query(None, description="Voyage type (contains)"),
        rating: Optional[float] = Query(None, ge=0, le=5, description="Minimum rating"),
        destination: Optional[str] = Query(None, description="Destination, departure or port"),
        category_id: Optional[int] = Query(None),
        search: Optional[str] = Query(None, description="Search name, description, destination, departure"),
        sort_by: Optional[str] = Query(None, description="created_at, name, price, rating or duration"),
        sort_order: Optional[str] = Query(None, pattern="^(asc|desc)$"),
    ):
        """
        List available voyages

        Each voyage carries its category and the next upcoming departures.
        """
        voyages, pagination = service.list_responses(
            page,
            limit,
            sort_by=sort_by,
            sort_order=sort_order,
            min_price=min_price,
            max_price=max_price,
            duration=duration,
            type=type,
            rating=rating,
            destination=destination,
            category_id=category_id,
            search=search,
        )
        return APIResponse(data=list_model(**{items_key: voyages, "pagination": pagination}))

    @router.get("/{id_or_slug}", response_model=APIResponse[VoyageResponse], summary=f"Get {label}")
    async def get_voyage(
        id_or_slug: str,
        service: VoyageService = Depends(get_service),
    ) -> APIResponse[VoyageResponse]:
        return APIResponse(data=service.detail_response(id_or_slug))

    @router.post(
        "",
        response_model=APIResponse[VoyageResponse],
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {label}",
    )
    async def create_voyage(
        data: VoyageCreate,
        _: User = Depends(require_tenant_admin),
        service: VoyageService = Depends(get_service),
    ) -> APIResponse[VoyageResponse]:
        voyage = service.create(data.model_dump())
        return APIResponse(
            message=f"{service_cls.label} created successfully",
            data=service.to_response(voyage, []),
        )

    @router.put("/{item_id}", response_model=APIResponse[VoyageResponse], summary=f"Update {label}")
    async def update_voyage(
        item_id: int,
        data: VoyageUpdate,
        _: User = Depends(require_tenant_admin),
        service: VoyageService = Depends(get_service),
    ) -> APIResponse[VoyageResponse]:
        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        # Only the category may be cleared with an explicit null
        if "category_id" in data.model_fields_set:
            updates["category_id"] = data.category_id
        service.update(item_id, updates)
        return APIResponse(
            message=f"{service_cls.label} updated successfully",
            data=service.detail_response(item_id),
        )

    @router.delete("/{item_id}", response_model=MessageResponse, summary=f"Delete {label}")
    async def delete_voyage(
        item_id: int,
        _: User = Depends(require_tenant_admin),
        service: VoyageService = Depends(get_service),
    ) -> MessageResponse:
        service.delete(item_id)
        return MessageResponse(message=f"{service_cls.label} deleted successfully")

    add_review_routes(router, get_service)

    @router.get(
        "/{item_id}/availability",
        response_model=APIResponse[AvailabilityResponse],
        summary="Check availability",
    )
    async def check_availability(
        item_id: str,
        sailing_date: Optional[datetime] = Query(None, alias="date", description="Sailing date"),
        guests: int = Query(1, ge=1, le=50),
        service: VoyageService = Depends(get_service),
    ) -> APIResponse[AvailabilityResponse]:
        return APIResponse(data=service.check_availability(item_id, sailing_date, guests))

    @router.get("/{item_id}/route", response_model=APIResponse[RouteResponse], summary="Route map data")
    async def get_route(
        item_id: str,
        service: VoyageService = Depends(get_service),
    ) -> APIResponse[RouteResponse]:
        return APIResponse(data=service.get_route(item_id))

    return router


cruises_router = build_voyage_router(CruiseService, "cruises", CruiseListData)
ships_router = build_voyage_router(ShipService, "ships", ShipListData)
