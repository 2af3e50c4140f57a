### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Departure API Routers -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Cruise and Ship Departure API Endpoints

Mounted at /cruise-departures and /ship-departures:
- GET /cruise/{voyage_id} (or /ship/{voyage_id}) - Departures of a voyage
- GET /{departure_id} - One departure
- POST / - Create (admin)
- POST /bulk - Create many in one transaction (admin)
- PUT /{departure_id} - Update (admin)
- DELETE /{departure_id} - Delete (admin)
- PATCH /{departure_id}/update-seats - Book seats (admin)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.config_schema import CatalogConfig
from tripgo.database import get_db
from tripgo.dependencies import get_catalog_config
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import DepartureStatus, Tenant, User
from tripgo.schemas.departure import (
    DepartureBulkCreate,
    DepartureCreate,
    DepartureResponse,
    DepartureUpdate,
    SeatUpdateRequest,
)
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.services.departure_service import (
    CruiseDepartureService,
    DepartureService,
    ShipDepartureService,
)


def build_departure_router(service_cls: type[DepartureService], voyage_segment: str) -> APIRouter:
    """
    Args:
        service_cls: CruiseDepartureService or ShipDepartureService
        voyage_segment: Path segment of the per-voyage listing ("cruise")
    """
    router = APIRouter()

    def get_service(
        db: Session = Depends(get_db),
        tenant: Tenant = Depends(get_current_tenant),
        catalog: CatalogConfig = Depends(get_catalog_config),
    ) -> DepartureService:
        return service_cls(db, tenant, catalog.filling_fast_threshold)

    def to_responses(departures) -> List[DepartureResponse]:
        return [DepartureResponse.model_validate(d) for d in departures]

    @router.get(
        f"/{voyage_segment}/{{voyage_id}}",
        response_model=APIResponse[List[DepartureResponse]],
        summary=f"List departures of a {voyage_segment}",
    )
    async def list_departures(
        voyage_id: int,
        upcoming: bool = Query(True, description="Only departures in the future"),
        status_filter: Optional[DepartureStatus] = Query(None, alias="status"),
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[List[DepartureResponse]]:
        departures = service.list_for_voyage(voyage_id, upcoming=upcoming, status_filter=status_filter)
        return APIResponse(data=to_responses(departures))

    @router.get("/{departure_id}", response_model=APIResponse[DepartureResponse], summary="Get departure")
    async def get_departure(
        departure_id: int,
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[DepartureResponse]:
        return APIResponse(data=DepartureResponse.model_validate(service.get(departure_id)))

    @router.post(
        "",
        response_model=APIResponse[DepartureResponse],
        status_code=status.HTTP_201_CREATED,
        summary="Create departure",
    )
    async def create_departure(
        data: DepartureCreate,
        _: User = Depends(require_tenant_admin),
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[DepartureResponse]:
        departure = service.create(data)
        return APIResponse(message="Departure created successfully", data=DepartureResponse.model_validate(departure))

    @router.post(
        "/bulk",
        response_model=APIResponse[List[DepartureResponse]],
        status_code=status.HTTP_201_CREATED,
        summary="Create departures in bulk",
    )
    async def create_departures_bulk(
        data: DepartureBulkCreate,
        _: User = Depends(require_tenant_admin),
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[List[DepartureResponse]]:
        """All departures are created, or none are"""
        departures = service.create_bulk(data.departures)
        return APIResponse(
            message=f"{len(departures)} departures created successfully",
            data=to_responses(departures),
        )

    @router.put("/{departure_id}", response_model=APIResponse[DepartureResponse], summary="Update departure")
    async def update_departure(
        departure_id: int,
        data: DepartureUpdate,
        _: User = Depends(require_tenant_admin),
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[DepartureResponse]:
        departure = service.update(departure_id, data)
        return APIResponse(message="Departure updated successfully", data=DepartureResponse.model_validate(departure))

    @router.delete("/{departure_id}", response_model=MessageResponse, summary="Delete departure")
    async def delete_departure(
        departure_id: int,
        _: User = Depends(require_tenant_admin),
        service: DepartureService = Depends(get_service),
    ) -> MessageResponse:
        service.delete(departure_id)
        return MessageResponse(message="Departure deleted successfully")

    @router.patch(
        "/{departure_id}/update-seats",
        response_model=APIResponse[DepartureResponse],
        summary="Book seats",
    )
    async def update_seats(
        departure_id: int,
        data: SeatUpdateRequest,
        _: User = Depends(require_tenant_admin),
        service: DepartureService = Depends(get_service),
    ) -> APIResponse[DepartureResponse]:
        departure = service.book_seats(departure_id, data.seats_to_book)
        return APIResponse(message="Seats updated successfully", data=DepartureResponse.model_validate(departure))

    return router


cruise_departures_router = build_departure_router(CruiseDepartureService, "cruise")
ship_departures_router = build_departure_router(ShipDepartureService, "ship")
