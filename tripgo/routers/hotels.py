### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Hotel API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Hotel API Endpoints

- GET /hotels - List available hotels with filters
- GET /hotels/{id_or_slug} - Hotel details
- POST /hotels - Create (admin)
- PUT /hotels/{item_id} - Update (admin)
- DELETE /hotels/{item_id} - Delete (admin)
- GET|POST /hotels/{item_id}/reviews - Reviews
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.database import get_db
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import Tenant, User
from tripgo.routers.reviews import add_review_routes
from tripgo.schemas.catalog import HotelCreate, HotelListData, HotelResponse, HotelUpdate
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.services.catalog_service import HotelService

router = APIRouter()


def get_hotel_service(
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_current_tenant),
) -> HotelService:
    return HotelService(db, tenant)


def _to_response(hotel, review_count: int = 0) -> HotelResponse:
    response = HotelResponse.model_validate(hotel)
    response.review_count = review_count
    return response


@router.get("", response_model=APIResponse[HotelListData], summary="List hotels")
async def list_hotels(
    service: HotelService = Depends(get_hotel_service),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
    city: Optional[str] = Query(None, description="City (contains)"),
    country: Optional[str] = Query(None, description="Country (contains)"),
    min_price: Optional[float] = Query(None, ge=0, description="Minimum price per night"),
    max_price: Optional[float] = Query(None, ge=0, description="Maximum price per night"),
    rating: Optional[float] = Query(None, ge=0, le=5, description="Minimum rating"),
    search: Optional[str] = Query(None, description="Search name, description, city, country, location"),
    sort_by: Optional[str] = Query(None, description="created_at, name, price or rating"),
    sort_order: Optional[str] = Query(None, pattern="^(asc|desc)$"),
) -> APIResponse[HotelListData]:
    hotels, pagination = service.list_items(
        page,
        limit,
        sort_by=sort_by,
        sort_order=sort_order,
        city=city,
        country=country,
        min_price=min_price,
        max_price=max_price,
        rating=rating,
        search=search,
    )
    counts = service.review_counts(hotels)
    return APIResponse(
        data=HotelListData(
            hotels=[_to_response(h, counts.get(h.id, 0)) for h in hotels],
            pagination=pagination,
        )
    )


@router.get("/{id_or_slug}", response_model=APIResponse[HotelResponse], summary="Get hotel")
async def get_hotel(
    id_or_slug: str,
    service: HotelService = Depends(get_hotel_service),
) -> APIResponse[HotelResponse]:
    hotel = service.get(id_or_slug)
    return APIResponse(data=_to_response(hotel, service.review_counts([hotel]).get(hotel.id, 0)))


@router.post(
    "",
    response_model=APIResponse[HotelResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create hotel",
)
async def create_hotel(
    data: HotelCreate,
    _: User = Depends(require_tenant_admin),
    service: HotelService = Depends(get_hotel_service),
) -> APIResponse[HotelResponse]:
    hotel = service.create(data.model_dump())
    return APIResponse(message="Hotel created successfully", data=_to_response(hotel))


@router.put("/{item_id}", response_model=APIResponse[HotelResponse], summary="Update hotel")
async def update_hotel(
    item_id: int,
    data: HotelUpdate,
    _: User = Depends(require_tenant_admin),
    service: HotelService = Depends(get_hotel_service),
) -> APIResponse[HotelResponse]:
    hotel = service.update(item_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return APIResponse(
        message="Hotel updated successfully",
        data=_to_response(hotel, service.review_counts([hotel]).get(hotel.id, 0)),
    )


@router.delete("/{item_id}", response_model=MessageResponse, summary="Delete hotel")
async def delete_hotel(
    item_id: int,
    _: User = Depends(require_tenant_admin),
    service: HotelService = Depends(get_hotel_service),
) -> MessageResponse:
    service.delete(item_id)
    return MessageResponse(message="Hotel deleted successfully")


add_review_routes(router, get_hotel_service)
