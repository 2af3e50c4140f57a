### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Booking API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Booking API Endpoints

- POST /bookings/{booking_type}/{item_id} - Book a cruise, ship, hotel or package
- GET /bookings - All tenant bookings (admin)
- GET /bookings/user - Current user's bookings
- GET /bookings/admin/overview - Dashboard figures (admin)
- GET /bookings/{booking_id} - One booking (owner or admin)
- PUT /bookings/{booking_id} - Update a pending booking (owner or admin)
- DELETE /bookings/{booking_id} - Cancel (owner or admin)
- POST /bookings/{booking_id}/confirm-payment - Mark paid (owner or admin)
- PUT /bookings/{booking_id}/status - Set booking/payment status (admin)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from tripgo.dependencies import get_booking_service
from tripgo.middleware.tenant import get_tenant_user, require_tenant_admin, require_tenant_customer
from tripgo.models import BookingStatus, BookingType, User
from tripgo.schemas.booking import (
    BookingCreate,
    BookingListData,
    BookingOverview,
    BookingResponse,
    BookingStatusUpdate,
    BookingUpdate,
    ConfirmPaymentRequest,
)
from tripgo.schemas.responses import APIResponse
from tripgo.services.booking_service import BookingService

router = APIRouter()


def _list_response(bookings, pagination) -> APIResponse[BookingListData]:
    return APIResponse(
        data=BookingListData(
            bookings=[BookingResponse.model_validate(b) for b in bookings],
            pagination=pagination,
        )
    )


# Fixed paths are registered before /{booking_id}
@router.get("", response_model=APIResponse[BookingListData], summary="List bookings")
async def list_bookings(
    _: User = Depends(require_tenant_admin),
    service: BookingService = Depends(get_booking_service),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
    booking_type: Optional[BookingType] = Query(None, alias="type"),
) -> APIResponse[BookingListData]:
    bookings, pagination = service.list_all(page, limit, status_filter=status_filter, booking_type=booking_type)
    return _list_response(bookings, pagination)


@router.get("/user", response_model=APIResponse[BookingListData], summary="My bookings")
async def list_my_bookings(
    user: User = Depends(get_tenant_user),
    service: BookingService = Depends(get_booking_service),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: Optional[BookingStatus] = Query(None, alias="status"),
) -> APIResponse[BookingListData]:
    bookings, pagination = service.list_for_user(user, page, limit, status_filter=status_filter)
    return _list_response(bookings, pagination)


@router.get("/admin/overview", response_model=APIResponse[BookingOverview], summary="Booking overview")
async def get_bookings_overview(
    _: User = Depends(require_tenant_admin),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingOverview]:
    """Counts by status, confirmed revenue and the 10 most recent bookings"""
    return APIResponse(data=service.overview())


@router.post(
    "/{booking_id}/confirm-payment",
    response_model=APIResponse[BookingResponse],
    summary="Confirm payment",
)
async def confirm_payment(
    booking_id: int,
    data: ConfirmPaymentRequest,
    user: User = Depends(get_tenant_user),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    booking = service.confirm_payment(booking_id, user, data.payment_reference)
    return APIResponse(message="Payment confirmed successfully", data=BookingResponse.model_validate(booking))


@router.put("/{booking_id}/status", response_model=APIResponse[BookingResponse], summary="Update booking status")
async def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    user: User = Depends(require_tenant_admin),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    booking = service.update_status(booking_id, user, data)
    return APIResponse(message="Booking status updated successfully", data=BookingResponse.model_validate(booking))


@router.post(
    "/{booking_type}/{item_id}",
    response_model=APIResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create booking",
)
async def create_booking(
    booking_type: str,
    item_id: int,
    data: BookingCreate,
    user: User = Depends(require_tenant_customer),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    """
    Book an item

    - **booking_type**: cruise, ship, hotel or package
    - Hotels require check_in and check_out; the total is
      price_per_night x nights x guests
    - Other items cost price x guests
    """
    booking = service.create(booking_type, item_id, user, data)
    return APIResponse(message="Booking created successfully", data=BookingResponse.model_validate(booking))


@router.get("/{booking_id}", response_model=APIResponse[BookingResponse], summary="Get booking")
async def get_booking(
    booking_id: int,
    user: User = Depends(get_tenant_user),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    return APIResponse(data=BookingResponse.model_validate(service.get(booking_id, user)))


@router.put("/{booking_id}", response_model=APIResponse[BookingResponse], summary="Update booking")
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    user: User = Depends(get_tenant_user),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    booking = service.update(booking_id, user, data)
    return APIResponse(message="Booking updated successfully", data=BookingResponse.model_validate(booking))


@router.delete("/{booking_id}", response_model=APIResponse[BookingResponse], summary="Cancel booking")
async def cancel_booking(
    booking_id: int,
    user: User = Depends(get_tenant_user),
    service: BookingService = Depends(get_booking_service),
) -> APIResponse[BookingResponse]:
    booking = service.cancel(booking_id, user)
    return APIResponse(message="Booking cancelled successfully", data=BookingResponse.model_validate(booking))
