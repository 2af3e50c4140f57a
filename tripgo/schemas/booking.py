### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Booking Schemas -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Booking Schemas

Pydantic models for creating, updating and reporting on bookings.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from tripgo.models.enums import BookingStatus, BookingType, PaymentStatus
from tripgo.schemas.responses import list_data_model


class BookingCreate(BaseModel):
    """Book a catalog item; dates are required for hotels"""

    guests: int = Field(1, ge=1, le=50)
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    special_requests: Optional[str] = Field(None, max_length=2000)


class BookingUpdate(BaseModel):
    guests: Optional[int] = Field(None, ge=1, le=50)
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    special_requests: Optional[str] = Field(None, max_length=2000)


class ConfirmPaymentRequest(BaseModel):
    payment_reference: str = Field(..., min_length=1, max_length=255)


class BookingStatusUpdate(BaseModel):
    """Admin override of the booking and payment status"""

    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None


class BookingCustomer(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str

    class Config:
        from_attributes = True


class BookingResponse(BaseModel):
    id: int
    tenant_id: int
    user_id: int
    booking_type: BookingType
    item_id: Optional[int] = None
    item_name: Optional[str] = None
    cruise_id: Optional[int] = None
    ship_id: Optional[int] = None
    hotel_id: Optional[int] = None
    package_id: Optional[int] = None
    guests: int
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    special_requests: Optional[str] = None
    total_amount: float
    status: BookingStatus
    payment_status: PaymentStatus
    payment_reference: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[BookingCustomer] = None

    class Config:
        from_attributes = True


BookingListData = list_data_model("BookingListData", "bookings", BookingResponse)


class BookingOverview(BaseModel):
    """Admin booking dashboard"""

    total_bookings: int = 0
    pending_bookings: int = 0
    confirmed_bookings: int = 0
    cancelled_bookings: int = 0
    total_revenue: float = 0.0
    recent_bookings: List[BookingResponse] = Field(default_factory=list)
