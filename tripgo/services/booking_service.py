### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Booking Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Booking Service

Reservations of catalog items within a tenant: pricing, ownership checks,
the status lifecycle (PENDING -> CONFIRMED/CANCELLED -> COMPLETED) and the
admin overview.
"""

import math

from fastapi import status
from sqlalchemy import func
from sqlalchemy.orm import Session

from tripgo.errors import create_error
from tripgo.models import Booking, BookingStatus, BookingType, PaymentStatus, Tenant, User, UserRole
from tripgo.schemas.booking import (
    BookingCreate,
    BookingOverview,
    BookingResponse,
    BookingStatusUpdate,
    BookingUpdate,
)
from tripgo.schemas.responses import PaginationMeta
from tripgo.services.catalog_service import HotelService, PackageService
from tripgo.services.tenant_service import TenantService
from tripgo.services.voyage_service import CruiseService, ShipService
from tripgo.utils import get_logger, naive_utc, paginate

logger = get_logger("tripgo.bookings")

SECONDS_PER_DAY = 24 * 60 * 60
RECENT_BOOKINGS = 10

ITEM_SERVICES = {
    BookingType.CRUISE: (CruiseService, "cruise_id"),
    BookingType.SHIP: (ShipService, "ship_id"),
    BookingType.HOTEL: (HotelService, "hotel_id"),
    BookingType.PACKAGE: (PackageService, "package_id"),
}


def parse_booking_type(value: str) -> BookingType:
    """Map a path segment ("cruise", "hotel", ...) to a BookingType"""
    try:
        return BookingType(value.upper())
    except ValueError:
        raise create_error("Invalid booking type", status.HTTP_400_BAD_REQUEST)


def count_nights(check_in, check_out) -> int:
    """Whole nights between two datetimes, partial days rounded up"""
    seconds = (check_out - check_in).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def hotel_total(price_per_night: float, check_in, check_out, guests: int) -> float:
    if not check_in or not check_out:
        raise create_error(
            "Check-in and check-out dates are required for hotel bookings", status.HTTP_400_BAD_REQUEST
        )
    if check_out <= check_in:
        raise create_error("Check-out date must be after check-in date", status.HTTP_400_BAD_REQUEST)
    return price_per_night * count_nights(check_in, check_out) * guests


class BookingService:
    """Tenant-scoped booking operations"""

    def __init__(self, db: Session, tenant: Tenant):
        self.db = db
        self.tenant = tenant

    def base_query(self):
        return self.db.query(Booking).filter(Booking.tenant_id == self.tenant.id)

    # ----------------------------------------
    # Create
    # ----------------------------------------

    def create(self, booking_type: BookingType | str, item_id: int, user: User, data: BookingCreate) -> Booking:
        """
        Book an available item for a user.

        Raises:
            AppError 400: Invalid type, or missing/invalid hotel dates
            AppError 403: Monthly booking quota of the tenant's plan reached
            AppError 404: Item missing or not available
        """
        if not isinstance(booking_type, BookingType):
            booking_type = parse_booking_type(booking_type)
        service_cls, key = ITEM_SERVICES[booking_type]
        item = service_cls(self.db, self.tenant).get_available(item_id)

        check_in = naive_utc(data.check_in)
        check_out = naive_utc(data.check_out)
        if booking_type == BookingType.HOTEL:
            total = hotel_total(item.price_per_night, check_in, check_out, data.guests)
        else:
            total = item.price * data.guests

        TenantService(self.db).check_limit(self.tenant, "bookings")

        booking = Booking(
            tenant_id=self.tenant.id,
            user_id=user.id,
            booking_type=booking_type,
            guests=data.guests,
            check_in=check_in,
            check_out=check_out,
            special_requests=data.special_requests,
            total_amount=total,
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            **{key: item.id},
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info(
            f"Booking {booking.id} created: {booking_type.value} {item.name} x{data.guests} "
            f"= {total:.2f} (tenant={self.tenant.slug}, user={user.id})"
        )
        return booking

    # ----------------------------------------
    # Reads
    # ----------------------------------------

    def list_all(
        self,
        page: int = 1,
        limit: int = 10,
        status_filter: BookingStatus | None = None,
        booking_type: BookingType | None = None,
    ) -> tuple[list[Booking], PaginationMeta]:
        query = self.base_query()
        if status_filter:
            query = query.filter(Booking.status == status_filter)
        if booking_type:
            query = query.filter(Booking.booking_type == booking_type)
        query = query.order_by(Booking.created_at.desc(), Booking.id.desc())
        return paginate(query, page, limit)

    def list_for_user(
        self, user: User, page: int = 1, limit: int = 10, status_filter: BookingStatus | None = None
    ) -> tuple[list[Booking], PaginationMeta]:
        query = self.base_query().filter(Booking.user_id == user.id)
        if status_filter:
            query = query.filter(Booking.status == status_filter)
        query = query.order_by(Booking.created_at.desc(), Booking.id.desc())
        return paginate(query, page, limit)

    def get(self, booking_id: int, user: User) -> Booking:
        """
        Booking visible to the user: its owner or a tenant admin.

        Raises:
            AppError 404: Booking not found in this tenant
            AppError 403: Booking belongs to another user
        """
        booking = self.base_query().filter(Booking.id == booking_id).first()
        if not booking:
            raise create_error("Booking not found", status.HTTP_404_NOT_FOUND)
        if booking.user_id != user.id and user.role != UserRole.ADMIN:
            raise create_error("Access denied", status.HTTP_403_FORBIDDEN)
        return booking

    # ----------------------------------------
    # Lifecycle
    # ----------------------------------------

    def update(self, booking_id: int, user: User, data: BookingUpdate) -> Booking:
        booking = self.get(booking_id, user)
        if booking.status in (BookingStatus.CONFIRMED, BookingStatus.COMPLETED):
            raise create_error("Cannot update confirmed or completed booking", status.HTTP_400_BAD_REQUEST)

        updates = data.model_dump(exclude_unset=True)
        for field in ("check_in", "check_out"):
            if field in updates:
                updates[field] = naive_utc(updates[field])
        for field, value in updates.items():
            if value is not None:
                setattr(booking, field, value)

        # Totals follow the new guest count or stay length
        if booking.booking_type == BookingType.HOTEL and booking.hotel is not None:
            booking.total_amount = hotel_total(
                booking.hotel.price_per_night, booking.check_in, booking.check_out, booking.guests
            )
        else:
            item = booking.cruise or booking.ship or booking.package
            if item is not None:
                booking.total_amount = item.price * booking.guests

        self.db.commit()
        self.db.refresh(booking)
        return booking

    def cancel(self, booking_id: int, user: User) -> Booking:
        booking = self.get(booking_id, user)
        if booking.status == BookingStatus.CANCELLED:
            raise create_error("Booking is already cancelled", status.HTTP_400_BAD_REQUEST)
        if booking.status == BookingStatus.COMPLETED:
            raise create_error("Cannot cancel completed booking", status.HTTP_400_BAD_REQUEST)

        booking.status = BookingStatus.CANCELLED
        self.db.commit()
        self.db.refresh(booking)
        logger.info(f"Booking {booking.id} cancelled (tenant={self.tenant.slug})")
        return booking

    def confirm_payment(self, booking_id: int, user: User, payment_reference: str) -> Booking:
        booking = self.get(booking_id, user)
        if booking.status == BookingStatus.CANCELLED:
            raise create_error("Cannot confirm payment for a cancelled booking", status.HTTP_400_BAD_REQUEST)

        booking.status = BookingStatus.CONFIRMED
        booking.payment_status = PaymentStatus.PAID
        booking.payment_reference = payment_reference
        self.db.commit()
        self.db.refresh(booking)
        logger.info(f"Payment confirmed for booking {booking.id}: {payment_reference}")
        return booking

    def update_status(self, booking_id: int, user: User, data: BookingStatusUpdate) -> Booking:
        """
        Set the booking and/or payment status directly (admin).

        This is the only way a booking becomes COMPLETED. Cancelled and
        completed bookings are final.
        """
        if data.status is None and data.payment_status is None:
            raise create_error("Status or payment_status is required", status.HTTP_400_BAD_REQUEST)

        booking = self.get(booking_id, user)
        if booking.status in (BookingStatus.CANCELLED, BookingStatus.COMPLETED) and data.status not in (
            None,
            booking.status,
        ):
            raise create_error(
                f"Cannot change status of a {booking.status.value.lower()} booking", status.HTTP_400_BAD_REQUEST
            )

        if data.status is not None:
            booking.status = data.status
        if data.payment_status is not None:
            booking.payment_status = data.payment_status
        self.db.commit()
        self.db.refresh(booking)
        logger.info(
            f"Booking {booking.id} set to {booking.status.value}/{booking.payment_status.value} "
            f"(tenant={self.tenant.slug})"
        )
        return booking

    # ----------------------------------------
    # Admin
    # ----------------------------------------

    def overview(self) -> BookingOverview:
        def count(booking_status: BookingStatus | None = None) -> int:
            query = self.db.query(func.count(Booking.id)).filter(Booking.tenant_id == self.tenant.id)
            if booking_status:
                query = query.filter(Booking.status == booking_status)
            return query.scalar() or 0

        revenue = (
            self.db.query(func.sum(Booking.total_amount))
            .filter(Booking.tenant_id == self.tenant.id, Booking.status == BookingStatus.CONFIRMED)
            .scalar()
        )
        recent = (
            self.base_query()
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(RECENT_BOOKINGS)
            .all()
        )

        return BookingOverview(
            total_bookings=count(),
            pending_bookings=count(BookingStatus.PENDING),
            confirmed_bookings=count(BookingStatus.CONFIRMED),
            cancelled_bookings=count(BookingStatus.CANCELLED),
            total_revenue=float(revenue or 0),
            recent_bookings=[BookingResponse.model_validate(b) for b in recent],
        )
