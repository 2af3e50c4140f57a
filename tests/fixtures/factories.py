"""
Factory functions for creating test model instances.

These factories create valid model instances with sensible defaults,
making it easy to set up test scenarios.
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from tripgo.middleware.auth import create_access_token
from tripgo.models import (
    Booking,
    BookingStatus,
    BookingType,
    Cruise,
    CruiseCategory,
    CruiseDeparture,
    DepartureStatus,
    Hotel,
    PaymentStatus,
    Ship,
    Tenant,
    TenantPlan,
    TenantStatus,
    TravelPackage,
    User,
    UserRole,
)
from tripgo.utils import slugify

DEFAULT_PASSWORD = "password123"


def create_tenant(
    db: Session,
    name: str = "Test Tenant",
    slug: str = "test-tenant",
    domain: str = "test.tripgo.com",
    subdomain: str = "test",
    plan: TenantPlan = TenantPlan.STANDARD,
    status: TenantStatus = TenantStatus.ACTIVE,
    settings: Optional[dict] = None,
) -> Tenant:
    """
    Create and persist a tenant for testing.

    Args:
        db: Database session
        name: Display name
        slug: Unique slug
        domain: Unique domain
        subdomain: Unique subdomain label
        plan: Subscription plan
        status: Lifecycle status
        settings: Brand settings

    Returns:
        Created Tenant instance
    """
    tenant = Tenant(
        name=name,
        slug=slug,
        domain=domain,
        subdomain=subdomain,
        plan=plan,
        status=status,
        settings=settings or {},
    )
    db.add(tenant)
    db.commit()
    db.refresh(tenant)
    return tenant


def create_user(
    db: Session,
    tenant: Tenant,
    email: str = "user@example.com",
    password: str = DEFAULT_PASSWORD,
    role: UserRole = UserRole.CUSTOMER,
    first_name: str = "Test",
    last_name: str = "User",
    is_active: bool = True,
) -> User:
    """
    Create and persist a user with a real bcrypt password hash.

    Returns:
        Created User instance
    """
    user = User(
        tenant_id=tenant.id,
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=role,
        is_active=is_active,
    )
    user.set_password(password)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers_for(user: User, tenant: Optional[Tenant] = None) -> dict[str, str]:
    """
    Bearer headers for a user, optionally pinned to a tenant.

    Args:
        user: User the token is issued for
        tenant: Sent as X-Tenant-ID (slug) when given
    """
    headers = {"Authorization": f"Bearer {create_access_token(user)}"}
    if tenant is not None:
        headers["X-Tenant-ID"] = tenant.slug
    return headers


def _persist(db: Session, instance):
    db.add(instance)
    db.commit()
    db.refresh(instance)
    return instance


def _voyage_values(name: str, overrides: dict) -> dict:
    values = {
        "name": name,
        "slug": slugify(name),
        "description": f"{name} voyage",
        "departure": "Miami",
        "departure_port": "Port of Miami",
        "destination": "Caribbean",
        "duration": 7,
        "capacity": 100,
        "price": 1000.0,
        "type": "Luxury",
        "rating": 4.5,
        "images": [],
        "amenities": ["Pool", "Spa"],
        "itinerary": [],
        "available": True,
    }
    values.update(overrides)
    return values


def create_cruise(db: Session, tenant: Tenant, name: str = "Ocean Pearl", **overrides) -> Cruise:
    """Create a cruise; any column can be overridden by keyword"""
    return _persist(db, Cruise(tenant_id=tenant.id, **_voyage_values(name, overrides)))


def create_ship(db: Session, tenant: Tenant, name: str = "Sea Explorer", **overrides) -> Ship:
    return _persist(db, Ship(tenant_id=tenant.id, **_voyage_values(name, overrides)))


def create_hotel(db: Session, tenant: Tenant, name: str = "Luxury Beach Resort", **overrides) -> Hotel:
    values = {
        "name": name,
        "slug": slugify(name),
        "description": "Beachfront rooms",
        "location": "Waikiki",
        "city": "Honolulu",
        "country": "USA",
        "price_per_night": 200.0,
        "rating": 4.0,
        "available": True,
    }
    values.update(overrides)
    return _persist(db, Hotel(tenant_id=tenant.id, **values))


def create_package(
    db: Session, tenant: Tenant, name: str = "European Adventure", **overrides
) -> TravelPackage:
    values = {
        "name": name,
        "slug": slugify(name),
        "description": "Ten days across Europe",
        "destination": "Europe",
        "destinations": ["Paris", "Rome", "Barcelona"],
        "duration": 10,
        "price": 2500.0,
        "rating": 4.2,
        "available": True,
    }
    values.update(overrides)
    return _persist(db, TravelPackage(tenant_id=tenant.id, **values))


def create_category(
    db: Session,
    tenant: Tenant,
    name: str = "Luxury Cruises",
    model=CruiseCategory,
    **overrides,
):
    """Create a cruise category (or ship category with model=ShipCategory)"""
    values = {"name": name, "slug": slugify(name), "display_order": 0, "is_active": True}
    values.update(overrides)
    return _persist(db, model(tenant_id=tenant.id, **values))


def create_departure(
    db: Session,
    voyage,
    model=CruiseDeparture,
    days_ahead: int = 30,
    length_days: int = 7,
    available_seats: int = 50,
    price_modifier: float = 1.0,
    status: DepartureStatus = DepartureStatus.AVAILABLE,
):
    """
    Create a departure `days_ahead` days from now.

    Use a negative days_ahead for a past departure.
    """
    departure_date = datetime.utcnow() + timedelta(days=days_ahead)
    return _persist(
        db,
        model(
            voyage_id=voyage.id,
            departure_date=departure_date,
            return_date=departure_date + timedelta(days=length_days),
            available_seats=available_seats,
            price_modifier=price_modifier,
            status=status,
        ),
    )


def create_booking(
    db: Session,
    tenant: Tenant,
    user: User,
    item=None,
    booking_type: BookingType = BookingType.HOTEL,
    guests: int = 2,
    total_amount: float = 400.0,
    status: BookingStatus = BookingStatus.PENDING,
    payment_status: PaymentStatus = PaymentStatus.PENDING,
) -> Booking:
    """Create a booking directly, bypassing pricing and plan checks"""
    item_keys = {
        BookingType.CRUISE: "cruise_id",
        BookingType.SHIP: "ship_id",
        BookingType.HOTEL: "hotel_id",
        BookingType.PACKAGE: "package_id",
    }
    extra = {item_keys[booking_type]: item.id} if item is not None else {}
    return _persist(
        db,
        Booking(
            tenant_id=tenant.id,
            user_id=user.id,
            booking_type=booking_type,
            guests=guests,
            total_amount=total_amount,
            status=status,
            payment_status=payment_status,
            **extra,
        ),
    )
