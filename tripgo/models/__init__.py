### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Models Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Models Package

Contains SQLAlchemy models for the application database:
- Tenant / User: storefront partitions and their accounts
- Cruise / Ship / Hotel / TravelPackage: catalog
- CruiseCategory / ShipCategory, CruiseDeparture / ShipDeparture
- Booking / Review
- HeroSettings: per-page banner content
- AccessLog: request/response audit log
"""

from tripgo.models.enums import (
    BookingStatus,
    BookingType,
    DepartureStatus,
    PaymentStatus,
    TenantPlan,
    TenantStatus,
    UserRole,
)
from tripgo.models.tenant import Tenant
from tripgo.models.user import User
from tripgo.models.category import CruiseCategory, ShipCategory
from tripgo.models.voyage import Cruise, Ship
from tripgo.models.departure import CruiseDeparture, ShipDeparture
from tripgo.models.hotel import Hotel, TravelPackage
from tripgo.models.review import Review
from tripgo.models.booking import Booking
from tripgo.models.hero import HeroSettings
from tripgo.models.access_log import AccessLog

__all__ = [
    "AccessLog",
    "Booking",
    "BookingStatus",
    "BookingType",
    "Cruise",
    "CruiseCategory",
    "CruiseDeparture",
    "DepartureStatus",
    "HeroSettings",
    "Hotel",
    "PaymentStatus",
    "Review",
    "Ship",
    "ShipCategory",
    "ShipDeparture",
    "Tenant",
    "TenantPlan",
    "TenantStatus",
    "TravelPackage",
    "User",
    "UserRole",
]
