### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Routers Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Routers Package

Contains endpoint routers for different resources:
- tenants: Tenant administration and public domain lookup
- auth: Registration, login and profile
- voyages: Cruises and ships
- hotels / packages: Hotel and travel package catalog
- categories: Cruise and ship categories
- departures: Cruise and ship departures
- bookings: Reservations
- users: Tenant user administration
- hero: Per-page banner content
- admin: Access logs and configuration
"""

from .admin import router as admin_router
from .auth import router as auth_router
from .bookings import router as bookings_router
from .categories import cruise_categories_router, ship_categories_router
from .departures import cruise_departures_router, ship_departures_router
from .hero import router as hero_router
from .hotels import router as hotels_router
from .packages import router as packages_router
from .tenants import router as tenants_router
from .users import router as users_router
from .voyages import cruises_router, ships_router

__all__ = [
    "admin_router",
    "auth_router",
    "bookings_router",
    "cruise_categories_router",
    "cruise_departures_router",
    "cruises_router",
    "hero_router",
    "hotels_router",
    "packages_router",
    "ship_categories_router",
    "ship_departures_router",
    "ships_router",
    "tenants_router",
    "users_router",
]
