### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
TripGo API Package

This package contains the FastAPI application that serves cruises, ships,
hotels, packages and bookings for every tenant storefront, plus the async
client the storefronts use to call it.
"""

__version__ = "1.0.0"
