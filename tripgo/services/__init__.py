### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Services Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Services Package

Contains business logic and data access services:
- tenant_service: Tenant administration and plan limits
- catalog_service: Hotels, packages and shared catalog queries
- voyage_service: Cruises and ships
- category_service / departure_service: Voyage categories and sailings
- booking_service: Reservations and pricing
- user_service: Tenant user administration
- config_service: Comment-preserving config.yaml access

Services are imported from their modules directly.
"""
