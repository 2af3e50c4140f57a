### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Schemas Package -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Schemas Package

Contains Pydantic models for request/response validation:
- responses: Common response schemas and the list envelope
- tenant: Tenant admin and public lookup schemas
- user: Registration, login and profile schemas
- catalog: Cruises, ships, hotels, packages and reviews
- category / departure: Voyage categories and scheduled departures
- booking: Reservations and admin overview
- hero: Per-page hero content
- admin: Access logs and configuration editing

Import the submodules directly; only the response envelope is
re-exported here.
"""

from .responses import (
    APIResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    PaginationMeta,
    list_data_model,
)

__all__ = [
    "APIResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "PaginationMeta",
    "list_data_model",
]
