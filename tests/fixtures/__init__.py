"""
Test fixtures and factories for TripGo tests.
"""

from tests.fixtures.data import (
    SAMPLE_CRUISE,
    SAMPLE_HOTEL,
    SAMPLE_PACKAGE,
    SAMPLE_REGISTRATION,
    SAMPLE_TENANT,
)
from tests.fixtures.factories import (
    auth_headers_for,
    create_booking,
    create_category,
    create_cruise,
    create_departure,
    create_hotel,
    create_package,
    create_ship,
    create_tenant,
    create_user,
)

__all__ = [
    "SAMPLE_CRUISE",
    "SAMPLE_HOTEL",
    "SAMPLE_PACKAGE",
    "SAMPLE_REGISTRATION",
    "SAMPLE_TENANT",
    "auth_headers_for",
    "create_booking",
    "create_category",
    "create_cruise",
    "create_departure",
    "create_hotel",
    "create_package",
    "create_ship",
    "create_tenant",
    "create_user",
]
