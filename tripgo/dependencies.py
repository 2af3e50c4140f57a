### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - FastAPI Dependencies -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
FastAPI Dependencies

Provides dependency injection for:
- Catalog behaviour read from config.yaml
- Tenant-scoped services
"""

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy.orm import Session

from tripgo.config_schema import CatalogConfig, TenancyConfig
from tripgo.database import get_db
from tripgo.middleware.tenant import get_current_tenant
from tripgo.models import Tenant
from tripgo.services.booking_service import BookingService
from tripgo.services.config_service import _to_plain, get_config_service
from tripgo.services.tenant_service import TenantService
from tripgo.services.user_service import UserService
from tripgo.utils import get_logger

logger = get_logger("tripgo.dependencies")


def _load_section(section: str, model):
    """Validate one config.yaml section, falling back to defaults when invalid"""
    raw = _to_plain(get_config_service().get(section, {})) or {}
    try:
        return model(**raw)
    except ValidationError as e:
        logger.warning(f"Invalid '{section}' config, using defaults: {e.error_count()} error(s)")
        return model()


def get_catalog_config() -> CatalogConfig:
    """
    Catalog thresholds (departure preview size, filling-fast threshold,
    booked ratio). Read on every request so admin edits apply immediately.
    """
    return _load_section("catalog", CatalogConfig)


def get_tenancy_config() -> TenancyConfig:
    return _load_section("tenancy", TenancyConfig)


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(db)


def get_booking_service(
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_current_tenant),
) -> BookingService:
    return BookingService(db, tenant)


def get_user_service(
    db: Session = Depends(get_db),
    tenant: Tenant = Depends(get_current_tenant),
) -> UserService:
    return UserService(db, tenant)
