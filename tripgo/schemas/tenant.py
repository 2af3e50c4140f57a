### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Tenant Schemas -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Tenant Schemas

Pydantic models for tenant administration and public domain lookup.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from tripgo.models.enums import TenantPlan, TenantStatus
from tripgo.schemas.responses import list_data_model

# ========================================
# Requests
# ========================================

class TenantCreate(BaseModel):
    """Create a new tenant"""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    slug: str = Field(..., min_length=1, max_length=100, description="URL-safe identifier")
    domain: str = Field(..., min_length=1, max_length=255, description="Primary domain (e.g., 'tripgo.com')")
    subdomain: str = Field(..., min_length=1, max_length=100, description="Subdomain label (e.g., 'cruises')")
    plan: TenantPlan = TenantPlan.STANDARD
    settings: dict[str, Any] = Field(default_factory=dict, description="Brand settings")


class TenantUpdate(BaseModel):
    """Update tenant fields (partial)"""
    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, min_length=1, max_length=100)
    domain: str | None = Field(None, min_length=1, max_length=255)
    subdomain: str | None = Field(None, min_length=1, max_length=100)
    plan: TenantPlan | None = None
    status: TenantStatus | None = None
    settings: dict[str, Any] | None = None


class TenantSuspendRequest(BaseModel):
    """Suspend a tenant"""
    reason: str | None = Field(None, max_length=500, description="Why the tenant is suspended")


# ========================================
# Responses
# ========================================

class TenantCounts(BaseModel):
    """Related record counts"""
    users: int = 0
    cruises: int = 0
    hotels: int = 0
    packages: int = 0
    bookings: int = 0


class TenantResponse(BaseModel):
    """Tenant response"""
    id: int
    name: str
    slug: str
    domain: str
    subdomain: str
    plan: TenantPlan
    status: TenantStatus
    settings: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime | None = None
    counts: TenantCounts | None = None

    class Config:
        from_attributes = True


class TenantPublicResponse(BaseModel):
    """Reduced projection returned by the public domain lookup"""
    id: int
    name: str
    slug: str
    domain: str
    subdomain: str
    plan: TenantPlan
    settings: dict[str, Any] = Field(default_factory=dict)

    class Config:
        from_attributes = True


TenantListData = list_data_model("TenantListData", "tenants", TenantResponse)


class BookingStatusStat(BaseModel):
    """Bookings in one status"""
    status: str
    count: int
    total_amount: float


class RevenueStat(BaseModel):
    """Paid bookings summary"""
    total: float = 0.0
    count: int = 0


class TenantStats(BaseModel):
    """Tenant statistics"""
    tenant_id: int
    users_by_role: dict[str, int] = Field(default_factory=dict)
    bookings_by_status: list[BookingStatusStat] = Field(default_factory=list)
    revenue: RevenueStat = Field(default_factory=RevenueStat)
    content: dict[str, int] = Field(default_factory=dict)


class InitializeDefaultsResponse(BaseModel):
    """Result of seeding the default tenants"""
    created: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
