### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Catalog Schemas -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Catalog Schemas

Pydantic models for cruises, ships, hotels, travel packages and their
reviews. The `available` column is exposed as `is_active`.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from tripgo.models.enums import DepartureStatus
from tripgo.schemas.responses import list_data_model


# ========================================
# Shared
# ========================================

class CategorySummary(BaseModel):
    """Category embedded in a voyage"""

    id: int
    name: str
    slug: str
    icon: Optional[str] = None

    class Config:
        from_attributes = True


class DepartureSummary(BaseModel):
    """Departure embedded in a voyage"""

    id: int
    departure_date: datetime
    return_date: datetime
    available_seats: int
    price_modifier: float
    status: DepartureStatus
    final_price: Optional[float] = None

    class Config:
        from_attributes = True


class ReviewAuthor(BaseModel):
    first_name: str
    last_name: str
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class ReviewCreate(BaseModel):
    """Add a review"""

    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, max_length=2000)


class ReviewResponse(BaseModel):
    id: int
    user_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    user: Optional[ReviewAuthor] = None

    class Config:
        from_attributes = True


ReviewListData = list_data_model("ReviewListData", "reviews", ReviewResponse)


# ========================================
# Voyages (cruises and ships)
# ========================================

class VoyageCreate(BaseModel):
    """Create a cruise or ship"""

    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200, description="Derived from name when omitted")
    description: Optional[str] = None
    departure: Optional[str] = Field(None, max_length=200)
    departure_port: Optional[str] = Field(None, max_length=200)
    destination: Optional[str] = Field(None, max_length=200)
    duration: int = Field(1, ge=1, description="Length in days")
    capacity: int = Field(0, ge=0)
    price: float = Field(0.0, ge=0)
    type: Optional[str] = Field(None, max_length=100)
    rating: float = Field(0.0, ge=0, le=5)
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    itinerary: List[Any] = Field(default_factory=list)
    route_geo: Optional[List[Any]] = None
    route_names: Optional[List[str]] = None
    highlights: Optional[List[Any]] = None
    videos: Optional[dict[str, Any]] = None
    category_id: Optional[int] = None
    is_active: bool = True


class VoyageUpdate(BaseModel):
    """Update a cruise or ship (partial)"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    departure: Optional[str] = None
    departure_port: Optional[str] = None
    destination: Optional[str] = None
    duration: Optional[int] = Field(None, ge=1)
    capacity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    type: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    itinerary: Optional[List[Any]] = None
    route_geo: Optional[List[Any]] = None
    route_names: Optional[List[str]] = None
    highlights: Optional[List[Any]] = None
    videos: Optional[dict[str, Any]] = None
    category_id: Optional[int] = None
    is_active: Optional[bool] = None


class VoyageResponse(BaseModel):
    """Cruise or ship"""

    id: int
    tenant_id: int
    category_id: Optional[int] = None
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    departure: Optional[str] = None
    departure_port: Optional[str] = None
    destination: Optional[str] = None
    duration: int
    capacity: int
    price: float
    type: Optional[str] = None
    rating: float
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    itinerary: List[Any] = Field(default_factory=list)
    route_geo: Optional[List[Any]] = None
    route_names: Optional[List[str]] = None
    highlights: Optional[List[Any]] = None
    videos: Optional[dict[str, Any]] = None
    is_active: bool = Field(True, validation_alias="available")
    created_at: datetime
    updated_at: Optional[datetime] = None

    # Filled in by the voyage service
    category: Optional[CategorySummary] = None
    upcoming_departures: List[DepartureSummary] = Field(default_factory=list)
    review_count: int = 0

    class Config:
        from_attributes = True
        populate_by_name = True


CruiseListData = list_data_model("CruiseListData", "cruises", VoyageResponse)
ShipListData = list_data_model("ShipListData", "ships", VoyageResponse)


class AvailabilityResponse(BaseModel):
    """Availability check for a voyage"""

    available: bool
    capacity: int
    remaining_spots: int
    price_per_person: float
    total_price: float
    sailing_date: Optional[datetime] = None
    guests: int


class RouteResponse(BaseModel):
    """Route map data for a voyage"""

    id: int
    name: str
    route_geo: List[Any] = Field(default_factory=list)
    route_names: List[str] = Field(default_factory=list)
    highlights: List[Any] = Field(default_factory=list)
    videos: dict[str, Any] = Field(default_factory=dict)
    departure: Optional[str] = None
    destination: Optional[str] = None
    duration: int


# ========================================
# Hotels
# ========================================

class HotelCreate(BaseModel):
    """Create a hotel"""

    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=200)
    address: Optional[str] = Field(None, max_length=300)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    price_per_night: float = Field(0.0, ge=0)
    rating: float = Field(0.0, ge=0, le=5)
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    rooms: List[Any] = Field(default_factory=list)
    is_active: bool = True


class HotelUpdate(BaseModel):
    """Update a hotel (partial)"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    price_per_night: Optional[float] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    rooms: Optional[List[Any]] = None
    is_active: Optional[bool] = None


class HotelResponse(BaseModel):
    id: int
    tenant_id: int
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    price_per_night: float
    rating: float
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    rooms: List[Any] = Field(default_factory=list)
    is_active: bool = Field(True, validation_alias="available")
    created_at: datetime
    updated_at: Optional[datetime] = None
    review_count: int = 0

    class Config:
        from_attributes = True
        populate_by_name = True


HotelListData = list_data_model("HotelListData", "hotels", HotelResponse)


# ========================================
# Travel Packages
# ========================================

class PackageCreate(BaseModel):
    """Create a travel package"""

    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    destination: Optional[str] = Field(None, max_length=200)
    destinations: List[str] = Field(default_factory=list)
    duration: int = Field(1, ge=1)
    price: float = Field(0.0, ge=0)
    rating: float = Field(0.0, ge=0, le=5)
    images: List[str] = Field(default_factory=list)
    inclusions: List[str] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)
    itinerary: List[Any] = Field(default_factory=list)
    is_active: bool = True


class PackageUpdate(BaseModel):
    """Update a travel package (partial)"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = None
    description: Optional[str] = None
    destination: Optional[str] = None
    destinations: Optional[List[str]] = None
    duration: Optional[int] = Field(None, ge=1)
    price: Optional[float] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    images: Optional[List[str]] = None
    inclusions: Optional[List[str]] = None
    exclusions: Optional[List[str]] = None
    itinerary: Optional[List[Any]] = None
    is_active: Optional[bool] = None


class PackageResponse(BaseModel):
    id: int
    tenant_id: int
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    destination: Optional[str] = None
    destinations: List[str] = Field(default_factory=list)
    duration: int
    price: float
    rating: float
    images: List[str] = Field(default_factory=list)
    inclusions: List[str] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)
    itinerary: List[Any] = Field(default_factory=list)
    is_active: bool = Field(True, validation_alias="available")
    created_at: datetime
    updated_at: Optional[datetime] = None
    review_count: int = 0

    class Config:
        from_attributes = True
        populate_by_name = True


PackageListData = list_data_model("PackageListData", "packages", PackageResponse)
