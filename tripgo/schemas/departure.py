"""
Departure Schemas

Scheduled sailings of a cruise or ship.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from tripgo.models.enums import DepartureStatus


class DepartureCreate(BaseModel):
    """Create a departure for a voyage"""

    voyage_id: int = Field(..., description="Cruise or ship ID")
    departure_date: datetime
    return_date: datetime
    available_seats: Optional[int] = Field(None, ge=0, description="Defaults to the voyage capacity")
    price_modifier: float = Field(1.0, gt=0)
    status: DepartureStatus = DepartureStatus.AVAILABLE
    notes: Optional[str] = None


class DepartureBulkCreate(BaseModel):
    departures: List[DepartureCreate] = Field(default_factory=list)


class DepartureUpdate(BaseModel):
    departure_date: Optional[datetime] = None
    return_date: Optional[datetime] = None
    available_seats: Optional[int] = Field(None, ge=0)
    price_modifier: Optional[float] = Field(None, gt=0)
    status: Optional[DepartureStatus] = None
    notes: Optional[str] = None


class SeatUpdateRequest(BaseModel):
    """Book seats on a departure"""

    seats_to_book: int = Field(..., ge=1)


class DepartureResponse(BaseModel):
    id: int
    voyage_id: int
    departure_date: datetime
    return_date: datetime
    available_seats: int
    price_modifier: float
    status: DepartureStatus
    notes: Optional[str] = None
    final_price: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
