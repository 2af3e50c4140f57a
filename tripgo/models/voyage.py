### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Voyage Models (Cruises and Ships) -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Voyage Models

Cruises and ships share one catalog shape: pricing, capacity, route
geometry, itinerary and a category. Each has its own categories and
scheduled departures.
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tripgo.database import Base


class VoyageMixin:
    """Columns common to cruises and ships"""

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=True, index=True)
    description = Column(Text, nullable=True)

    # Where and how long
    departure = Column(String(200), nullable=True)
    departure_port = Column(String(200), nullable=True)
    destination = Column(String(200), nullable=True)
    duration = Column(Integer, nullable=False, default=1)  # days

    # Commercial
    capacity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False, default=0.0)
    type = Column(String(100), nullable=True)
    rating = Column(Float, nullable=False, default=0.0)

    # Media and content
    images = Column(JSON, default=list, nullable=False)
    amenities = Column(JSON, default=list, nullable=False)
    itinerary = Column(JSON, default=list, nullable=False)

    # Route map data
    route_geo = Column(JSON, nullable=True)  # [[lat, lng], ...]
    route_names = Column(JSON, nullable=True)
    highlights = Column(JSON, nullable=True)
    videos = Column(JSON, nullable=True)

    # Exposed as is_active in the API
    available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, name='{self.name}')>"


class Cruise(VoyageMixin, Base):
    __tablename__ = "cruises"

    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("cruise_categories.id"), nullable=True)

    tenant = relationship("Tenant", back_populates="cruises")
    category = relationship("CruiseCategory", back_populates="voyages")
    departures = relationship(
        "CruiseDeparture",
        back_populates="voyage",
        cascade="all, delete-orphan",
        order_by="CruiseDeparture.departure_date",
    )
    reviews = relationship("Review", back_populates="cruise", cascade="all, delete-orphan")


class Ship(VoyageMixin, Base):
    __tablename__ = "ships"

    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("ship_categories.id"), nullable=True)

    tenant = relationship("Tenant", back_populates="ships")
    category = relationship("ShipCategory", back_populates="voyages")
    departures = relationship(
        "ShipDeparture",
        back_populates="voyage",
        cascade="all, delete-orphan",
        order_by="ShipDeparture.departure_date",
    )
    reviews = relationship("Review", back_populates="ship", cascade="all, delete-orphan")
