### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Tenant Model -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Tenant Model

Represents a brand/storefront partition of the shared database.
Every catalog item, user and booking belongs to exactly one tenant.
"""

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from tripgo.database import Base
from tripgo.models.enums import TenantPlan, TenantStatus


class Tenant(Base):
    """
    Tenant model - a storefront identified by domain or subdomain.

    Examples:
        - "TripGo Main" - tripgo.com / main
        - "TripGo Cruises" - cruises.tripgo.com / cruises
    """

    __tablename__ = "tenants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)
    domain = Column(String(255), nullable=False, unique=True)
    subdomain = Column(String(100), nullable=False, unique=True)
    plan = Column(Enum(TenantPlan), default=TenantPlan.STANDARD, nullable=False)
    status = Column(Enum(TenantStatus), default=TenantStatus.ACTIVE, nullable=False)

    # Free-form brand settings; also records suspension bookkeeping
    settings = Column(JSON, default=dict, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Content is owned by the tenant; users and bookings block deletion instead
    users = relationship("User", back_populates="tenant")
    bookings = relationship("Booking", back_populates="tenant")
    cruises = relationship("Cruise", back_populates="tenant", cascade="all, delete-orphan")
    ships = relationship("Ship", back_populates="tenant", cascade="all, delete-orphan")
    hotels = relationship("Hotel", back_populates="tenant", cascade="all, delete-orphan")
    packages = relationship("TravelPackage", back_populates="tenant", cascade="all, delete-orphan")
    cruise_categories = relationship("CruiseCategory", cascade="all, delete-orphan")
    ship_categories = relationship("ShipCategory", cascade="all, delete-orphan")
    hero_settings = relationship("HeroSettings", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Tenant(id={self.id}, slug='{self.slug}', status={self.status})>"

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE
