### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Category Models -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Category Models

Slug-addressable groupings used for storefront navigation and filtered
voyage listings. Slugs are unique within a tenant.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from tripgo.database import Base


class CategoryMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(100), nullable=True)
    image = Column(String(500), nullable=True)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, slug='{self.slug}')>"


class CruiseCategory(CategoryMixin, Base):
    __tablename__ = "cruise_categories"

    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    voyages = relationship("Cruise", back_populates="category")

    __table_args__ = (UniqueConstraint("tenant_id", "slug", name="uq_cruise_categories_tenant_slug"),)


class ShipCategory(CategoryMixin, Base):
    __tablename__ = "ship_categories"

    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    voyages = relationship("Ship", back_populates="category")

    __table_args__ = (UniqueConstraint("tenant_id", "slug", name="uq_ship_categories_tenant_slug"),)
