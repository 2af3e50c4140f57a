"""
Hotel and Travel Package Models

Non-voyage catalog items. Both are tenant-scoped and priced per guest;
hotels additionally per night.
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tripgo.database import Base


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=True, index=True)
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=True)
    address = Column(String(300), nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    price_per_night = Column(Float, nullable=False, default=0.0)
    rating = Column(Float, nullable=False, default=0.0)
    images = Column(JSON, default=list, nullable=False)
    amenities = Column(JSON, default=list, nullable=False)
    rooms = Column(JSON, default=list, nullable=False)
    available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tenant = relationship("Tenant", back_populates="hotels")
    reviews = relationship("Review", back_populates="hotel", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Hotel(id={self.id}, name='{self.name}', city='{self.city}')>"


class TravelPackage(Base):
    __tablename__ = "packages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=True, index=True)
    description = Column(Text, nullable=True)
    destination = Column(String(200), nullable=True)
    destinations = Column(JSON, default=list, nullable=False)
    duration = Column(Integer, nullable=False, default=1)
    price = Column(Float, nullable=False, default=0.0)
    rating = Column(Float, nullable=False, default=0.0)
    images = Column(JSON, default=list, nullable=False)
    inclusions = Column(JSON, default=list, nullable=False)
    exclusions = Column(JSON, default=list, nullable=False)
    itinerary = Column(JSON, default=list, nullable=False)
    available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tenant = relationship("Tenant", back_populates="packages")
    reviews = relationship("Review", back_populates="package", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<TravelPackage(id={self.id}, name='{self.name}')>"
