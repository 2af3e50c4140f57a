### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Booking Model -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Booking Model

A reservation of a cruise, ship, hotel or package by a tenant's user.
Aggregated per tenant for statistics (counts and sums by status).
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from tripgo.database import Base
from tripgo.models.enums import BookingStatus, BookingType, PaymentStatus


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    booking_type = Column(Enum(BookingType), nullable=False)
    cruise_id = Column(Integer, ForeignKey("cruises.id", ondelete="SET NULL"), nullable=True)
    ship_id = Column(Integer, ForeignKey("ships.id", ondelete="SET NULL"), nullable=True)
    hotel_id = Column(Integer, ForeignKey("hotels.id", ondelete="SET NULL"), nullable=True)
    package_id = Column(Integer, ForeignKey("packages.id", ondelete="SET NULL"), nullable=True)

    guests = Column(Integer, nullable=False, default=1)
    check_in = Column(DateTime, nullable=True)
    check_out = Column(DateTime, nullable=True)
    special_requests = Column(Text, nullable=True)

    total_amount = Column(Float, nullable=False, default=0.0)
    status = Column(Enum(BookingStatus), default=BookingStatus.PENDING, nullable=False, index=True)
    payment_status = Column(Enum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False)
    payment_reference = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tenant = relationship("Tenant", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
    cruise = relationship("Cruise")
    ship = relationship("Ship")
    hotel = relationship("Hotel")
    package = relationship("TravelPackage")

    def __repr__(self):
        return f"<Booking(id={self.id}, type={self.booking_type}, status={self.status})>"

    @property
    def item_id(self) -> int | None:
        return self.cruise_id or self.ship_id or self.hotel_id or self.package_id

    @property
    def item_name(self) -> str | None:
        item = self.cruise or self.ship or self.hotel or self.package
        return item.name if item is not None else None
