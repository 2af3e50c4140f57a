### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Departure Models -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Departure Models

A departure is a scheduled sailing of a cruise or ship with its own
date range, seat inventory, status and price modifier.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from tripgo.database import Base
from tripgo.models.enums import DepartureStatus


class DepartureMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    departure_date = Column(DateTime, nullable=False, index=True)
    return_date = Column(DateTime, nullable=False)
    available_seats = Column(Integer, nullable=False, default=0)
    price_modifier = Column(Float, nullable=False, default=1.0)
    status = Column(Enum(DepartureStatus), default=DepartureStatus.AVAILABLE, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def final_price(self) -> float | None:
        """Voyage price adjusted by this departure's modifier"""
        if self.voyage is None:
            return None
        return round(self.voyage.price * self.price_modifier)

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, date={self.departure_date}, status={self.status})>"


class CruiseDeparture(DepartureMixin, Base):
    __tablename__ = "cruise_departures"

    voyage_id = Column("cruise_id", Integer, ForeignKey("cruises.id"), nullable=False, index=True)
    voyage = relationship("Cruise", back_populates="departures")


class ShipDeparture(DepartureMixin, Base):
    __tablename__ = "ship_departures"

    voyage_id = Column("ship_id", Integer, ForeignKey("ships.id"), nullable=False, index=True)
    voyage = relationship("Ship", back_populates="departures")
