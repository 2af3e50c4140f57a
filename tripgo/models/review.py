"""
Review Model

A rating left by a user on exactly one catalog item.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from tripgo.database import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Exactly one of these is set
    cruise_id = Column(Integer, ForeignKey("cruises.id"), nullable=True, index=True)
    ship_id = Column(Integer, ForeignKey("ships.id"), nullable=True, index=True)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=True, index=True)
    package_id = Column(Integer, ForeignKey("packages.id"), nullable=True, index=True)

    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="reviews")
    cruise = relationship("Cruise", back_populates="reviews")
    ship = relationship("Ship", back_populates="reviews")
    hotel = relationship("Hotel", back_populates="reviews")
    package = relationship("TravelPackage", back_populates="reviews")

    def __repr__(self):
        return f"<Review(id={self.id}, user_id={self.user_id}, rating={self.rating})>"
