### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - User Model -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
User Model

Customers and staff of a tenant. The same email may register with
several tenants; passwords are stored as bcrypt hashes.
"""

from datetime import datetime

import bcrypt as _bcrypt
from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from tripgo.database import Base
from tripgo.models.enums import UserRole


def hash_password(plaintext: str) -> str:
    """Hash a password using bcrypt"""
    return _bcrypt.hashpw(plaintext.encode(), _bcrypt.gensalt()).decode()


def verify_password_hash(plaintext: str, hashed: str) -> bool:
    """Verify a plaintext password against a hash"""
    return _bcrypt.checkpw(plaintext.encode(), hashed.encode())


class User(Base):
    """User model - scoped to a single tenant"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=True)
    avatar = Column(String(500), nullable=True)
    role = Column(Enum(UserRole), default=UserRole.CUSTOMER, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login_at = Column(DateTime, nullable=True)

    tenant = relationship("Tenant", back_populates="users")
    bookings = relationship("Booking", back_populates="user")
    reviews = relationship("Review", back_populates="user")

    __table_args__ = (UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"

    def set_password(self, plaintext: str) -> None:
        self.password_hash = hash_password(plaintext)

    def verify_password(self, plaintext: str) -> bool:
        return verify_password_hash(plaintext, self.password_hash)

    def record_login(self) -> None:
        """Update the last login timestamp"""
        self.last_login_at = datetime.utcnow()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
