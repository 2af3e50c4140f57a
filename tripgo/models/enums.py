"""
Enumerations shared by models and schemas.
"""

import enum


class TenantPlan(str, enum.Enum):
    BASIC = "BASIC"
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"
    ENTERPRISE = "ENTERPRISE"


class TenantStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"
    EMPLOYEE = "EMPLOYEE"
    HR_MANAGER = "HR_MANAGER"


class DepartureStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    FILLING_FAST = "FILLING_FAST"
    SOLD_OUT = "SOLD_OUT"
    CANCELLED = "CANCELLED"


class BookingType(str, enum.Enum):
    CRUISE = "CRUISE"
    SHIP = "SHIP"
    HOTEL = "HOTEL"
    PACKAGE = "PACKAGE"


class BookingStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class PaymentStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
