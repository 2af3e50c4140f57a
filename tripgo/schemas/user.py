"""
User and Auth Schemas

Registration, login, profile and password change payloads, and the
tenant admin user management models.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from tripgo.models.enums import UserRole
from tripgo.schemas.responses import list_data_model


class RegisterRequest(BaseModel):
    """Register a customer in the current tenant"""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=50)


class LoginRequest(BaseModel):
    """Login request"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    """Editable profile fields"""
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=50)
    avatar: str | None = Field(None, max_length=500)


class ChangePasswordRequest(BaseModel):
    """Change password request"""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)


class UserResponse(BaseModel):
    """User response (never includes the password hash)"""
    id: int
    tenant_id: int
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    avatar: str | None = None
    role: UserRole
    is_active: bool
    created_at: datetime
    last_login_at: datetime | None = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Login/registration result"""
    user: UserResponse
    token: str


# ----------------------------------------
# User management (tenant admin)
# ----------------------------------------

class UserCreate(BaseModel):
    """Create an account in the current tenant"""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=50)
    avatar: str | None = Field(None, max_length=500)
    role: UserRole = UserRole.CUSTOMER


class UserUpdate(ProfileUpdate):
    """Profile fields plus the active flag (admins only)"""
    is_active: bool | None = None


class RoleUpdate(BaseModel):
    role: UserRole


class UserDetailResponse(UserResponse):
    booking_count: int = 0
    review_count: int = 0


UserListData = list_data_model("UserListData", "users", UserResponse)
