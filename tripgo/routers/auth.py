### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Auth API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Auth API Endpoints

Customer accounts of the current tenant:
- POST /auth/register - Create an account and return a token
- POST /auth/login - Exchange credentials for a token
- POST /auth/logout - Stateless logout
- GET /auth/profile - Current user
- PUT /auth/profile - Update name, phone and avatar
- PUT /auth/change-password - Change password
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from tripgo.database import get_db
from tripgo.errors import AppError
from tripgo.middleware.auth import create_access_token
from tripgo.middleware.rate_limit import auth_rate_limit, limiter
from tripgo.middleware.tenant import get_current_tenant, get_tenant_user
from tripgo.models import Tenant, User, UserRole
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.schemas.user import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserResponse,
)
from tripgo.services.tenant_service import TenantService
from tripgo.utils import get_logger

logger = get_logger("tripgo.auth")

router = APIRouter()


def _auth_payload(user: User) -> AuthResponse:
    return AuthResponse(user=UserResponse.model_validate(user), token=create_access_token(user))


@router.post(
    "/register",
    response_model=APIResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register",
)
@limiter.limit(auth_rate_limit())
async def register(
    request: Request,
    data: RegisterRequest,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> APIResponse[AuthResponse]:
    """
    Register a customer account in the current tenant

    Emails are unique per tenant, so the same address may hold accounts
    in several storefronts.
    """
    if not (tenant.settings or {}).get("allow_registration", True):
        raise AppError("Registration is disabled for this tenant", status.HTTP_403_FORBIDDEN)

    email = data.email.lower()
    existing = db.query(User).filter(User.tenant_id == tenant.id, User.email == email).first()
    if existing:
        raise AppError("Email already registered in this tenant", status.HTTP_400_BAD_REQUEST)

    TenantService(db).check_limit(tenant, "users")

    user = User(
        tenant_id=tenant.id,
        email=email,
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        role=UserRole.CUSTOMER,
        is_active=True,
    )
    user.set_password(data.password)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"User registered: {user.email} (tenant={tenant.slug})")
    return APIResponse(message="User registered successfully", data=_auth_payload(user))


@router.post(
    "/login",
    response_model=APIResponse[AuthResponse],
    summary="Login",
)
@limiter.limit(auth_rate_limit())
async def login(
    request: Request,
    data: LoginRequest,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> APIResponse[AuthResponse]:
    user = db.query(User).filter(User.tenant_id == tenant.id, User.email == data.email.lower()).first()

    if not user or not user.verify_password(data.password):
        logger.warning(f"Failed login for {data.email} (tenant={tenant.slug})")
        raise AppError("Invalid email or password", status.HTTP_401_UNAUTHORIZED)

    if not user.is_active:
        raise AppError("Account is deactivated", status.HTTP_401_UNAUTHORIZED)

    user.record_login()
    db.commit()
    db.refresh(user)

    request.state.user_id = user.id
    return APIResponse(message="Login successful", data=_auth_payload(user))


@router.post("/logout", response_model=MessageResponse, summary="Logout")
async def logout() -> MessageResponse:
    """Tokens are stateless; clients discard theirs"""
    return MessageResponse(message="Logged out successfully")


@router.get("/profile", response_model=APIResponse[UserResponse], summary="Current user")
async def get_profile(user: User = Depends(get_tenant_user)) -> APIResponse[UserResponse]:
    return APIResponse(data=UserResponse.model_validate(user))


@router.put("/profile", response_model=APIResponse[UserResponse], summary="Update profile")
async def update_profile(
    data: ProfileUpdate,
    user: User = Depends(get_tenant_user),
    db: Session = Depends(get_db),
) -> APIResponse[UserResponse]:
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return APIResponse(message="Profile updated successfully", data=UserResponse.model_validate(user))


@router.put("/change-password", response_model=MessageResponse, summary="Change password")
async def change_password(
    data: ChangePasswordRequest,
    user: User = Depends(get_tenant_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    if not user.verify_password(data.current_password):
        raise AppError("Current password is incorrect", status.HTTP_400_BAD_REQUEST)

    user.set_password(data.new_password)
    db.commit()
    logger.info(f"Password changed for user {user.id}")
    return MessageResponse(message="Password changed successfully")
