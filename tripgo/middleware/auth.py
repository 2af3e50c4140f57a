### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - JWT Authentication Middleware -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
JWT Authentication

Provides bearer-token authentication for storefront users and admins.
Tokens are HS256 JWTs carrying user_id, email, tenant_id and exp.
"""

from datetime import datetime, timedelta

import jwt
from fastapi import Depends, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tripgo.config import get_api_settings
from tripgo.database import get_db
from tripgo.errors import AppError
from tripgo.models import User, UserRole

# Bearer token for JWT authentication
bearer_scheme = HTTPBearer(auto_error=False, description="JWT issued by /auth/login")

_AUTH_HEADERS = {"WWW-Authenticate": "Bearer"}


def create_access_token(user: User, expires_minutes: int | None = None) -> str:
    """
    Issue a signed token for a user.

    Args:
        user: Authenticated user
        expires_minutes: Override the configured lifetime

    Returns:
        Encoded JWT string
    """
    settings = get_api_settings()
    lifetime = expires_minutes if expires_minutes is not None else settings.jwt_expires_minutes
    payload = {
        "user_id": user.id,
        "email": user.email,
        "tenant_id": user.tenant_id,
        "exp": datetime.utcnow() + timedelta(minutes=lifetime),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Verify a JWT token and return the payload if valid"""
    settings = get_api_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
    if "user_id" not in payload:
        return None
    return payload


def _load_user(payload: dict, db: Session) -> User:
    user = db.query(User).filter(User.id == payload["user_id"]).first()
    if not user:
        raise AppError("User not found", status.HTTP_404_NOT_FOUND)
    if not user.is_active:
        raise AppError("User account not active", status.HTTP_401_UNAUTHORIZED, _AUTH_HEADERS)
    return user


async def get_current_user(
    request: Request,
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the authenticated user from the Authorization header.

    Raises:
        AppError 401: Missing, invalid or expired token, or inactive user
        AppError 404: Token refers to a user that no longer exists
    """
    if not bearer or not bearer.credentials:
        raise AppError("Access token required", status.HTTP_401_UNAUTHORIZED, _AUTH_HEADERS)

    payload = decode_access_token(bearer.credentials)
    if payload is None:
        raise AppError("Invalid or expired token", status.HTTP_401_UNAUTHORIZED, _AUTH_HEADERS)

    user = _load_user(payload, db)
    # Stored for access logging
    request.state.user_id = user.id
    return user


async def get_optional_user(
    request: Request,
    bearer: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Like get_current_user, but anonymous requests and bad tokens yield None"""
    if not bearer or not bearer.credentials:
        return None

    payload = decode_access_token(bearer.credentials)
    if payload is None:
        return None

    user = db.query(User).filter(User.id == payload["user_id"]).first()
    if user is None or not user.is_active:
        return None
    request.state.user_id = user.id
    return user


def require_role(*roles: UserRole):
    """
    Dependency factory for role checking

    Usage:
        @router.post("/{cruise_id}/reviews")
        async def add_review(
            user: User = Depends(require_role(UserRole.CUSTOMER, UserRole.ADMIN)),
        ):
            ...
    """

    async def check_role(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise AppError("Insufficient permissions", status.HTTP_403_FORBIDDEN)
        return user

    return check_role


# Convenience dependencies for common roles
require_admin = require_role(UserRole.ADMIN)
require_customer = require_role(UserRole.CUSTOMER, UserRole.ADMIN)
