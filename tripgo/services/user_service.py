### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - User Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
User Service

Tenant admin management of the accounts in one storefront. Self-service
(register, profile, password) lives in the auth router.
"""

from fastapi import status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from tripgo.errors import create_error
from tripgo.models import Booking, Review, Tenant, User, UserRole
from tripgo.schemas.responses import PaginationMeta
from tripgo.schemas.user import UserCreate, UserDetailResponse, UserUpdate
from tripgo.services.tenant_service import TenantService
from tripgo.utils import get_logger, paginate

logger = get_logger("tripgo.users")


class UserService:
    """User administration within a tenant"""

    def __init__(self, db: Session, tenant: Tenant):
        self.db = db
        self.tenant = tenant

    def base_query(self):
        return self.db.query(User).filter(User.tenant_id == self.tenant.id)

    def list_users(
        self,
        page: int = 1,
        limit: int = 20,
        role: UserRole | None = None,
        is_active: bool | None = None,
        search: str | None = None,
    ) -> tuple[list[User], PaginationMeta]:
        query = self.base_query()
        if role:
            query = query.filter(User.role == role)
        if is_active is not None:
            query = query.filter(User.is_active.is_(is_active))
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(User.email).like(pattern),
                    func.lower(User.first_name).like(pattern),
                    func.lower(User.last_name).like(pattern),
                )
            )
        query = query.order_by(User.created_at.desc(), User.id.desc())
        return paginate(query, page, limit)

    def get(self, user_id: int) -> User:
        user = self.base_query().filter(User.id == user_id).first()
        if not user:
            raise create_error("User not found", status.HTTP_404_NOT_FOUND)
        return user

    def detail(self, user_id: int) -> UserDetailResponse:
        user = self.get(user_id)
        response = UserDetailResponse.model_validate(user)
        response.booking_count = self.db.query(func.count(Booking.id)).filter(Booking.user_id == user.id).scalar()
        response.review_count = self.db.query(func.count(Review.id)).filter(Review.user_id == user.id).scalar()
        return response

    def create(self, data: UserCreate) -> User:
        """
        Create an account with any role.

        Raises:
            AppError 409: Email already used in this tenant
            AppError 403: Plan user limit reached
        """
        email = data.email.lower()
        if self.base_query().filter(User.email == email).first():
            raise create_error("User with this email already exists", status.HTTP_409_CONFLICT)

        TenantService(self.db).check_limit(self.tenant, "users")

        user = User(
            tenant_id=self.tenant.id,
            email=email,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            avatar=data.avatar,
            role=data.role,
            is_active=True,
        )
        user.set_password(data.password)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"User created: {user.email} as {user.role.value} (tenant={self.tenant.slug})")
        return user

    def update(self, user_id: int, actor: User, data: UserUpdate) -> User:
        """
        Update an account's profile. Owners may edit their own profile;
        only admins may edit others or change the active flag.
        """
        user = self.get(user_id)
        is_admin = actor.role == UserRole.ADMIN
        if not is_admin and actor.id != user.id:
            raise create_error("Access denied", status.HTTP_403_FORBIDDEN)

        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        if "is_active" in updates:
            if not is_admin:
                raise create_error("Insufficient permissions", status.HTTP_403_FORBIDDEN)
            if user.id == actor.id and not updates["is_active"]:
                raise create_error("Cannot deactivate your own account", status.HTTP_400_BAD_REQUEST)

        for field, value in updates.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_role(self, user_id: int, actor: User, role: UserRole) -> User:
        user = self.get(user_id)
        if user.id == actor.id:
            raise create_error("Cannot change your own role", status.HTTP_400_BAD_REQUEST)

        user.role = role
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Role of {user.email} set to {role.value} (tenant={self.tenant.slug})")
        return user

    def delete(self, user_id: int, actor: User) -> None:
        """
        Raises:
            AppError 400: Own account, or the user has bookings or reviews
        """
        user = self.get(user_id)
        if user.id == actor.id:
            raise create_error("Cannot delete your own account", status.HTTP_400_BAD_REQUEST)

        has_history = (
            self.db.query(Booking.id).filter(Booking.user_id == user.id).first()
            or self.db.query(Review.id).filter(Review.user_id == user.id).first()
        )
        if has_history:
            raise create_error(
                "Cannot delete user with bookings or reviews. Deactivate the account instead.",
                status.HTTP_400_BAD_REQUEST,
            )

        self.db.delete(user)
        self.db.commit()
        logger.info(f"User deleted: {user.email} (tenant={self.tenant.slug})")
