### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - User API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
User API Endpoints

Accounts of the current tenant:
- GET /users - List users (admin)
- POST /users - Create a user with any role (admin)
- GET /users/{user_id} - User with booking and review counts (admin)
- PUT /users/{user_id} - Update profile (owner or admin)
- PUT /users/{user_id}/role - Change role (admin)
- DELETE /users/{user_id} - Delete a user without history (admin)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from tripgo.dependencies import get_user_service
from tripgo.middleware.tenant import get_tenant_user, require_tenant_admin
from tripgo.models import User, UserRole
from tripgo.schemas.responses import APIResponse, MessageResponse
from tripgo.schemas.user import (
    RoleUpdate,
    UserCreate,
    UserDetailResponse,
    UserListData,
    UserResponse,
    UserUpdate,
)
from tripgo.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=APIResponse[UserListData], summary="List users")
async def list_users(
    _: User = Depends(require_tenant_admin),
    service: UserService = Depends(get_user_service),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    is_active: Optional[bool] = Query(None, description="Filter by active flag"),
    search: Optional[str] = Query(None, description="Search email and name"),
) -> APIResponse[UserListData]:
    users, pagination = service.list_users(page, limit, role=role, is_active=is_active, search=search)
    return APIResponse(
        data=UserListData(
            users=[UserResponse.model_validate(u) for u in users],
            pagination=pagination,
        )
    )


@router.post(
    "",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(
    data: UserCreate,
    _: User = Depends(require_tenant_admin),
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserResponse]:
    user = service.create(data)
    return APIResponse(message="User created successfully", data=UserResponse.model_validate(user))


@router.get("/{user_id}", response_model=APIResponse[UserDetailResponse], summary="Get user")
async def get_user(
    user_id: int,
    _: User = Depends(require_tenant_admin),
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserDetailResponse]:
    return APIResponse(data=service.detail(user_id))


@router.put("/{user_id}", response_model=APIResponse[UserResponse], summary="Update user")
async def update_user(
    user_id: int,
    data: UserUpdate,
    actor: User = Depends(get_tenant_user),
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserResponse]:
    user = service.update(user_id, actor, data)
    return APIResponse(message="User updated successfully", data=UserResponse.model_validate(user))


@router.put("/{user_id}/role", response_model=APIResponse[UserResponse], summary="Change role")
async def update_user_role(
    user_id: int,
    data: RoleUpdate,
    actor: User = Depends(require_tenant_admin),
    service: UserService = Depends(get_user_service),
) -> APIResponse[UserResponse]:
    user = service.update_role(user_id, actor, data.role)
    return APIResponse(message="User role updated successfully", data=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
async def delete_user(
    user_id: int,
    actor: User = Depends(require_tenant_admin),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    service.delete(user_id, actor)
    return MessageResponse(message="User deleted successfully")
