### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Admin System Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Admin System Endpoints

- GET /admin/access-logs - Request log of the current tenant
- GET /admin/config - Editable configuration
- PATCH /admin/config - Update configuration (comments in config.yaml are kept)

Access logs require a tenant admin. config.yaml is shared by every
tenant, so the config endpoints require an admin of the default tenant.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tripgo.config import get_api_settings
from tripgo.database import get_db
from tripgo.errors import AppError
from tripgo.middleware.tenant import get_current_tenant, require_platform_admin, require_tenant_admin
from tripgo.models import AccessLog, Tenant, User
from tripgo.schemas.admin import (
    AccessLogListData,
    AccessLogResponse,
    ConfigResponse,
    ConfigUpdateRequest,
    ConfigUpdateResponse,
)
from tripgo.schemas.responses import APIResponse
from tripgo.services.config_service import get_config_service
from tripgo.utils import get_logger, paginate

logger = get_logger("tripgo.admin")

router = APIRouter()


# ========================================
# Access Logs
# ========================================

@router.get(
    "/access-logs",
    response_model=APIResponse[AccessLogListData],
    summary="List access logs",
)
async def list_access_logs(
    _: User = Depends(require_tenant_admin),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    method: Optional[str] = Query(None, description="Filter by HTTP method"),
    status_code: Optional[int] = Query(None, ge=100, le=599, description="Filter by status code"),
) -> APIResponse[AccessLogListData]:
    """Requests attributed to the current tenant, newest first"""
    query = db.query(AccessLog).filter(AccessLog.tenant_id == tenant.id)
    if method:
        query = query.filter(AccessLog.method == method.upper())
    if status_code:
        query = query.filter(AccessLog.status_code == status_code)
    query = query.order_by(AccessLog.created_at.desc(), AccessLog.id.desc())

    logs, pagination = paginate(query, page, limit)
    return APIResponse(
        data=AccessLogListData(
            logs=[AccessLogResponse.model_validate(log) for log in logs],
            pagination=pagination,
        )
    )


# ========================================
# Configuration
# ========================================

@router.get(
    "/config",
    response_model=APIResponse[ConfigResponse],
    summary="Get configuration",
)
async def get_config(_: User = Depends(require_platform_admin)) -> APIResponse[ConfigResponse]:
    config = get_config_service().get_editable_config()
    return APIResponse(data=ConfigResponse(**config))


@router.patch(
    "/config",
    response_model=APIResponse[ConfigUpdateResponse],
    summary="Update configuration",
)
async def update_config(
    data: ConfigUpdateRequest,
    user: User = Depends(require_platform_admin),
) -> APIResponse[ConfigUpdateResponse]:
    """
    Update configuration and save to config.yaml.

    Updates are validated against the config schema before anything is
    written. Catalog and tenancy values apply on the next request; rate
    limits and logging handlers need a restart.
    """
    config_service = get_config_service()
    config_service.reload()

    updates = data.model_dump(exclude_none=True)
    if not updates:
        return APIResponse(
            data=ConfigUpdateResponse(
                changed_fields=[],
                restart_required=False,
                restart_required_fields=[],
                message="No changes provided",
            )
        )

    validation_errors = config_service.validate_update(updates)
    if validation_errors:
        raise AppError(
            f"Invalid configuration: {'; '.join(validation_errors)}",
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    changed = config_service.update_from_dict(updates)
    if not changed:
        return APIResponse(
            data=ConfigUpdateResponse(
                changed_fields=[],
                restart_required=False,
                restart_required_fields=[],
                message="No changes detected",
            )
        )

    config_service.save()
    get_api_settings.cache_clear()

    restart_fields = config_service.get_restart_required_fields()
    restart_required_changes = [f for f in changed if f in restart_fields]
    restart_required = len(restart_required_changes) > 0

    message = f"Configuration updated ({len(changed)} field(s) changed)"
    if restart_required:
        message += ". Restart required for some changes to take effect."

    logger.info(f"Configuration changed by user {user.id}: {', '.join(changed)}")
    return APIResponse(
        message=message,
        data=ConfigUpdateResponse(
            changed_fields=changed,
            restart_required=restart_required,
            restart_required_fields=restart_required_changes,
            message=message,
        ),
    )
