### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Hero Content API Router -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Hero Content API Endpoints

Per-page banner (background video, overlay and call to action):
- GET /hero - All settings of the tenant (admin)
- GET /hero/{page} - Active settings for a page
- PUT /hero/{page} - Create or update (admin)
- DELETE /hero/{page} - Delete (admin)
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tripgo.database import get_db
from tripgo.errors import AppError
from tripgo.middleware.tenant import get_current_tenant, require_tenant_admin
from tripgo.models import HeroSettings, Tenant, User
from tripgo.schemas.hero import HeroSettingsResponse, HeroSettingsUpdate
from tripgo.schemas.responses import APIResponse, MessageResponse

router = APIRouter()


def _find(db: Session, tenant: Tenant, page: str) -> HeroSettings | None:
    return db.query(HeroSettings).filter(HeroSettings.tenant_id == tenant.id, HeroSettings.page == page).first()


@router.get("", response_model=APIResponse[List[HeroSettingsResponse]], summary="List hero settings")
async def list_hero_settings(
    _: User = Depends(require_tenant_admin),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> APIResponse[List[HeroSettingsResponse]]:
    settings = (
        db.query(HeroSettings)
        .filter(HeroSettings.tenant_id == tenant.id)
        .order_by(HeroSettings.display_order.asc(), HeroSettings.page.asc())
        .all()
    )
    return APIResponse(data=[HeroSettingsResponse.model_validate(s) for s in settings])


@router.get("/{page}", response_model=APIResponse[HeroSettingsResponse], summary="Get hero settings")
async def get_hero_settings(
    page: str,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> APIResponse[HeroSettingsResponse]:
    hero = (
        db.query(HeroSettings)
        .filter(
            HeroSettings.tenant_id == tenant.id,
            HeroSettings.page == page,
            HeroSettings.is_active.is_(True),
        )
        .first()
    )
    if not hero:
        raise AppError(f"No hero settings found for page: {page}", status.HTTP_404_NOT_FOUND)
    return APIResponse(data=HeroSettingsResponse.model_validate(hero))


@router.put("/{page}", response_model=APIResponse[HeroSettingsResponse], summary="Upsert hero settings")
async def upsert_hero_settings(
    page: str,
    data: HeroSettingsUpdate,
    _: User = Depends(require_tenant_admin),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> APIResponse[HeroSettingsResponse]:
    """Create the page's settings, or update only the provided fields"""
    values = data.model_dump(exclude_unset=True, exclude_none=True)
    hero = _find(db, tenant, page)
    created = hero is None

    if created:
        hero = HeroSettings(tenant_id=tenant.id, page=page, **values)
        db.add(hero)
    else:
        for field, value in values.items():
            setattr(hero, field, value)

    db.commit()
    db.refresh(hero)
    message = "Hero settings created successfully" if created else "Hero settings updated successfully"
    return APIResponse(message=message, data=HeroSettingsResponse.model_validate(hero))


@router.delete("/{page}", response_model=MessageResponse, summary="Delete hero settings")
async def delete_hero_settings(
    page: str,
    _: User = Depends(require_tenant_admin),
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
) -> MessageResponse:
    hero = _find(db, tenant, page)
    if not hero:
        raise AppError(f"No hero settings found for page: {page}", status.HTTP_404_NOT_FOUND)
    db.delete(hero)
    db.commit()
    return MessageResponse(message="Hero settings deleted successfully")
