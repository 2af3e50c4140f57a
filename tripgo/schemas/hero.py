"""
Hero Content Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HeroSettingsUpdate(BaseModel):
    """Upsert payload; omitted fields keep their current value"""

    video_url: Optional[str] = Field(None, max_length=500)
    video_type: Optional[str] = Field(None, max_length=50)
    video_file: Optional[str] = Field(None, max_length=500)
    video_poster: Optional[str] = Field(None, max_length=500)
    video_loop: Optional[bool] = None
    video_autoplay: Optional[bool] = None
    video_muted: Optional[bool] = None
    fallback_image: Optional[str] = Field(None, max_length=500)
    overlay_opacity: Optional[float] = Field(None, ge=0, le=1)
    overlay_color: Optional[str] = Field(None, max_length=20)
    title: Optional[str] = Field(None, max_length=255)
    subtitle: Optional[str] = None
    cta_text: Optional[str] = Field(None, max_length=100)
    cta_link: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class HeroSettingsResponse(BaseModel):
    id: int
    tenant_id: int
    page: str
    video_url: Optional[str] = None
    video_type: Optional[str] = None
    video_file: Optional[str] = None
    video_poster: Optional[str] = None
    video_loop: bool
    video_autoplay: bool
    video_muted: bool
    fallback_image: Optional[str] = None
    overlay_opacity: float
    overlay_color: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    is_active: bool
    display_order: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
