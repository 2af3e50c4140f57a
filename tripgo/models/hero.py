"""
Hero Settings Model

Per-page hero banner content (background video, overlay, copy and
call to action) for a tenant's storefront.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint

from tripgo.database import Base


class HeroSettings(Base):
    __tablename__ = "hero_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
    page = Column(String(100), nullable=False)  # "home", "cruises", ...

    # Background video
    video_url = Column(String(500), nullable=True)
    video_type = Column(String(50), nullable=True)  # "youtube", "upload", ...
    video_file = Column(String(500), nullable=True)
    video_poster = Column(String(500), nullable=True)
    video_loop = Column(Boolean, default=True, nullable=False)
    video_autoplay = Column(Boolean, default=True, nullable=False)
    video_muted = Column(Boolean, default=True, nullable=False)
    fallback_image = Column(String(500), nullable=True)

    # Overlay
    overlay_opacity = Column(Float, default=0.4, nullable=False)
    overlay_color = Column(String(20), default="#000000", nullable=False)

    # Copy
    title = Column(String(255), nullable=True)
    subtitle = Column(Text, nullable=True)
    cta_text = Column(String(100), nullable=True)
    cta_link = Column(String(500), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (UniqueConstraint("tenant_id", "page", name="uq_hero_settings_tenant_page"),)

    def __repr__(self):
        return f"<HeroSettings(id={self.id}, page='{self.page}')>"
