"""
Category Schemas

Cruise and ship categories share these models.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from tripgo.schemas.catalog import VoyageResponse
from tripgo.schemas.responses import list_data_model


class CategoryCreate(BaseModel):
    """Create a category; the slug is derived from the name"""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = Field(None, max_length=500)
    display_order: int = 0
    is_active: bool = True


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class CategoryResponse(BaseModel):
    id: int
    tenant_id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    voyage_count: int = 0

    class Config:
        from_attributes = True


class CategoryDetailResponse(CategoryResponse):
    """Category with its active voyages"""

    voyages: List[VoyageResponse] = Field(default_factory=list)


CategoryListData = list_data_model("CategoryListData", "categories", CategoryResponse)
