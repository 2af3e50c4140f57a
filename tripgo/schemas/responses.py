### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Common Response Schemas -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Common Response Schemas

Pydantic models for standardized API responses.
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, create_model

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper"""

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class PaginationMeta(BaseModel):
    """Pagination metadata"""

    page: int = Field(ge=1, description="Current page number")
    limit: int = Field(ge=1, description="Items per page")
    total: int = Field(ge=0, description="Total number of items")
    pages: int = Field(ge=0, description="Total number of pages")


def list_data_model(name: str, items_key: str, item_model: type[BaseModel]) -> type[BaseModel]:
    """
    Build the `data` model of a list response.

    List endpoints answer {success, data: {<items_key>: [...], pagination}}
    where the items key depends on the resource ("cruises", "hotels", ...).

    Example:
        CruiseListData = list_data_model("CruiseListData", "cruises", VoyageResponse)
    """
    return create_model(
        name,
        **{
            items_key: (List[item_model], Field(default_factory=list)),
            "pagination": (PaginationMeta, ...),
        },
    )


class MessageResponse(BaseModel):
    """Response carrying only a message"""

    success: bool = True
    message: str


class ErrorDetail(BaseModel):
    """Error detail for validation errors"""

    field: Optional[str] = None
    message: str
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response"""

    success: bool = False
    error: str
    details: Optional[List[ErrorDetail]] = None
    request_id: Optional[str] = None


class RateLimitErrorResponse(ErrorResponse):
    """Error response for HTTP 429"""

    retry_after: int


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = "healthy"
    version: str
    app_db_connected: bool
    tenants: Optional[int] = None
    extra: Optional[dict[str, Any]] = None
