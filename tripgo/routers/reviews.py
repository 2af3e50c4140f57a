"""
Review endpoints shared by every catalog router.

- GET /{item_id}/reviews - Paginated reviews, newest first
- POST /{item_id}/reviews - Add a review (customer or admin)
"""

from typing import Callable

from fastapi import APIRouter, Depends, Query, status

from tripgo.middleware.tenant import require_tenant_customer
from tripgo.models import User
from tripgo.schemas.catalog import ReviewCreate, ReviewListData, ReviewResponse
from tripgo.schemas.responses import APIResponse
from tripgo.services.catalog_service import CatalogService


def add_review_routes(router: APIRouter, get_service: Callable[..., CatalogService]) -> None:
    """Attach the review routes to a catalog router"""

    @router.get(
        "/{item_id}/reviews",
        response_model=APIResponse[ReviewListData],
        summary="List reviews",
    )
    async def list_reviews(
        item_id: str,
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
        service: CatalogService = Depends(get_service),
    ) -> APIResponse[ReviewListData]:
        reviews, pagination = service.list_reviews(item_id, page, limit)
        return APIResponse(
            data=ReviewListData(
                reviews=[ReviewResponse.model_validate(r) for r in reviews],
                pagination=pagination,
            )
        )

    @router.post(
        "/{item_id}/reviews",
        response_model=APIResponse[ReviewResponse],
        status_code=status.HTTP_201_CREATED,
        summary="Add review",
    )
    async def add_review(
        item_id: str,
        data: ReviewCreate,
        user: User = Depends(require_tenant_customer),
        service: CatalogService = Depends(get_service),
    ) -> APIResponse[ReviewResponse]:
        """One review per user and item; the item's average rating is recomputed"""
        review = service.add_review(item_id, user, data.rating, data.comment)
        return APIResponse(message="Review added successfully", data=ReviewResponse.model_validate(review))
