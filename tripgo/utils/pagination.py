"""
Offset pagination helpers shared by the list endpoints.
"""

import math

from sqlalchemy.orm import Query

from tripgo.schemas.responses import PaginationMeta


def build_pagination(page: int, limit: int, total: int) -> PaginationMeta:
    """Pagination block with pages = ceil(total / limit)"""
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit) if limit else 0,
    )


def paginate(query: Query, page: int, limit: int) -> tuple[list, PaginationMeta]:
    """
    Apply offset/limit to a query.

    Returns:
        Tuple of (rows for the page, pagination metadata)
    """
    total = query.order_by(None).count()
    rows = query.offset((page - 1) * limit).limit(limit).all()
    return rows, build_pagination(page, limit, total)
