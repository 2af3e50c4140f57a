"""
Category Service

Cruise and ship categories: slug-addressable, tenant-scoped groupings
with a display order and an active flag.
"""

from fastapi import status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from tripgo.errors import create_error
from tripgo.models import Cruise, CruiseCategory, Ship, ShipCategory, Tenant
from tripgo.schemas.catalog import VoyageResponse
from tripgo.schemas.category import CategoryDetailResponse, CategoryResponse
from tripgo.schemas.responses import PaginationMeta
from tripgo.utils import get_logger, paginate, slugify

logger = get_logger("tripgo.categories")


class CategoryService:
    """Shared category behaviour; subclasses bind the models"""

    model = None
    voyage_model = None
    voyage_label = "voyages"

    def __init__(self, db: Session, tenant: Tenant):
        self.db = db
        self.tenant = tenant

    def base_query(self):
        return self.db.query(self.model).filter(self.model.tenant_id == self.tenant.id)

    def voyage_counts(self, category_ids: list[int]) -> dict[int, int]:
        if not category_ids:
            return {}
        rows = (
            self.db.query(self.voyage_model.category_id, func.count(self.voyage_model.id))
            .filter(self.voyage_model.category_id.in_(category_ids))
            .group_by(self.voyage_model.category_id)
            .all()
        )
        return dict(rows)

    def list_categories(
        self,
        page: int = 1,
        limit: int = 50,
        search: str | None = None,
        is_active: bool | None = None,
    ) -> tuple[list[CategoryResponse], PaginationMeta]:
        query = self.base_query()
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(func.lower(self.model.name).like(pattern), func.lower(self.model.description).like(pattern))
            )
        if is_active is not None:
            query = query.filter(self.model.is_active.is_(is_active))
        query = query.order_by(self.model.display_order.asc(), self.model.name.asc())

        categories, pagination = paginate(query, page, limit)
        counts = self.voyage_counts([c.id for c in categories])
        responses = []
        for category in categories:
            response = CategoryResponse.model_validate(category)
            response.voyage_count = counts.get(category.id, 0)
            responses.append(response)
        return responses, pagination

    def get(self, category_id: int):
        category = self.base_query().filter(self.model.id == category_id).first()
        if not category:
            raise create_error("Category not found", status.HTTP_404_NOT_FOUND)
        return category

    def get_by_slug(self, slug: str):
        category = self.base_query().filter(self.model.slug == slug).first()
        if not category:
            raise create_error("Category not found", status.HTTP_404_NOT_FOUND)
        return category

    def detail_response(self, category) -> CategoryDetailResponse:
        """Category with its active voyages, newest first"""
        voyages = (
            self.db.query(self.voyage_model)
            .filter(self.voyage_model.category_id == category.id, self.voyage_model.available.is_(True))
            .order_by(self.voyage_model.created_at.desc())
            .all()
        )
        response = CategoryDetailResponse.model_validate(category)
        response.voyages = [VoyageResponse.model_validate(v) for v in voyages]
        response.voyage_count = self.voyage_counts([category.id]).get(category.id, 0)
        return response

    def _slug_taken(self, slug: str, exclude_id: int | None = None) -> bool:
        query = self.base_query().filter(self.model.slug == slug)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None

    def create(self, data: dict):
        slug = slugify(data["name"])
        if not slug or self._slug_taken(slug):
            raise create_error("A category with this name already exists", status.HTTP_400_BAD_REQUEST)

        category = self.model(tenant_id=self.tenant.id, slug=slug, **data)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"Category created: {category.slug} (tenant={self.tenant.slug})")
        return category

    def update(self, category_id: int, data: dict):
        category = self.get(category_id)

        if data.get("name") and data["name"] != category.name:
            slug = slugify(data["name"])
            if not slug or self._slug_taken(slug, exclude_id=category.id):
                raise create_error("A category with this name already exists", status.HTTP_400_BAD_REQUEST)
            category.slug = slug

        for field, value in data.items():
            if value is not None:
                setattr(category, field, value)

        self.db.commit()
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> None:
        category = self.get(category_id)
        in_use = self.voyage_counts([category.id]).get(category.id, 0)
        if in_use:
            raise create_error(
                f"Cannot delete category with {in_use} {self.voyage_label}. "
                f"Please reassign or delete the {self.voyage_label} first.",
                status.HTTP_400_BAD_REQUEST,
            )
        self.db.delete(category)
        self.db.commit()

    def toggle_status(self, category_id: int):
        category = self.get(category_id)
        category.is_active = not category.is_active
        self.db.commit()
        self.db.refresh(category)
        return category


class CruiseCategoryService(CategoryService):
    model = CruiseCategory
    voyage_model = Cruise
    voyage_label = "cruises"


class ShipCategoryService(CategoryService):
    model = ShipCategory
    voyage_model = Ship
    voyage_label = "ships"
