### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Catalog Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Catalog Service

Tenant-scoped listing, lookup, CRUD and reviews for catalog items.
CatalogService holds the behaviour shared by every item type; hotels,
packages, cruises and ships configure it through class attributes.

Filtering is composed from optional query values, so a listing only
pays for the filters a caller actually sends.
"""

from fastapi import status
from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Query, Session

from tripgo.errors import create_error
from tripgo.models import Hotel, Review, Tenant, TravelPackage, User
from tripgo.schemas.responses import PaginationMeta
from tripgo.utils import get_logger, paginate, slugify

logger = get_logger("tripgo.catalog")


class CatalogService:
    """
    Shared catalog behaviour.

    Subclasses set:
        model: SQLAlchemy model with tenant_id, available, rating
        label: Human name used in error messages ("Hotel")
        review_key: Review column pointing at the model ("hotel_id")
        price_column: Column used by min_price/max_price
        search_columns: Columns matched by ?search=
    """

    model = None
    label = "Item"
    review_key = ""
    price_column = "price"
    search_columns: tuple[str, ...] = ("name", "description")
    sortable = ("created_at", "name", "price", "rating", "duration")

    def __init__(self, db: Session, tenant: Tenant):
        self.db = db
        self.tenant = tenant

    # ----------------------------------------
    # Query building
    # ----------------------------------------

    def base_query(self) -> Query:
        return self.db.query(self.model).filter(self.model.tenant_id == self.tenant.id)

    def _column(self, name: str):
        return getattr(self.model, name)

    def _search_clause(self, term: str):
        pattern = f"%{term.lower()}%"
        return or_(*(func.lower(self._column(c)).like(pattern) for c in self.search_columns))

    def apply_filters(self, query: Query, filters: dict) -> Query:
        """Filters understood by every catalog type"""
        price = self._column(self.price_column)
        if filters.get("min_price") is not None:
            query = query.filter(price >= filters["min_price"])
        if filters.get("max_price") is not None:
            query = query.filter(price <= filters["max_price"])
        if filters.get("rating") is not None:
            query = query.filter(self.model.rating >= filters["rating"])
        if filters.get("duration") is not None and hasattr(self.model, "duration"):
            query = query.filter(self.model.duration == filters["duration"])
        if filters.get("search"):
            query = query.filter(self._search_clause(filters["search"]))
        return query

    def apply_sort(self, query: Query, sort_by: str | None, sort_order: str | None) -> Query:
        if sort_by == "price":
            sort_by = self.price_column
        if not sort_by or not hasattr(self.model, sort_by) or sort_by not in (*self.sortable, self.price_column):
            sort_by = "created_at"
        column = self._column(sort_by)
        ordered = column.asc() if (sort_order or "desc").lower() == "asc" else column.desc()
        return query.order_by(ordered, self.model.id.desc())

    # ----------------------------------------
    # Reads
    # ----------------------------------------

    def list_items(
        self,
        page: int = 1,
        limit: int = 10,
        sort_by: str | None = None,
        sort_order: str | None = None,
        **filters,
    ) -> tuple[list, PaginationMeta]:
        """List available items with filters, sorting and pagination"""
        query = self.base_query().filter(self.model.available.is_(True))
        query = self.apply_filters(query, filters)
        query = self.apply_sort(query, sort_by, sort_order)
        return paginate(query, page, limit)

    def find(self, id_or_slug: int | str):
        query = self.base_query()
        value = str(id_or_slug)
        if value.isdigit():
            return query.filter(or_(self.model.id == int(value), self.model.slug == value)).first()
        return query.filter(self.model.slug == value).first()

    def get(self, id_or_slug: int | str):
        item = self.find(id_or_slug)
        if item is None:
            raise create_error(f"{self.label} not found", status.HTTP_404_NOT_FOUND)
        return item

    def get_available(self, item_id: int):
        """Item that can be booked, or 404 '<Label> not found or not available'"""
        item = (
            self.base_query()
            .filter(self.model.id == item_id, self.model.available.is_(True))
            .first()
        )
        if item is None:
            raise create_error(f"{self.label} not found or not available", status.HTTP_404_NOT_FOUND)
        return item

    def review_counts(self, items: list) -> dict[int, int]:
        """Review count per item id, in one query"""
        ids = [item.id for item in items]
        if not ids:
            return {}
        key = getattr(Review, self.review_key)
        rows = self.db.query(key, func.count(Review.id)).filter(key.in_(ids)).group_by(key).all()
        return dict(rows)

    # ----------------------------------------
    # Writes
    # ----------------------------------------

    def _prepare(self, data: dict) -> dict:
        data = dict(data)
        if "is_active" in data:
            active = data.pop("is_active")
            if active is not None:
                data["available"] = active
        return data

    def create(self, data: dict):
        values = self._prepare(data)
        if not values.get("slug"):
            values["slug"] = slugify(values["name"])
        item = self.model(tenant_id=self.tenant.id, **values)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"{self.label} created: {item.name} (tenant={self.tenant.slug})")
        return item

    def update(self, item_id: int, data: dict):
        item = self.get(item_id)
        for field, value in self._prepare(data).items():
            setattr(item, field, value)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item_id: int) -> None:
        item = self.get(item_id)
        self.db.delete(item)
        self.db.commit()
        logger.info(f"{self.label} deleted: {item.name} (tenant={self.tenant.slug})")

    # ----------------------------------------
    # Reviews
    # ----------------------------------------

    def list_reviews(self, item_id: int | str, page: int = 1, limit: int = 10) -> tuple[list[Review], PaginationMeta]:
        item = self.get(item_id)
        query = (
            self.db.query(Review)
            .filter(getattr(Review, self.review_key) == item.id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return paginate(query, page, limit)

    def add_review(self, item_id: int | str, user: User, rating: int, comment: str | None = None) -> Review:
        """
        Add a user's review and recompute the item's average rating.

        Raises:
            AppError 400: The user already reviewed this item
        """
        item = self.get(item_id)
        key = getattr(Review, self.review_key)

        existing = self.db.query(Review.id).filter(key == item.id, Review.user_id == user.id).first()
        if existing:
            raise create_error(
                f"You have already reviewed this {self.label.lower()}", status.HTTP_400_BAD_REQUEST
            )

        review = Review(user_id=user.id, rating=rating, comment=comment, **{self.review_key: item.id})
        self.db.add(review)
        self.db.flush()

        average = self.db.query(func.avg(Review.rating)).filter(key == item.id).scalar()
        item.rating = round(float(average or 0), 1)

        self.db.commit()
        self.db.refresh(review)
        return review


class HotelService(CatalogService):
    model = Hotel
    label = "Hotel"
    review_key = "hotel_id"
    price_column = "price_per_night"
    search_columns = ("name", "description", "city", "country", "location")
    sortable = ("created_at", "name", "price_per_night", "rating")

    def apply_filters(self, query: Query, filters: dict) -> Query:
        query = super().apply_filters(query, filters)
        if filters.get("city"):
            query = query.filter(func.lower(Hotel.city).like(f"%{filters['city'].lower()}%"))
        if filters.get("country"):
            query = query.filter(func.lower(Hotel.country).like(f"%{filters['country'].lower()}%"))
        return query


class PackageService(CatalogService):
    model = TravelPackage
    label = "Package"
    review_key = "package_id"
    search_columns = ("name", "description", "destination")

    def apply_filters(self, query: Query, filters: dict) -> Query:
        query = super().apply_filters(query, filters)
        destination = filters.get("destination")
        if destination:
            pattern = f"%{destination.lower()}%"
            # destinations is a JSON list; match against its serialized form
            query = query.filter(
                or_(
                    func.lower(TravelPackage.destination).like(pattern),
                    func.lower(cast(TravelPackage.destinations, String)).like(pattern),
                )
            )
        return query
