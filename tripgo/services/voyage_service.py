### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Voyage Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Voyage Service

Cruises and ships: catalog behaviour plus upcoming departure previews,
availability checks and route map data.
"""

import math
from datetime import datetime

from fastapi import status
from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from tripgo.config_schema import CatalogConfig
from tripgo.errors import create_error
from tripgo.models import (
    Cruise,
    CruiseCategory,
    CruiseDeparture,
    DepartureStatus,
    Ship,
    ShipCategory,
    ShipDeparture,
    Tenant,
)
from tripgo.schemas.catalog import (
    AvailabilityResponse,
    CategorySummary,
    DepartureSummary,
    RouteResponse,
    VoyageResponse,
)
from tripgo.services.catalog_service import CatalogService
from tripgo.utils import naive_utc


class VoyageService(CatalogService):
    """Shared behaviour of cruises and ships"""

    departure_model = None
    category_model = None
    search_columns = ("name", "description", "destination", "departure")

    def __init__(self, db: Session, tenant: Tenant, catalog: CatalogConfig | None = None):
        super().__init__(db, tenant)
        self.catalog = catalog or CatalogConfig()

    def apply_filters(self, query: Query, filters: dict) -> Query:
        query = super().apply_filters(query, filters)
        if filters.get("type"):
            query = query.filter(func.lower(self.model.type).like(f"%{filters['type'].lower()}%"))
        if filters.get("destination"):
            pattern = f"%{filters['destination'].lower()}%"
            query = query.filter(
                or_(
                    func.lower(self.model.destination).like(pattern),
                    func.lower(self.model.departure).like(pattern),
                    func.lower(self.model.departure_port).like(pattern),
                )
            )
        if filters.get("category_id") is not None:
            query = query.filter(self.model.category_id == filters["category_id"])
        return query

    def validate_category(self, category_id: int | None) -> None:
        if category_id is None:
            return
        exists = (
            self.db.query(self.category_model.id)
            .filter(self.category_model.id == category_id, self.category_model.tenant_id == self.tenant.id)
            .first()
        )
        if not exists:
            raise create_error("Category not found", status.HTTP_404_NOT_FOUND)

    def create(self, data: dict):
        self.validate_category(data.get("category_id"))
        return super().create(data)

    def update(self, item_id: int, data: dict):
        if "category_id" in data:
            self.validate_category(data["category_id"])
        return super().update(item_id, data)

    # ----------------------------------------
    # Departures
    # ----------------------------------------

    def upcoming_departures(self, voyage_ids: list[int], per_voyage: int | None) -> dict[int, list]:
        """
        Future, non-cancelled departures grouped by voyage, earliest first.

        Args:
            voyage_ids: Voyages to look up
            per_voyage: Maximum per voyage (None for all)
        """
        if not voyage_ids:
            return {}
        dep = self.departure_model
        rows = (
            self.db.query(dep)
            .filter(
                dep.voyage_id.in_(voyage_ids),
                dep.departure_date > datetime.utcnow(),
                dep.status != DepartureStatus.CANCELLED,
            )
            .order_by(dep.departure_date.asc())
            .all()
        )
        grouped: dict[int, list] = {voyage_id: [] for voyage_id in voyage_ids}
        for row in rows:
            bucket = grouped[row.voyage_id]
            if per_voyage is None or len(bucket) < per_voyage:
                bucket.append(row)
        return grouped

    def to_response(self, voyage, departures: list, review_count: int = 0) -> VoyageResponse:
        response = VoyageResponse.model_validate(voyage)
        response.category = CategorySummary.model_validate(voyage.category) if voyage.category else None
        response.upcoming_departures = [DepartureSummary.model_validate(d) for d in departures]
        response.review_count = review_count
        return response

    def list_responses(self, page: int = 1, limit: int = 10, **kwargs):
        voyages, pagination = self.list_items(page, limit, **kwargs)
        ids = [v.id for v in voyages]
        departures = self.upcoming_departures(ids, self.catalog.upcoming_departures_preview)
        counts = self.review_counts(voyages)
        return [self.to_response(v, departures.get(v.id, []), counts.get(v.id, 0)) for v in voyages], pagination

    def detail_response(self, id_or_slug: int | str) -> VoyageResponse:
        voyage = self.get(id_or_slug)
        departures = self.upcoming_departures([voyage.id], None)
        counts = self.review_counts([voyage])
        return self.to_response(voyage, departures.get(voyage.id, []), counts.get(voyage.id, 0))

    # ----------------------------------------
    # Availability and route
    # ----------------------------------------

    def check_availability(self, item_id: int | str, sailing_date: datetime | None, guests: int = 1) -> AvailabilityResponse:
        """
        Estimate availability for a party on a date.

        Remaining spots assume a fixed share of capacity is already
        booked (catalog.booked_ratio).
        """
        voyage = self.get(item_id)
        capacity = voyage.capacity or 0

        sailing_date = naive_utc(sailing_date)
        date_ok = sailing_date is None or sailing_date > datetime.utcnow()
        available = bool(voyage.available) and guests <= capacity and date_ok

        booked = math.floor(capacity * self.catalog.booked_ratio)
        remaining = max(0, capacity - booked)

        return AvailabilityResponse(
            available=available,
            capacity=capacity,
            remaining_spots=remaining,
            price_per_person=voyage.price,
            total_price=voyage.price * guests,
            sailing_date=sailing_date,
            guests=guests,
        )

    def get_route(self, item_id: int | str) -> RouteResponse:
        voyage = self.get(item_id)
        return RouteResponse(
            id=voyage.id,
            name=voyage.name,
            route_geo=voyage.route_geo or [],
            route_names=voyage.route_names or [],
            highlights=voyage.highlights or [],
            videos=voyage.videos or {},
            departure=voyage.departure,
            destination=voyage.destination,
            duration=voyage.duration,
        )


class CruiseService(VoyageService):
    model = Cruise
    label = "Cruise"
    review_key = "cruise_id"
    departure_model = CruiseDeparture
    category_model = CruiseCategory


class ShipService(VoyageService):
    model = Ship
    label = "Ship"
    review_key = "ship_id"
    departure_model = ShipDeparture
    category_model = ShipCategory
