### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Departure Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Departure Service

Scheduled sailings of cruises and ships: date validation, bulk creation
in a single transaction and seat inventory with automatic status.
"""

from datetime import datetime

from fastapi import status
from sqlalchemy.orm import Session

from tripgo.errors import create_error
from tripgo.models import Cruise, CruiseDeparture, DepartureStatus, Ship, ShipDeparture, Tenant
from tripgo.schemas.departure import DepartureCreate, DepartureUpdate
from tripgo.utils import get_logger, naive_utc

logger = get_logger("tripgo.departures")

DEFAULT_FILLING_FAST_THRESHOLD = 10


def next_departure_status(
    remaining_seats: int,
    current: DepartureStatus,
    threshold: int = DEFAULT_FILLING_FAST_THRESHOLD,
) -> DepartureStatus:
    """
    Status after seats were booked.

    0 seats left is SOLD_OUT, at or below the threshold is FILLING_FAST,
    otherwise the current status is kept.
    """
    if remaining_seats == 0:
        return DepartureStatus.SOLD_OUT
    if remaining_seats <= threshold:
        return DepartureStatus.FILLING_FAST
    return current


def _validate_dates(departure_date: datetime, return_date: datetime) -> None:
    if return_date <= departure_date:
        raise create_error("Return date must be after departure date", status.HTTP_400_BAD_REQUEST)


class DepartureService:
    """Shared departure behaviour; subclasses bind the models"""

    model = None
    voyage_model = None
    voyage_label = "Voyage"

    def __init__(self, db: Session, tenant: Tenant, filling_fast_threshold: int = DEFAULT_FILLING_FAST_THRESHOLD):
        self.db = db
        self.tenant = tenant
        self.filling_fast_threshold = filling_fast_threshold

    def base_query(self):
        # Departures are tenant-scoped through their voyage
        return (
            self.db.query(self.model)
            .join(self.voyage_model, self.model.voyage_id == self.voyage_model.id)
            .filter(self.voyage_model.tenant_id == self.tenant.id)
        )

    def get_voyage(self, voyage_id: int):
        voyage = (
            self.db.query(self.voyage_model)
            .filter(self.voyage_model.id == voyage_id, self.voyage_model.tenant_id == self.tenant.id)
            .first()
        )
        if not voyage:
            raise create_error(f"{self.voyage_label} not found", status.HTTP_404_NOT_FOUND)
        return voyage

    def list_for_voyage(
        self,
        voyage_id: int,
        upcoming: bool = True,
        status_filter: DepartureStatus | None = None,
    ) -> list:
        self.get_voyage(voyage_id)
        query = self.base_query().filter(self.model.voyage_id == voyage_id)
        if upcoming:
            query = query.filter(self.model.departure_date >= datetime.utcnow())
        if status_filter:
            query = query.filter(self.model.status == status_filter)
        return query.order_by(self.model.departure_date.asc()).all()

    def get(self, departure_id: int):
        departure = self.base_query().filter(self.model.id == departure_id).first()
        if not departure:
            raise create_error("Departure not found", status.HTTP_404_NOT_FOUND)
        return departure

    def _build(self, data: DepartureCreate, voyage):
        departure_date = naive_utc(data.departure_date)
        return_date = naive_utc(data.return_date)
        _validate_dates(departure_date, return_date)
        return self.model(
            voyage_id=voyage.id,
            departure_date=departure_date,
            return_date=return_date,
            available_seats=data.available_seats if data.available_seats is not None else voyage.capacity,
            price_modifier=data.price_modifier if data.price_modifier is not None else 1.0,
            status=data.status or DepartureStatus.AVAILABLE,
            notes=data.notes,
        )

    def create(self, data: DepartureCreate):
        voyage = self.get_voyage(data.voyage_id)
        departure = self._build(data, voyage)
        self.db.add(departure)
        self.db.commit()
        self.db.refresh(departure)
        return departure

    def create_bulk(self, items: list[DepartureCreate]) -> list:
        """
        Create many departures atomically.

        Every row is validated before anything is written, so a bad
        entry leaves the database untouched.
        """
        if not items:
            raise create_error("Departures array is required", status.HTTP_400_BAD_REQUEST)

        voyages = {}
        departures = []
        for item in items:
            if item.voyage_id not in voyages:
                voyages[item.voyage_id] = self.get_voyage(item.voyage_id)
            departures.append(self._build(item, voyages[item.voyage_id]))

        try:
            self.db.add_all(departures)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        for departure in departures:
            self.db.refresh(departure)
        logger.info(f"{len(departures)} departures created (tenant={self.tenant.slug})")
        return departures

    def update(self, departure_id: int, data: DepartureUpdate):
        departure = self.get(departure_id)
        updates = data.model_dump(exclude_unset=True)

        departure_date = naive_utc(updates.get("departure_date")) or departure.departure_date
        return_date = naive_utc(updates.get("return_date")) or departure.return_date
        if "departure_date" in updates or "return_date" in updates:
            _validate_dates(departure_date, return_date)
            updates["departure_date"] = departure_date
            updates["return_date"] = return_date

        for field, value in updates.items():
            if value is not None:
                setattr(departure, field, value)

        self.db.commit()
        self.db.refresh(departure)
        return departure

    def delete(self, departure_id: int) -> None:
        departure = self.get(departure_id)
        self.db.delete(departure)
        self.db.commit()

    def book_seats(self, departure_id: int, seats_to_book: int):
        """
        Take seats from a departure's inventory.

        Raises:
            AppError 400: Not enough seats remain
        """
        departure = self.get(departure_id)
        if departure.available_seats < seats_to_book:
            raise create_error("Not enough seats available", status.HTTP_400_BAD_REQUEST)

        departure.available_seats -= seats_to_book
        departure.status = next_departure_status(
            departure.available_seats, departure.status, self.filling_fast_threshold
        )
        self.db.commit()
        self.db.refresh(departure)

        if departure.status == DepartureStatus.SOLD_OUT:
            logger.info(f"Departure {departure.id} sold out")
        return departure


class CruiseDepartureService(DepartureService):
    model = CruiseDeparture
    voyage_model = Cruise
    voyage_label = "Cruise"


class ShipDepartureService(DepartureService):
    model = ShipDeparture
    voyage_model = Ship
    voyage_label = "Ship"
