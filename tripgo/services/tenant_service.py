### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Tenant Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Tenant Service

Tenant administration: CRUD with uniqueness checks, public domain lookup,
statistics, suspension lifecycle, plan limits and default tenant seeding.
"""

from datetime import datetime

from fastapi import status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from tripgo.errors import AppError, create_error
from tripgo.middleware.tenant import TenantResolver
from tripgo.models import (
    Booking,
    Cruise,
    Hotel,
    PaymentStatus,
    Ship,
    Tenant,
    TenantPlan,
    TenantStatus,
    TravelPackage,
    User,
)
from tripgo.schemas.responses import PaginationMeta
from tripgo.schemas.tenant import (
    BookingStatusStat,
    RevenueStat,
    TenantCounts,
    TenantCreate,
    TenantStats,
    TenantUpdate,
)
from tripgo.utils import get_logger, paginate

logger = get_logger("tripgo.tenants")

DUPLICATE_MESSAGE = "Slug, domain, or subdomain already exists"

DEFAULT_TENANTS = [
    {
        "name": "TripGo Main",
        "slug": "tripgo-main",
        "domain": "tripgo.com",
        "subdomain": "main",
        "plan": TenantPlan.ENTERPRISE,
        "settings": {"theme": "default", "allow_registration": True, "default_currency": "USD"},
    },
    {
        "name": "TripGo Cruises",
        "slug": "tripgo-cruises",
        "domain": "cruises.tripgo.com",
        "subdomain": "cruises",
        "plan": TenantPlan.PREMIUM,
        "settings": {
            "theme": "cruise",
            "allow_registration": True,
            "default_currency": "USD",
            "focus_area": "cruises",
        },
    },
    {
        "name": "TripGo Hotels",
        "slug": "tripgo-hotels",
        "domain": "hotels.tripgo.com",
        "subdomain": "hotels",
        "plan": TenantPlan.PREMIUM,
        "settings": {
            "theme": "hotel",
            "allow_registration": True,
            "default_currency": "USD",
            "focus_area": "hotels",
        },
    },
]

# Per-plan quotas; None means unlimited. Bookings are counted per calendar month.
PLAN_LIMITS: dict[TenantPlan, dict[str, int | None]] = {
    TenantPlan.BASIC: {"users": 10, "bookings": 50},
    TenantPlan.STANDARD: {"users": 100, "bookings": 500},
    TenantPlan.PREMIUM: {"users": 1000, "bookings": 5000},
    TenantPlan.ENTERPRISE: {"users": None, "bookings": None},
}


class TenantService:
    """Tenant administration backed by a database session"""

    def __init__(self, db: Session):
        self.db = db

    # ----------------------------------------
    # Queries
    # ----------------------------------------

    def list_tenants(
        self,
        page: int = 1,
        limit: int = 20,
        status_filter: TenantStatus | None = None,
        plan: TenantPlan | None = None,
        search: str | None = None,
    ) -> tuple[list[Tenant], PaginationMeta]:
        query = self.db.query(Tenant)
        if status_filter:
            query = query.filter(Tenant.status == status_filter)
        if plan:
            query = query.filter(Tenant.plan == plan)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(Tenant.name).like(pattern),
                    func.lower(Tenant.slug).like(pattern),
                    func.lower(Tenant.domain).like(pattern),
                    func.lower(Tenant.subdomain).like(pattern),
                )
            )
        query = query.order_by(Tenant.created_at.desc(), Tenant.id.desc())
        return paginate(query, page, limit)

    def get_tenant(self, tenant_id: int) -> Tenant:
        tenant = self.db.query(Tenant).filter(Tenant.id == tenant_id).first()
        if not tenant:
            raise create_error("Tenant not found", status.HTTP_404_NOT_FOUND)
        return tenant

    def get_by_domain(self, domain: str) -> Tenant:
        """
        Public lookup of an ACTIVE tenant by domain or subdomain.

        No fallback chain: an unknown or suspended tenant is a 404.
        """
        normalized = TenantResolver.normalize_host(domain)
        tenant = (
            self.db.query(Tenant)
            .filter(
                or_(Tenant.domain == normalized, Tenant.subdomain == normalized),
                Tenant.status == TenantStatus.ACTIVE,
            )
            .first()
        )
        if not tenant:
            raise create_error("Tenant not found", status.HTTP_404_NOT_FOUND)
        return tenant

    def get_counts(self, tenant_id: int) -> TenantCounts:
        def count(model) -> int:
            return self.db.query(func.count(model.id)).filter(model.tenant_id == tenant_id).scalar() or 0

        return TenantCounts(
            users=count(User),
            cruises=count(Cruise),
            hotels=count(Hotel),
            packages=count(TravelPackage),
            bookings=count(Booking),
        )

    def get_stats(self, tenant_id: int) -> TenantStats:
        """Aggregate statistics; each figure is an independent query"""
        self.get_tenant(tenant_id)

        users_by_role = {
            (role.value if hasattr(role, "value") else str(role)): count
            for role, count in (
                self.db.query(User.role, func.count(User.id))
                .filter(User.tenant_id == tenant_id)
                .group_by(User.role)
                .all()
            )
        }

        bookings_by_status = [
            BookingStatusStat(
                status=booking_status.value if hasattr(booking_status, "value") else str(booking_status),
                count=count,
                total_amount=float(total or 0),
            )
            for booking_status, count, total in (
                self.db.query(Booking.status, func.count(Booking.id), func.sum(Booking.total_amount))
                .filter(Booking.tenant_id == tenant_id)
                .group_by(Booking.status)
                .all()
            )
        ]

        revenue_total, revenue_count = (
            self.db.query(func.sum(Booking.total_amount), func.count(Booking.id))
            .filter(Booking.tenant_id == tenant_id, Booking.payment_status == PaymentStatus.PAID)
            .one()
        )

        content = {}
        for key, model in (("cruises", Cruise), ("ships", Ship), ("hotels", Hotel), ("packages", TravelPackage)):
            content[key] = (
                self.db.query(func.count(model.id)).filter(model.tenant_id == tenant_id).scalar() or 0
            )

        return TenantStats(
            tenant_id=tenant_id,
            users_by_role=users_by_role,
            bookings_by_status=bookings_by_status,
            revenue=RevenueStat(total=float(revenue_total or 0), count=revenue_count or 0),
            content=content,
        )

    # ----------------------------------------
    # Mutations
    # ----------------------------------------

    def _identity_taken(self, slug=None, domain=None, subdomain=None, exclude_id: int | None = None) -> bool:
        clauses = []
        if slug:
            clauses.append(Tenant.slug == slug)
        if domain:
            clauses.append(Tenant.domain == domain)
        if subdomain:
            clauses.append(Tenant.subdomain == subdomain)
        if not clauses:
            return False

        query = self.db.query(Tenant.id).filter(or_(*clauses))
        if exclude_id is not None:
            query = query.filter(Tenant.id != exclude_id)
        return query.first() is not None

    def create_tenant(self, data: TenantCreate) -> Tenant:
        slug = data.slug.strip().lower()
        domain = TenantResolver.normalize_host(data.domain)
        subdomain = data.subdomain.strip().lower()

        if self._identity_taken(slug, domain, subdomain):
            raise create_error(DUPLICATE_MESSAGE, status.HTTP_400_BAD_REQUEST)

        tenant = Tenant(
            name=data.name,
            slug=slug,
            domain=domain,
            subdomain=subdomain,
            plan=data.plan,
            status=TenantStatus.ACTIVE,
            settings=data.settings or {},
        )
        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        logger.info(f"Tenant created: {tenant.slug} ({tenant.domain})")
        return tenant

    def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        tenant = self.get_tenant(tenant_id)
        updates = data.model_dump(exclude_unset=True)

        if "slug" in updates and updates["slug"]:
            updates["slug"] = updates["slug"].strip().lower()
        if "domain" in updates and updates["domain"]:
            updates["domain"] = TenantResolver.normalize_host(updates["domain"])
        if "subdomain" in updates and updates["subdomain"]:
            updates["subdomain"] = updates["subdomain"].strip().lower()

        if self._identity_taken(
            updates.get("slug"), updates.get("domain"), updates.get("subdomain"), exclude_id=tenant.id
        ):
            raise create_error(DUPLICATE_MESSAGE, status.HTTP_400_BAD_REQUEST)

        for field, value in updates.items():
            if value is None and field != "settings":
                continue
            setattr(tenant, field, value if value is not None else {})

        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def delete_tenant(self, tenant_id: int) -> None:
        tenant = self.get_tenant(tenant_id)
        counts = self.get_counts(tenant.id)
        if counts.users > 0 or counts.bookings > 0:
            raise create_error(
                "Cannot delete tenant with existing users or bookings", status.HTTP_400_BAD_REQUEST
            )

        self.db.delete(tenant)
        self.db.commit()
        logger.info(f"Tenant deleted: {tenant.slug}")

    def suspend_tenant(self, tenant_id: int, reason: str | None = None) -> Tenant:
        tenant = self.get_tenant(tenant_id)
        settings = dict(tenant.settings or {})
        settings["suspension_reason"] = reason
        settings["suspended_at"] = datetime.utcnow().isoformat()

        tenant.status = TenantStatus.SUSPENDED
        tenant.settings = settings
        self.db.commit()
        self.db.refresh(tenant)
        logger.warning(f"Tenant suspended: {tenant.slug} (reason: {reason or 'none given'})")
        return tenant

    def activate_tenant(self, tenant_id: int) -> Tenant:
        tenant = self.get_tenant(tenant_id)
        settings = dict(tenant.settings or {})
        settings["suspension_reason"] = None
        settings["suspended_at"] = None
        settings["reactivated_at"] = datetime.utcnow().isoformat()

        tenant.status = TenantStatus.ACTIVE
        tenant.settings = settings
        self.db.commit()
        self.db.refresh(tenant)
        logger.info(f"Tenant activated: {tenant.slug}")
        return tenant

    def initialize_defaults(self) -> tuple[list[str], list[str]]:
        """
        Seed the default tenants, skipping any whose slug, domain or
        subdomain is already in use.

        Returns:
            Tuple of (created slugs, skipped slugs)
        """
        created, skipped = [], []
        for definition in DEFAULT_TENANTS:
            if self._identity_taken(definition["slug"], definition["domain"], definition["subdomain"]):
                skipped.append(definition["slug"])
                continue
            self.db.add(
                Tenant(
                    name=definition["name"],
                    slug=definition["slug"],
                    domain=definition["domain"],
                    subdomain=definition["subdomain"],
                    plan=definition["plan"],
                    status=TenantStatus.ACTIVE,
                    settings=dict(definition["settings"]),
                )
            )
            created.append(definition["slug"])

        self.db.commit()
        if created:
            logger.info(f"Default tenants seeded: {', '.join(created)}")
        return created, skipped

    # ----------------------------------------
    # Plan limits
    # ----------------------------------------

    def check_limit(self, tenant: Tenant, resource: str) -> None:
        """
        Refuse the operation when the tenant's plan quota is used up.

        Raises:
            AppError 403: Quota reached
        """
        limits = PLAN_LIMITS.get(tenant.plan, PLAN_LIMITS[TenantPlan.STANDARD])
        if resource not in limits:
            raise ValueError(f"Unknown plan resource: {resource}")

        limit = limits[resource]
        if limit is None:
            return

        if resource == "users":
            usage = self.db.query(func.count(User.id)).filter(User.tenant_id == tenant.id).scalar()
        else:
            start_of_month = datetime.utcnow().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
            usage = (
                self.db.query(func.count(Booking.id))
                .filter(Booking.tenant_id == tenant.id, Booking.created_at >= start_of_month)
                .scalar()
            )

        if (usage or 0) >= limit:
            plan = tenant.plan.value if hasattr(tenant.plan, "value") else tenant.plan
            raise AppError(
                f"Tenant has reached the {resource} limit for {plan} plan", status.HTTP_403_FORBIDDEN
            )


def seed_default_tenants(db: Session) -> list[str]:
    """Startup hook: seed defaults and return the created slugs"""
    created, _ = TenantService(db).initialize_defaults()
    return created
