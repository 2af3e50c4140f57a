"""Initial schema - tenants, users, catalog, departures, bookings, hero, access logs

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

This migration creates the initial database schema for TripGo.
It captures the model structure as of v1.0.0.

Tables:
- tenants, users: Storefront partitions and their accounts
- cruise_categories, ship_categories: Voyage groupings
- cruises, ships, hotels, packages: Catalog
- cruise_departures, ship_departures: Scheduled sailings
- reviews, bookings: Customer activity
- hero_settings: Per-page banner content
- access_logs: Request/response audit trail
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


TENANT_PLAN = sa.Enum("BASIC", "STANDARD", "PREMIUM", "ENTERPRISE", name="tenantplan")
TENANT_STATUS = sa.Enum("ACTIVE", "INACTIVE", "SUSPENDED", name="tenantstatus")
USER_ROLE = sa.Enum("ADMIN", "CUSTOMER", "EMPLOYEE", "HR_MANAGER", name="userrole")
DEPARTURE_STATUS = sa.Enum("AVAILABLE", "FILLING_FAST", "SOLD_OUT", "CANCELLED", name="departurestatus")
BOOKING_TYPE = sa.Enum("CRUISE", "SHIP", "HOTEL", "PACKAGE", name="bookingtype")
BOOKING_STATUS = sa.Enum("PENDING", "CONFIRMED", "CANCELLED", "COMPLETED", name="bookingstatus")
PAYMENT_STATUS = sa.Enum("PENDING", "PAID", "FAILED", "REFUNDED", name="paymentstatus")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    ]


def _category_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=100), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, default=0),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "slug", name=f"uq_{name}_tenant_slug"),
    )
    op.create_index(f"ix_{name}_tenant_id", name, ["tenant_id"])


def _voyage_table(name: str, category_table: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("departure", sa.String(length=200), nullable=True),
        sa.Column("departure_port", sa.String(length=200), nullable=True),
        sa.Column("destination", sa.String(length=200), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, default=1),
        sa.Column("capacity", sa.Integer(), nullable=False, default=0),
        sa.Column("price", sa.Float(), nullable=False, default=0.0),
        sa.Column("type", sa.String(length=100), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False, default=0.0),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("itinerary", sa.JSON(), nullable=False),
        sa.Column("route_geo", sa.JSON(), nullable=True),
        sa.Column("route_names", sa.JSON(), nullable=True),
        sa.Column("highlights", sa.JSON(), nullable=True),
        sa.Column("videos", sa.JSON(), nullable=True),
        sa.Column("available", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["category_id"], [f"{category_table}.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"ix_{name}_tenant_id", name, ["tenant_id"])
    op.create_index(f"ix_{name}_slug", name, ["slug"])


def _departure_table(name: str, voyage_column: str, voyage_table: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(voyage_column, sa.Integer(), nullable=False),
        sa.Column("departure_date", sa.DateTime(), nullable=False),
        sa.Column("return_date", sa.DateTime(), nullable=False),
        sa.Column("available_seats", sa.Integer(), nullable=False, default=0),
        sa.Column("price_modifier", sa.Float(), nullable=False, default=1.0),
        sa.Column("status", DEPARTURE_STATUS, nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint([voyage_column], [f"{voyage_table}.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"ix_{name}_{voyage_column}", name, [voyage_column])
    op.create_index(f"ix_{name}_departure_date", name, ["departure_date"])


def upgrade() -> None:
    """Create initial database schema."""

    op.create_table(
        "tenants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("domain", sa.String(length=255), nullable=False),
        sa.Column("subdomain", sa.String(length=100), nullable=False),
        sa.Column("plan", TENANT_PLAN, nullable=False),
        sa.Column("status", TENANT_STATUS, nullable=False),
        sa.Column("settings", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
        sa.UniqueConstraint("domain"),
        sa.UniqueConstraint("subdomain"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        sa.Column("role", USER_ROLE, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.Column("last_login_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),
    )
    op.create_index("ix_users_tenant_id", "users", ["tenant_id"])

    _category_table("cruise_categories")
    _category_table("ship_categories")
    _voyage_table("cruises", "cruise_categories")
    _voyage_table("ships", "ship_categories")
    _departure_table("cruise_departures", "cruise_id", "cruises")
    _departure_table("ship_departures", "ship_id", "ships")

    op.create_table(
        "hotels",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("price_per_night", sa.Float(), nullable=False, default=0.0),
        sa.Column("rating", sa.Float(), nullable=False, default=0.0),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("rooms", sa.JSON(), nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_hotels_tenant_id", "hotels", ["tenant_id"])
    op.create_index("ix_hotels_slug", "hotels", ["slug"])

    op.create_table(
        "packages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=200), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("destination", sa.String(length=200), nullable=True),
        sa.Column("destinations", sa.JSON(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, default=1),
        sa.Column("price", sa.Float(), nullable=False, default=0.0),
        sa.Column("rating", sa.Float(), nullable=False, default=0.0),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("inclusions", sa.JSON(), nullable=False),
        sa.Column("exclusions", sa.JSON(), nullable=False),
        sa.Column("itinerary", sa.JSON(), nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False, default=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_packages_tenant_id", "packages", ["tenant_id"])
    op.create_index("ix_packages_slug", "packages", ["slug"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("cruise_id", sa.Integer(), nullable=True),
        sa.Column("ship_id", sa.Integer(), nullable=True),
        sa.Column("hotel_id", sa.Integer(), nullable=True),
        sa.Column("package_id", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["cruise_id"], ["cruises.id"]),
        sa.ForeignKeyConstraint(["ship_id"], ["ships.id"]),
        sa.ForeignKeyConstraint(["hotel_id"], ["hotels.id"]),
        sa.ForeignKeyConstraint(["package_id"], ["packages.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    for column in ("user_id", "cruise_id", "ship_id", "hotel_id", "package_id"):
        op.create_index(f"ix_reviews_{column}", "reviews", [column])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("booking_type", BOOKING_TYPE, nullable=False),
        sa.Column("cruise_id", sa.Integer(), nullable=True),
        sa.Column("ship_id", sa.Integer(), nullable=True),
        sa.Column("hotel_id", sa.Integer(), nullable=True),
        sa.Column("package_id", sa.Integer(), nullable=True),
        sa.Column("guests", sa.Integer(), nullable=False, default=1),
        sa.Column("check_in", sa.DateTime(), nullable=True),
        sa.Column("check_out", sa.DateTime(), nullable=True),
        sa.Column("special_requests", sa.Text(), nullable=True),
        sa.Column("total_amount", sa.Float(), nullable=False, default=0.0),
        sa.Column("status", BOOKING_STATUS, nullable=False),
        sa.Column("payment_status", PAYMENT_STATUS, nullable=False),
        sa.Column("payment_reference", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["cruise_id"], ["cruises.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["ship_id"], ["ships.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["hotel_id"], ["hotels.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["package_id"], ["packages.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bookings_tenant_id", "bookings", ["tenant_id"])
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])
    op.create_index("ix_bookings_status", "bookings", ["status"])
    op.create_index("ix_bookings_created_at", "bookings", ["created_at"])

    op.create_table(
        "hero_settings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("page", sa.String(length=100), nullable=False),
        sa.Column("video_url", sa.String(length=500), nullable=True),
        sa.Column("video_type", sa.String(length=50), nullable=True),
        sa.Column("video_file", sa.String(length=500), nullable=True),
        sa.Column("video_poster", sa.String(length=500), nullable=True),
        sa.Column("video_loop", sa.Boolean(), nullable=False, default=True),
        sa.Column("video_autoplay", sa.Boolean(), nullable=False, default=True),
        sa.Column("video_muted", sa.Boolean(), nullable=False, default=True),
        sa.Column("fallback_image", sa.String(length=500), nullable=True),
        sa.Column("overlay_opacity", sa.Float(), nullable=False, default=0.4),
        sa.Column("overlay_color", sa.String(length=20), nullable=False, default="#000000"),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("subtitle", sa.Text(), nullable=True),
        sa.Column("cta_text", sa.String(length=100), nullable=True),
        sa.Column("cta_link", sa.String(length=500), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        sa.Column("display_order", sa.Integer(), nullable=False, default=0),
        *_timestamps(),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "page", name="uq_hero_settings_tenant_page"),
    )
    op.create_index("ix_hero_settings_tenant_id", "hero_settings", ["tenant_id"])

    # No foreign keys: logs outlive tenants and users
    op.create_table(
        "access_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("request_id", sa.String(length=36), nullable=False),
        sa.Column("tenant_id", sa.Integer(), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("method", sa.String(length=10), nullable=False),
        sa.Column("path", sa.String(length=500), nullable=False),
        sa.Column("query_string", sa.String(length=1000), nullable=True),
        sa.Column("client_ip", sa.String(length=45), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column("status_code", sa.Integer(), nullable=False),
        sa.Column("response_time_ms", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_access_logs_created_at", "access_logs", ["created_at"])
    op.create_index("ix_access_logs_tenant_created", "access_logs", ["tenant_id", "created_at"])
    op.create_index("ix_access_logs_path_created", "access_logs", ["path", "created_at"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("access_logs")
    op.drop_table("hero_settings")
    op.drop_table("bookings")
    op.drop_table("reviews")
    op.drop_table("packages")
    op.drop_table("hotels")
    op.drop_table("ship_departures")
    op.drop_table("cruise_departures")
    op.drop_table("ships")
    op.drop_table("cruises")
    op.drop_table("ship_categories")
    op.drop_table("cruise_categories")
    op.drop_table("users")
    op.drop_table("tenants")
