### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - App Database Setup -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
App Database Setup

Relational store for:
- Tenants and users
- Catalog (cruises, ships, hotels, packages, categories, departures)
- Bookings and reviews
- Hero content and access logs

Uses synchronous SQLAlchemy. SQLite by default, any SQLAlchemy URL via
TRIPGO_DATABASE_URL.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from tripgo.config import get_api_settings

DATABASE_URL = get_api_settings().database_url

if DATABASE_URL.startswith("sqlite:///"):
    # Ensure the directory for a file-based SQLite database exists
    Path(DATABASE_URL.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    _connect_args = {"check_same_thread": False}  # Allow multi-threaded access
else:
    _connect_args = {}

engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args,
    echo=False,  # Set True for SQL debugging
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency that provides a database session.

    Usage:
        @router.get("/endpoint")
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize the database - create all tables.

    Call this on application startup.
    """
    # Import models to register them with Base
    import tripgo.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_db():
    """Drop all tables (use with caution!)"""
    Base.metadata.drop_all(bind=engine)
