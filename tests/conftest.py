"""
Shared pytest fixtures for TripGo API tests.

Provides:
- Isolated SQLite database per test
- FastAPI TestClient with dependency overrides
- Per-test config.yaml
- Tenant and user fixtures with bearer token headers
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

# Point the application at throwaway storage before it is imported
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="tripgo-tests-"))
os.environ.setdefault("TRIPGO_DATABASE_URL", f"sqlite:///{_TEST_ROOT / 'app.db'}")
os.environ.setdefault("TRIPGO_CONFIG_PATH", str(_TEST_ROOT / "config.yaml"))
os.environ.setdefault("TRIPGO_JWT_SECRET", "test-secret")
os.environ.setdefault("TRIPGO_LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from tripgo.config import get_api_settings
from tripgo.database import Base, get_db
from tripgo.main import app
from tripgo.middleware.rate_limit import limiter
from tripgo.models import Tenant, TenantPlan, User, UserRole
from tripgo.services.config_service import ConfigService, set_config_service

from tests.fixtures.factories import auth_headers_for, create_tenant, create_user


# ============================================
# Configuration Fixtures
# ============================================


@pytest.fixture(autouse=True)
def config_service(tmp_path):
    """
    Give every test its own config.yaml.

    The file is created from DEFAULT_CONFIG. Default tenant seeding is
    switched off so fixtures own the tenants table.
    """
    service = ConfigService(str(tmp_path / "config.yaml"))
    service.set("tenancy.seed_default_tenants", False)
    service.save()
    set_config_service(service)
    yield service
    set_config_service(None)
    get_api_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate limit counters are in memory and shared by the whole session"""
    limiter.reset()
    yield
    limiter.reset()


# ============================================
# Database Fixtures
# ============================================


@pytest.fixture(scope="function")
def test_engine(tmp_path):
    """
    Create an isolated SQLite database engine for each test.

    Uses a file-based database in tmp_path to avoid connection isolation
    issues with in-memory SQLite.
    """
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    # Import all models to ensure they're registered with Base.metadata
    import tripgo.models  # noqa: F401

    Base.metadata.create_all(bind=test_engine)
    yield sessionmaker(bind=test_engine, autoflush=False)
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def test_db(session_factory) -> Generator[Session, None, None]:
    """Session isolated to this test"""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(test_db: Session, session_factory, monkeypatch) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient with database dependency overridden.

    Access logs and the health check open their own sessions, so those
    are pointed at the test database too.
    """

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    monkeypatch.setattr("tripgo.middleware.logging.SessionLocal", session_factory)
    monkeypatch.setattr("tripgo.main.SessionLocal", session_factory)
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================
# Tenant and User Fixtures
# ============================================


@pytest.fixture
def test_tenant(test_db: Session) -> Tenant:
    """The default tenant, served when a request carries no tenant hint"""
    return create_tenant(
        db=test_db,
        name="TripGo Main",
        slug="tripgo-main",
        domain="tripgo.com",
        subdomain="main",
        plan=TenantPlan.ENTERPRISE,
        settings={"allow_registration": True},
    )


@pytest.fixture
def other_tenant(test_db: Session) -> Tenant:
    return create_tenant(
        db=test_db,
        name="TripGo Cruises",
        slug="tripgo-cruises",
        domain="cruises.tripgo.com",
        subdomain="cruises",
        plan=TenantPlan.PREMIUM,
    )


@pytest.fixture
def admin_user(test_db: Session, test_tenant: Tenant) -> User:
    return create_user(
        db=test_db,
        tenant=test_tenant,
        email="admin@example.com",
        role=UserRole.ADMIN,
        first_name="Ada",
        last_name="Admin",
    )


@pytest.fixture
def customer_user(test_db: Session, test_tenant: Tenant) -> User:
    return create_user(
        db=test_db,
        tenant=test_tenant,
        email="customer@example.com",
        role=UserRole.CUSTOMER,
        first_name="Casey",
        last_name="Customer",
    )


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    """
    HTTP headers with an admin bearer token.

    Usage:
        def test_endpoint(client, admin_headers):
            response = client.post("/api/hotels", json={...}, headers=admin_headers)
    """
    return auth_headers_for(admin_user)


@pytest.fixture
def customer_headers(customer_user: User) -> dict[str, str]:
    return auth_headers_for(customer_user)


# ============================================
# Convenience Fixtures
# ============================================


@pytest.fixture
def sample_cruise():
    """Return sample cruise data for tests."""
    from tests.fixtures.data import SAMPLE_CRUISE

    return dict(SAMPLE_CRUISE)


@pytest.fixture
def sample_hotel():
    from tests.fixtures.data import SAMPLE_HOTEL

    return dict(SAMPLE_HOTEL)


@pytest.fixture
def sample_package():
    from tests.fixtures.data import SAMPLE_PACKAGE

    return dict(SAMPLE_PACKAGE)
