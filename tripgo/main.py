# TripGo - API Server
# Copyright (c) 2026 TripGo Team. All Rights Reserved.
# See LICENSE file for details.

"""
TripGo Travel API - Main Application

FastAPI application entry point that provides:
- REST API endpoints for tenants, catalog, departures and bookings
- Per-request tenant resolution (headers, host, query, default)
- JWT authentication with tenant-scoped roles
- Request logging and rate limiting
- OpenAPI documentation at /api/docs

Usage:
    # Development
    uvicorn tripgo.main:app --reload --port 4000

    # Production
    uvicorn tripgo.main:app --host 0.0.0.0 --port 4000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import func, text
from starlette.exceptions import HTTPException as StarletteHTTPException

from tripgo.config import get_api_settings, get_project_root, load_yaml_config
from tripgo.database import SessionLocal, engine, init_db
from tripgo.dependencies import get_tenancy_config
from tripgo.errors import AppError
from tripgo.middleware import RequestLoggingMiddleware
from tripgo.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from tripgo.models import Tenant
from tripgo.routers import (
    admin_router,
    auth_router,
    bookings_router,
    cruise_categories_router,
    cruise_departures_router,
    cruises_router,
    hero_router,
    hotels_router,
    packages_router,
    ship_categories_router,
    ship_departures_router,
    ships_router,
    tenants_router,
    users_router,
)
from tripgo.schemas.responses import ErrorDetail, ErrorResponse, HealthResponse
from tripgo.services.tenant_service import seed_default_tenants
from tripgo.utils import setup_logger

# Load settings
settings = get_api_settings()

logger = setup_logger("tripgo.main", log_to_file=settings.log_to_file)


def _seed_default_tenants():
    """Create the default tenants on first start (tenancy.seed_default_tenants)"""
    if not get_tenancy_config().seed_default_tenants:
        return

    db = SessionLocal()
    try:
        created = seed_default_tenants(db)
        if created:
            print(f"Seeded default tenants: {', '.join(created)}")
    finally:
        db.close()


def _check_pending_migrations():
    """
    Check for pending Alembic migrations on startup.

    Logs a warning if the database schema is not up to date.
    Does not block startup - just warns the administrator.
    """
    try:
        from alembic.config import Config
        from alembic.runtime.migration import MigrationContext
        from alembic.script import ScriptDirectory

        alembic_cfg = Config(str(get_project_root() / "alembic.ini"))
        script = ScriptDirectory.from_config(alembic_cfg)

        with engine.connect() as conn:
            context = MigrationContext.configure(conn)
            current_rev = context.get_current_revision()

        head_rev = script.get_current_head()

        if current_rev is None:
            print("\n" + "=" * 70)
            print("  DATABASE NOT STAMPED")
            print("=" * 70)
            print("\n  Tables were created from the models. To manage the schema")
            print("  with Alembic from now on, stamp the database:")
            print("\n    alembic stamp head")
            print("=" * 70 + "\n")
        elif current_rev != head_rev:
            print("\n" + "=" * 70)
            print("  PENDING DATABASE MIGRATIONS")
            print("=" * 70)
            print(f"\n  Current version: {current_rev}")
            print(f"  Latest version:  {head_rev}")
            print("\n  Run migrations with:")
            print("\n    alembic upgrade head")
            print("=" * 70 + "\n")
        else:
            print(f"Database schema is up to date (revision: {current_rev})")

    except Exception as e:
        # Don't fail startup on migration check errors
        logger.warning(f"Could not check migrations: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Handles startup and shutdown events:
    - Startup: Load config, create tables, seed default tenants
    - Shutdown: Dispose database connections
    """
    print(f"Starting {settings.api_title} v{settings.api_version}")
    print(f"API documentation available at: http://localhost:{settings.port}{settings.api_prefix}/docs")

    app.state.yaml_config = load_yaml_config()

    init_db()
    app.state.app_db_connected = True

    _check_pending_migrations()
    _seed_default_tenants()

    yield

    print("Shutting down TripGo API...")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
## TripGo Travel API

Multi-tenant REST API for the TripGo storefronts.

### Features
- **Tenants**: Storefront partitions resolved per request
- **Catalog**: Cruises, ships, hotels and travel packages with reviews
- **Departures**: Scheduled sailings with seat inventory
- **Bookings**: Reservations with pricing and payment confirmation
- **Hero content**: Per-page banners

### Tenant selection
Send `X-Tenant-ID` or `X-Tenant-Domain`, use the storefront host, or pass
`?tenant=<slug>`. Without a hint the default tenant is used.

### Authentication
Protected endpoints take a JWT from `/api/auth/login`:

```
Authorization: Bearer <token>
```
    """,
    lifespan=lifespan,
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "Retry-After"],
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)


# ========================================
# Exception Handlers
# ========================================

def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Domain errors raised by services and dependencies"""
    if exc.status_code >= 500:
        logger.error(f"[{_request_id(request)}] {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, request_id=_request_id(request)).model_dump(),
        headers=exc.headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail), request_id=_request_id(request)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 with one detail per invalid field"""
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")),
            message=error.get("msg", "Invalid value"),
            code=error.get("type"),
        )
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="Validation failed",
            details=details,
            request_id=_request_id(request),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions"""
    logger.exception(f"[{_request_id(request)}] Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal Server Error",
            details=[ErrorDetail(message=str(exc))] if settings.debug else None,
            request_id=_request_id(request),
        ).model_dump(),
    )


# ========================================
# System Endpoints
# ========================================

@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check",
    description="Check API health and database connectivity",
)
async def health_check() -> HealthResponse:
    app_db_connected = False
    tenants = None
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            tenants = db.query(func.count(Tenant.id)).scalar()
            app_db_connected = True
        finally:
            db.close()
    except Exception as e:
        logger.error(f"Health check database error: {e}")

    return HealthResponse(
        status="healthy" if app_db_connected else "degraded",
        version=settings.api_version,
        app_db_connected=app_db_connected,
        tenants=tenants,
    )


@app.get("/", tags=["System"], summary="API Info")
async def root():
    """API root - returns basic API information"""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "docs": f"{settings.api_prefix}/docs",
        "health": "/health",
    }


# Include routers
app.include_router(tenants_router, prefix=f"{settings.api_prefix}/tenants", tags=["Tenants"])
app.include_router(auth_router, prefix=f"{settings.api_prefix}/auth", tags=["Auth"])
app.include_router(cruises_router, prefix=f"{settings.api_prefix}/cruises", tags=["Cruises"])
app.include_router(ships_router, prefix=f"{settings.api_prefix}/ships", tags=["Ships"])
app.include_router(hotels_router, prefix=f"{settings.api_prefix}/hotels", tags=["Hotels"])
app.include_router(packages_router, prefix=f"{settings.api_prefix}/packages", tags=["Packages"])
app.include_router(
    cruise_categories_router,
    prefix=f"{settings.api_prefix}/cruise-categories",
    tags=["Cruise Categories"],
)
app.include_router(
    ship_categories_router,
    prefix=f"{settings.api_prefix}/ship-categories",
    tags=["Ship Categories"],
)
app.include_router(
    cruise_departures_router,
    prefix=f"{settings.api_prefix}/cruise-departures",
    tags=["Cruise Departures"],
)
app.include_router(
    ship_departures_router,
    prefix=f"{settings.api_prefix}/ship-departures",
    tags=["Ship Departures"],
)
app.include_router(bookings_router, prefix=f"{settings.api_prefix}/bookings", tags=["Bookings"])
app.include_router(users_router, prefix=f"{settings.api_prefix}/users", tags=["Users"])
app.include_router(hero_router, prefix=f"{settings.api_prefix}/hero", tags=["Hero Content"])
app.include_router(admin_router, prefix=f"{settings.api_prefix}/admin", tags=["Admin"])


# Entry point for running directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tripgo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
