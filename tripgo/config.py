### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - API Configuration -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Configuration Management

Uses Pydantic Settings for configuration with environment variable support.
Loads settings from .env file and data/config.yaml.

Config file location (in order of precedence):
1. TRIPGO_CONFIG_PATH environment variable
2. data/config.yaml (default)
"""

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from tripgo import __version__


def get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """
    Get the path to config.yaml.

    Priority:
    1. TRIPGO_CONFIG_PATH environment variable (if set)
    2. data/config.yaml (default location)
    """
    env_path = os.environ.get("TRIPGO_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    return get_project_root() / "data" / "config.yaml"


class APISettings(BaseSettings):
    """API Server Settings"""

    model_config = SettingsConfigDict(env_prefix="TRIPGO_", env_file=".env", extra="ignore")

    # API Configuration
    api_title: str = "TripGo Travel API"
    api_version: str = __version__
    api_prefix: str = "/api"
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 4000

    # Database Configuration
    database_url: str = f"sqlite:///{get_project_root() / 'data' / 'tripgo.db'}"

    # Security
    jwt_secret: str = "change-this-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60 * 24 * 7

    # Tenancy
    default_tenant_slug: str = "tripgo-main"
    base_domain: str = "tripgo.com"

    # Rate Limiting
    rate_limit_per_minute: int = 100
    auth_rate_limit_per_minute: int = 20

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = True

    # CORS
    cors_origins: list[str] = ["*"]

    # Timezone (loaded from config.yaml)
    timezone: str = "UTC"


DEFAULT_CONFIG = """# TripGo Configuration
# Main configuration file for tenancy, catalog and client behaviour

# Application Settings
application:
  # Timezone for logs and timestamps (IANA timezone name)
  timezone: "UTC"

  logging:
    level: "INFO"             # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_to_file: true         # Write logs/tripgo_YYYY-MM-DD.log
    log_to_console: true

# Multi-Tenancy
tenancy:
  # Tenant served when a request carries no tenant hint
  default_tenant_slug: "tripgo-main"
  # Create TripGo Main / Cruises / Hotels on first start
  seed_default_tenants: true
  # Host labels that never identify a tenant
  reserved_subdomains:
    - "localhost"
    - "api"
    - "www"

# Catalog Behaviour
catalog:
  upcoming_departures_preview: 5   # Departures embedded in voyage listings
  filling_fast_threshold: 10       # Seats left before FILLING_FAST
  booked_ratio: 0.3                # Share of capacity assumed booked for availability checks

# Rate Limiting (requests per minute, per client)
rate_limiting:
  default_per_minute: 100
  auth_per_minute: 20

# Storefront API Client
client:
  max_retries: 3              # Retries on HTTP 429
  base_delay: 1.0             # Seconds, doubled per attempt
  max_jitter: 1.0             # Seconds of random jitter added to each wait
  timeout: 30                 # Request timeout in seconds
"""


def load_yaml_config(config_path: str | None = None) -> dict:
    """Load configuration from YAML file, creating default if missing"""
    config_file = get_config_path() if config_path is None else Path(config_path)

    if not config_file.exists():
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)
        print(f"Created default configuration file: {config_file}")

    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings instance"""
    config = load_yaml_config()
    app_config = config.get("application") or {}
    logging_config = app_config.get("logging") or {}

    overrides = {"timezone": app_config.get("timezone", "UTC")}

    # Environment variables win over config.yaml
    yaml_values = {
        "default_tenant_slug": (config.get("tenancy") or {}).get("default_tenant_slug"),
        "rate_limit_per_minute": (config.get("rate_limiting") or {}).get("default_per_minute"),
        "auth_rate_limit_per_minute": (config.get("rate_limiting") or {}).get("auth_per_minute"),
        "log_level": logging_config.get("level"),
        "log_to_file": logging_config.get("log_to_file"),
    }
    for field, value in yaml_values.items():
        if value is not None and f"TRIPGO_{field.upper()}" not in os.environ:
            overrides[field] = value

    return APISettings(**overrides)
