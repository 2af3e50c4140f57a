"""
Config Schema Validation

Pydantic models for validating config.yaml structure.
Provides clear error messages when configuration is invalid.
"""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_to_file: bool = Field(default=True, description="Enable file logging")
    log_to_console: bool = Field(default=True, description="Enable console logging")


class ApplicationConfig(BaseModel):
    """Application settings"""

    timezone: str = Field(
        default="UTC",
        description="IANA timezone name (e.g., America/New_York)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone"""
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f"Invalid timezone '{v}'. Use IANA format like 'America/New_York' or 'UTC'"
            )
        return v


class TenancyConfig(BaseModel):
    """Tenant resolution settings"""

    default_tenant_slug: str = Field(
        default="tripgo-main",
        min_length=1,
        description="Tenant served when the request carries no tenant hint",
    )
    seed_default_tenants: bool = Field(default=True, description="Seed default tenants on startup")
    reserved_subdomains: List[str] = Field(
        default_factory=lambda: ["localhost", "api", "www"],
        description="Host labels that never identify a tenant",
    )


class CatalogConfig(BaseModel):
    """Catalog behaviour"""

    upcoming_departures_preview: int = Field(default=5, ge=0, le=50)
    filling_fast_threshold: int = Field(default=10, ge=0)
    booked_ratio: float = Field(default=0.3, ge=0.0, le=1.0)


class RateLimitingConfig(BaseModel):
    """Per-client request limits"""

    default_per_minute: int = Field(default=100, ge=1, le=10000)
    auth_per_minute: int = Field(default=20, ge=1, le=10000)


class ClientConfig(BaseModel):
    """Storefront API client settings"""

    max_retries: int = Field(default=3, ge=0, le=10, description="Retries on HTTP 429")
    base_delay: float = Field(default=1.0, ge=0.0, le=60.0, description="Backoff base in seconds")
    max_jitter: float = Field(default=1.0, ge=0.0, le=60.0, description="Random jitter in seconds")
    timeout: int = Field(default=30, ge=1, le=300, description="Request timeout in seconds")


class AppConfig(BaseModel):
    """
    Root configuration model for config.yaml

    Validates the entire configuration structure on load.
    """

    application: ApplicationConfig = Field(default_factory=ApplicationConfig)
    tenancy: TenancyConfig = Field(default_factory=TenancyConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    rate_limiting: RateLimitingConfig = Field(default_factory=RateLimitingConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)

    model_config = {"populate_by_name": True}


def validate_config(config_dict: dict) -> AppConfig:
    """
    Validate a configuration dictionary.

    Args:
        config_dict: Raw config loaded from YAML

    Returns:
        Validated AppConfig instance

    Raises:
        pydantic.ValidationError: If the config is invalid
    """
    return AppConfig.model_validate(config_dict)


def get_validation_errors(config_dict: dict) -> List[str]:
    """
    Get a list of human-readable validation errors.

    Returns an empty list when the config is valid.
    """
    from pydantic import ValidationError

    try:
        validate_config(config_dict)
        return []
    except ValidationError as e:
        return [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
