### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Configuration Service -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

"""
Configuration Service

Provides read/write access to config.yaml while preserving comments and formatting.
Uses ruamel.yaml for comment-preserving YAML operations.
Includes Pydantic validation for config structure.

Config file location is determined by tripgo.config.get_config_path().
"""

import builtins
import warnings
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from tripgo.config import DEFAULT_CONFIG, get_config_path
from tripgo.config_schema import get_validation_errors, validate_config
from tripgo.utils import setup_logger

logger = setup_logger("tripgo.config", log_to_file=False)


class ConfigService:
    """
    Service for managing config.yaml with comment preservation.

    Uses ruamel.yaml to load and save YAML while keeping all comments,
    formatting, and structure intact.
    """

    # Sections exposed through the admin config endpoints
    EDITABLE_SECTIONS = ("application", "tenancy", "catalog", "rate_limiting", "client")

    def __init__(self, config_path: str | None = None):
        if config_path is None:
            self.config_path = get_config_path()
        else:
            self.config_path = Path(config_path)
        self.yaml = YAML()
        self.yaml.preserve_quotes = True
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self._config: CommentedMap | None = None

        self._ensure_config_exists()

    def _ensure_config_exists(self) -> None:
        """Create default config file if it doesn't exist"""
        if not self.config_path.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(DEFAULT_CONFIG)
            logger.info(f"Created default configuration file: {self.config_path}")

    def _ensure_loaded(self) -> CommentedMap:
        """Ensure config is loaded, load if not"""
        if self._config is None:
            self.reload()
        return self._config

    def reload(self, validate: bool = True) -> CommentedMap:
        """
        Reload config from disk.

        Validation problems are reported as warnings so a partial
        config still loads.
        """
        self._ensure_config_exists()

        with open(self.config_path, encoding="utf-8") as f:
            self._config = self.yaml.load(f) or CommentedMap()

        if validate:
            for error in get_validation_errors(dict(self._config)):
                warnings.warn(f"Config validation warning: {error}", UserWarning, stacklevel=2)

        return self._config

    def save(self) -> None:
        """Save config to disk, preserving comments and formatting"""
        if self._config is None:
            raise ValueError("No config loaded to save")

        with open(self.config_path, "w", encoding="utf-8") as f:
            self.yaml.dump(self._config, f)

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Example: get("catalog.filling_fast_threshold") -> 10
        """
        config = self._ensure_loaded()
        value = config

        for key in path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """
        Set a config value by dot-notation path.

        Example: set("catalog.booked_ratio", 0.5)
        """
        config = self._ensure_loaded()
        keys = path.split(".")

        current = config
        for key in keys[:-1]:
            if key not in current:
                current[key] = CommentedMap()
            current = current[key]

        current[keys[-1]] = value

    def get_section(self, section: str) -> dict:
        """Get an entire config section as a dict"""
        config = self._ensure_loaded()
        return dict(config.get(section, {}))

    def get_editable_config(self) -> dict:
        """
        Get config suitable for admin editing.

        Missing values are filled with schema defaults so the response
        always has the full shape.
        """
        config = self._ensure_loaded()
        raw = {
            section: _to_plain(config.get(section, {}))
            for section in self.EDITABLE_SECTIONS
        }
        try:
            return validate_config(raw).model_dump()
        except ValidationError:
            # Invalid values on disk are still shown so they can be fixed
            return raw

    def validate_update(self, updates: dict) -> list[str]:
        """
        Validate an update dict before applying.

        Returns a list of validation error messages (empty if valid).
        """
        current = {
            section: _to_plain(self._ensure_loaded().get(section, {}))
            for section in self.EDITABLE_SECTIONS
        }

        def deep_merge(base: dict, update: dict) -> dict:
            result = base.copy()
            for key, value in update.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        unknown = [key for key in updates if key not in self.EDITABLE_SECTIONS]
        if unknown:
            return [f"{key}: not an editable section" for key in unknown]

        return get_validation_errors(deep_merge(current, updates))

    def update_from_dict(self, updates: dict, prefix: str = "") -> list[str]:
        """
        Update config from a nested dict, returning list of changed paths.

        Only updates values that have actually changed.
        """
        changed = []

        for key, value in updates.items():
            path = f"{prefix}.{key}" if prefix else key

            if isinstance(value, dict):
                changed.extend(self.update_from_dict(value, path))
            else:
                current = self.get(path)
                if _to_plain(current) != value:
                    self.set(path, value)
                    changed.append(path)

        return changed

    def get_restart_required_fields(self) -> builtins.set[str]:
        """Fields that require a server restart to take effect"""
        return {
            "rate_limiting.default_per_minute",
            "rate_limiting.auth_per_minute",
            "application.logging.log_to_file",
            "application.logging.log_to_console",
        }


def _to_plain(value: Any) -> Any:
    """Convert ruamel containers into plain dicts and lists"""
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


# Singleton instance
_config_service: ConfigService | None = None


def get_config_service() -> ConfigService:
    """Get the singleton config service instance"""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service


def set_config_service(service: ConfigService | None) -> None:
    """Replace the singleton (used by tests and config reloads)"""
    global _config_service
    _config_service = service


def clear_config_cache() -> None:
    """Clear the config service cache (forces reload on next access)"""
    if _config_service is not None:
        _config_service._config = None
