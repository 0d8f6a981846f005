"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional overrides from
RPADMIN_* environment variables (or config/.env).

Settings (YAML):
    application.yaml   - Console identity, server address, timeouts, console behavior
    logging.yaml       - Logging configuration

Overrides (environment / config/.env):
    RPADMIN_BASE_URL   - Full base URL of the admin server
    RPADMIN_TIMEOUT    - Request timeout in seconds

Precedence is CLI option > environment > YAML.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rpadmin.core.config_schema import ApplicationSchema, LoggingSchema


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to the YAML settings."""

    base_url: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="RPADMIN_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides. Reads config/.env when present."""
    try:
        env_path = find_project_root() / "config" / ".env"
    except RuntimeError:
        return Settings()
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_server_base_url() -> tuple[str, float]:
    """
    Get the admin server base URL and request timeout.

    Environment overrides win over application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    app = get_app_config().application
    settings = get_settings()

    server = app.server
    base_url = settings.base_url or f"{server.scheme}://{server.host}:{server.port}"
    timeout = settings.timeout if settings.timeout is not None else float(app.timeouts.request)
    return base_url.rstrip("/"), timeout
