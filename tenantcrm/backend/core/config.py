"""
Configuration Management.

Loads secrets from config/.env and settings from config/settings/*.yaml.
No hardcoded values in code. All configuration comes from these sources.

Secrets (.env or environment):
    JWT_SECRET, DB_PASSWORD, DEMO_ADMIN_PASSWORD

Settings (YAML):
    application.yaml - App identity, server, cors, pagination, timeouts
    database.yaml    - Database driver and connection settings
    logging.yaml     - Logging configuration
    security.yaml    - JWT settings
    tenancy.yaml     - Default tenant and tenant header
    client.yaml      - API client storage and timeouts
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tenantcrm.backend.core.config_schema import (
    ApplicationSchema,
    ClientSchema,
    DatabaseSchema,
    LoggingSchema,
    SecuritySchema,
    TenancySchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from config/.env. Only passwords, tokens, and keys."""

    jwt_secret: str
    db_password: str = ""
    demo_admin_password: str = "demo"

    model_config = SettingsConfigDict(
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
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")
        self._security = _load_validated(SecuritySchema, "security.yaml")
        self._tenancy = _load_validated(TenancySchema, "tenancy.yaml")
        self._client = _load_validated(ClientSchema, "client.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        """Database settings."""
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def security(self) -> SecuritySchema:
        """Security settings."""
        return self._security

    @property
    def tenancy(self) -> TenancySchema:
        """Tenancy settings (default tenant, header name)."""
        return self._tenancy

    @property
    def client(self) -> ClientSchema:
        """API client settings (local storage, timeouts)."""
        return self._client


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_database_url(async_driver: bool = True) -> str:
    """
    Construct database URL from YAML config and secrets.

    Args:
        async_driver: Use aiosqlite/asyncpg drivers if True, sync drivers if False.

    Returns:
        Database connection URL string.
    """
    db = get_app_config().database

    if db.driver == "sqlite":
        db_path = find_project_root() / db.sqlite_path
        driver = "sqlite+aiosqlite" if async_driver else "sqlite"
        return f"{driver}:///{db_path}"

    password = get_settings().db_password
    driver = "postgresql+asyncpg" if async_driver else "postgresql"
    return f"{driver}://{db.user}:{password}@{db.host}:{db.port}/{db.name}"


def get_server_base_url() -> tuple[str, float]:
    """
    Get the backend server base URL and timeout from config.

    A wildcard bind address is mapped to loopback so clients can connect.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    app_config = get_app_config()
    server = app_config.application.server
    host = "127.0.0.1" if server.host in ("0.0.0.0", "::") else server.host
    base_url = f"http://{host}:{server.port}"
    timeout = float(app_config.client.timeout)
    return base_url, timeout
