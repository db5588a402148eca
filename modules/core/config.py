"""
Configuration Management.

Loads secrets from the environment or .env files and settings from
config/settings/*.yaml. No hardcoded values in code; all configuration
comes from these sources.

Secrets (environment, config/.env, ./.env):
    RC_TOKEN

Settings (YAML):
    application.yaml   - App identity, API base URL and timeout
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.core.config_schema import ApplicationSchema, LoggingSchema
from modules.core.exceptions import ConfigurationError

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def _search_upwards(start: Path) -> Path | None:
    current = start
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def find_project_root() -> Path:
    """
    Find project root by looking for .project_root marker file.

    Searches upward from the working directory first, then from the
    location of the installed package.
    """
    root = _search_upwards(Path.cwd()) or _search_upwards(_PACKAGE_ROOT)
    if root is None:
        raise RuntimeError("Project root not found. Ensure .project_root file exists.")
    return root


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
    """Secrets loaded from the environment or .env files. Only tokens."""

    rc_token: str | None = None

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
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.
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
    """
    Get cached secrets instance.

    Reads config/.env under the project root and .env in the working
    directory. Environment variables take precedence over both files.
    """
    env_files: list[Path] = []
    try:
        env_files.append(find_project_root() / "config" / ".env")
    except RuntimeError:
        pass
    env_files.append(Path.cwd() / ".env")
    return Settings(_env_file=tuple(str(p) for p in env_files))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_token() -> str:
    """
    Return the bearer token for the hub API.

    Raises:
        ConfigurationError: If RC_TOKEN is not set or is blank.
    """
    token = get_settings().rc_token
    if not token or not token.strip():
        raise ConfigurationError("RC_TOKEN must be set (via environment or .env file)")
    return token.strip()


def get_api_base_url() -> tuple[str, float | None]:
    """
    Get the hub API base URL and timeout from application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds). Timeout is None when the
        transport default should be used.
    """
    api = get_app_config().application.api
    return api.base_url.rstrip("/"), api.timeout
