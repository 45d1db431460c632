"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional environment
overrides from NTC_BOOKING_* variables (or config/.env).

Settings (YAML):
    application.yaml   - App identity, remote API, local storage, CLI behaviour
    logging.yaml       - Logging configuration

Overrides (environment):
    NTC_BOOKING_API_BASE_URL  - Remote booking service base URL
    NTC_BOOKING_HOME          - Directory holding the session and notes files
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ntc_booking.core.config_schema import ApplicationSchema, LoggingSchema

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def find_project_root() -> Path:
    """
    Find project root by looking for .project_root marker file.

    Searches upwards from the working directory first, then falls back to
    the checkout the package was installed from.
    """
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    if (_PACKAGE_ROOT / ".project_root").exists():
        return _PACKAGE_ROOT
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
    """Environment overrides. Unset values fall back to application.yaml."""

    api_base_url: str | None = None
    home: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NTC_BOOKING_",
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
    if env_path.is_file():
        return Settings(_env_file=str(env_path))
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_settings() -> tuple[str, float]:
    """
    Get the remote booking service base URL and timeout.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    api = get_app_config().application.api
    base_url = get_settings().api_base_url or api.base_url
    return base_url.rstrip("/"), float(api.timeout)


def get_storage_paths() -> tuple[Path, Path]:
    """
    Resolve the session and notes file locations.

    Relative directories resolve against the project root; ``~`` expands
    to the user's home directory.

    Returns:
        Tuple of (session_path, notes_path).
    """
    storage = get_app_config().application.storage
    directory = Path(get_settings().home or storage.directory).expanduser()
    if not directory.is_absolute():
        directory = find_project_root() / directory
    return directory / storage.session_file, directory / storage.notes_file
