"""SDK settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. BKPER_ENV_FILE environment variable (absolute path to .env file)
3. config/.env.dev - local development
4. config/.env - production

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://app.bkper.com/_ah/api/bkper"

# The search endpoint rejects larger pages
MAX_PAGE_SIZE = 1000

# Retries on 429, 5xx and connection errors before giving up
DEFAULT_MAX_RETRIES = 6


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. BKPER_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("BKPER_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class ApiConfig(BaseModel):
    """Immutable transport configuration handed to the HTTP client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_API_BASE_URL
    api_key: SecretStr | None = None
    access_token: SecretStr | None = None
    timeout: float = 30.0
    page_size: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    retry_delay: float = Field(default=1.0, ge=0)


class Settings(BaseSettings):
    """SDK configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority, BKPER_ prefix)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BKPER_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_base_url: str = DEFAULT_API_BASE_URL
    api_key: SecretStr | None = None  # Agent identification only, not auth
    access_token: SecretStr | None = None  # OAuth2 bearer token

    # Transport
    timeout: float = 30.0
    page_size: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    retry_delay: float = 1.0  # Seconds, doubled after each retry

    # Logging
    log_level: str = "INFO"

    def api_config(self) -> ApiConfig:
        """Freeze the transport-related values into an ApiConfig."""
        return ApiConfig(
            base_url=self.api_base_url.rstrip("/"),
            api_key=self.api_key,
            access_token=self.access_token,
            timeout=self.timeout,
            page_size=self.page_size,
            max_retries=self.max_retries,
            retry_delay=self.retry_delay,
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached SDK settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
