"""Shared SDK configuration package."""

from .settings import (
    DEFAULT_API_BASE_URL,
    MAX_PAGE_SIZE,
    ApiConfig,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "MAX_PAGE_SIZE",
    "ApiConfig",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
]
