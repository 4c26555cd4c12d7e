"""Configuration loading for formcheck.

Configuration is read once per process from TOML files with environment
variable overrides, then treated as read-only:

    from formcheck.config import get_settings

    settings = get_settings()
    country = settings.verification.default_country
"""

from functools import lru_cache

from formcheck.config.loader import ConfigurationError, load_config
from formcheck.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `reload_settings()` to re-read configuration.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["ConfigurationError", "Settings", "get_settings", "reload_settings"]
