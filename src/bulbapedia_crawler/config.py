# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to wiki endpoints, fetch policy, caching and logging settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="BULBAPEDIA_CRAWLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Wiki access
    base_url: str = Field(
        default="https://bulbapedia.bulbagarden.net/wiki/", description="Base URL that page paths are relative to"
    )
    user_agent: str = Field(
        default="BulbapediaCrawler/0.1 (python-httpx)",
        description="User-Agent header sent with every request",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    html_parser: str = Field(default="lxml", description="BeautifulSoup tree builder used to parse pages")

    # Fetch retry policy
    fetch_max_attempts: int = Field(default=3, ge=1, description="Attempts per page on transient failures")
    fetch_min_wait: float = Field(default=1.0, ge=0, description="Minimum backoff between attempts in seconds")
    fetch_max_wait: float = Field(default=10.0, ge=0, description="Maximum backoff between attempts in seconds")

    # Details cache
    details_cache_enabled: bool = Field(default=False, description="Persist detail records between runs")
    database_url: str = Field(
        default="sqlite+aiosqlite:///./bulbapedia_cache.db", description="Database URL for the details cache"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
