"""Configuration package for the interview prep app."""

from interview_prep.config.app_config import (
    AppConfig,
    DatabaseConfig,
    WebConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "WebConfig",
    "clear_config_cache",
    "load_app_config",
]
