"""Application configuration loader.

Loads centralized configuration from data/config/app_config_v1.yaml,
falling back to built-in defaults when the file is missing.

Usage:
    from interview_prep.config.app_config import load_app_config

    config = load_app_config()
    db_path = config.database.path
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

# Environment override for the database location
DB_PATH_ENV = "INTERVIEW_PREP_DB"

# Seed file `prep seed` loads when none is given, inside paths.seed_dir
SEED_FILE_NAME = "questions_v1.yaml"


@dataclass
class DatabaseConfig:
    """Connection settings for the data store."""

    path: str = "db/interview_prep.db"

    def resolve_path(self) -> Path:
        """Database path, honoring the INTERVIEW_PREP_DB override."""
        override = os.environ.get(DB_PATH_ENV)
        return Path(override) if override else Path(self.path)


@dataclass
class WebConfig:
    """Settings for the HTTP surface."""

    title: str = "InterviewPrep"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    auth_route: str = "/auth"


@dataclass
class AppConfig:
    """Application-wide configuration."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    web: WebConfig = field(default_factory=WebConfig)
    paths: dict[str, str] = field(default_factory=dict)

    def default_seed_file(self) -> Path:
        """Seed file under the configured seed directory."""
        return Path(self.paths.get("seed_dir", "data/seed")) / SEED_FILE_NAME


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "database": {
            "path": "db/interview_prep.db",
        },
        "web": {
            "title": "InterviewPrep",
            "cors_origins": ["*"],
            "auth_route": "/auth",
        },
        "paths": {
            "seed_dir": "data/seed",
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    db_data = data.get("database") or {}
    database = DatabaseConfig(path=db_data.get("path", "db/interview_prep.db"))

    web_data = data.get("web") or {}
    web = WebConfig(
        title=web_data.get("title", "InterviewPrep"),
        cors_origins=list(web_data.get("cors_origins", ["*"])),
        auth_route=web_data.get("auth_route", "/auth"),
    )

    paths = {**_get_defaults()["paths"], **(data.get("paths") or {})}

    return AppConfig(database=database, web=web, paths=paths)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, using defaults when no file exists.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
