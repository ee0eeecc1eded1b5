"""
Configuration helpers for rosterbook.

Settings are read once from environment variables (storage paths, log level,
environment name) so that services/routers do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    roster_file_path: Path
    prefs_file_path: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: str) -> Path:
        raw = (value or "").strip()
        return Path(raw or default)

    def _level(value: str | None, default: str = "INFO") -> str:
        level = (value or "").strip().upper()
        if level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            return level
        return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        roster_file_path=_path(os.getenv("ROSTER_FILE_PATH"), "data/roster.json"),
        prefs_file_path=_path(os.getenv("PREFS_FILE_PATH"), "data/preferences.json"),
        log_level=_level(os.getenv("LOG_LEVEL")),
    )
