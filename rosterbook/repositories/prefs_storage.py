"""User preferences stored next to the roster file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json
import logging

from rosterbook.repositories.json_storage import DataLoadingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserPrefs:
    roster_file_path: Path

    def to_dict(self) -> dict:
        return {"rosterFilePath": self.roster_file_path.as_posix()}


class JsonUserPrefsStorage:
    def __init__(self, file_path: Path | str) -> None:
        self.file_path = Path(file_path)

    def read(self) -> Optional[UserPrefs]:
        if not self.file_path.exists():
            return None
        try:
            payload = json.loads(self.file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DataLoadingError(f"Could not read preferences file {self.file_path}: {exc}", self.file_path) from exc
        raw = payload.get("rosterFilePath") if isinstance(payload, dict) else None
        if not isinstance(raw, str) or not raw.strip():
            raise DataLoadingError(f"Preferences file {self.file_path} has no rosterFilePath", self.file_path)
        return UserPrefs(Path(raw.strip()))

    def save(self, prefs: UserPrefs) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_text(json.dumps(prefs.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")


def resolve_roster_path(prefs_file: Path, default: Path) -> Path:
    """Roster path from the preferences file, falling back to ``default``."""
    try:
        prefs = JsonUserPrefsStorage(prefs_file).read()
    except DataLoadingError as exc:
        logger.warning("%s; using default roster path %s", exc.message, default)
        return default
    return prefs.roster_file_path if prefs else default
