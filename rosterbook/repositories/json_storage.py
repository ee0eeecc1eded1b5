"""
JSON file persistence for the roster.

The whole roster is stored as ``{"persons": [...]}`` and rewritten on every
save. Loading is all-or-nothing: the first bad entry aborts the load and no
partial roster is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional
import json
import logging

from rosterbook.domain.errors import IllegalValueError
from rosterbook.domain.person import Person
from rosterbook.domain.roster import Roster
from rosterbook.repositories.json_adapter import JsonAdaptedPerson

logger = logging.getLogger(__name__)

PERSONS_KEY = "persons"
MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."


class DataLoadingError(Exception):
    """Raised when a data file exists but cannot be turned into domain objects."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class RosterEntryError(IllegalValueError):
    """Raised when the entry at ``position`` (1-based) cannot be loaded."""

    code = "invalid_entry"

    def __init__(self, position: int, cause: IllegalValueError):
        super().__init__(f"Entry {position}: {cause.message}")
        self.position = position
        self.cause = cause


@dataclass
class JsonSerializableRoster:
    persons: List[Any] = field(default_factory=list)

    @classmethod
    def from_model(cls, roster: Roster) -> "JsonSerializableRoster":
        return cls([JsonAdaptedPerson.from_model(p).to_dict() for p in roster])

    @classmethod
    def from_dict(cls, payload: Any) -> "JsonSerializableRoster":
        if not isinstance(payload, Mapping):
            raise IllegalValueError("Roster file should contain a JSON object")
        persons = payload.get(PERSONS_KEY)
        if persons is None:
            return cls([])
        if not isinstance(persons, list):
            raise IllegalValueError(f"'{PERSONS_KEY}' should be a JSON array")
        return cls(list(persons))

    def to_dict(self) -> dict:
        return {PERSONS_KEY: list(self.persons)}

    def to_model_type(self) -> Roster:
        """Rebuild every entry in order; the first failure aborts the load."""
        loaded: List[Person] = []
        for position, entry in enumerate(self.persons, start=1):
            try:
                person = JsonAdaptedPerson.from_dict(entry).to_model_type()
            except IllegalValueError as exc:
                raise RosterEntryError(position, exc) from exc
            if any(p.is_same_person(person) for p in loaded):
                raise RosterEntryError(position, IllegalValueError(MESSAGE_DUPLICATE_PERSON))
            loaded.append(person)
        return Roster(loaded)


def serialize_roster(roster: Roster) -> dict:
    return JsonSerializableRoster.from_model(roster).to_dict()


def deserialize_roster(payload: Any) -> Roster:
    return JsonSerializableRoster.from_dict(payload).to_model_type()


class JsonRosterStorage:
    """Reads and writes one roster file."""

    def __init__(self, file_path: Path | str) -> None:
        self.file_path = Path(file_path)

    def read(self, file_path: Optional[Path] = None) -> Optional[Roster]:
        """Return the stored roster, or None when the file does not exist."""
        path = Path(file_path) if file_path is not None else self.file_path
        if not path.exists():
            logger.info("Roster file %s not found", path)
            return None
        try:
            text = path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except (OSError, UnicodeDecodeError) as exc:
            raise DataLoadingError(f"Could not read roster file {path}: {exc}", path) from exc
        except json.JSONDecodeError as exc:
            raise DataLoadingError(f"Roster file {path} is not valid JSON: {exc}", path) from exc
        try:
            roster = deserialize_roster(payload)
        except IllegalValueError as exc:
            logger.warning("Illegal values found in %s: %s", path, exc.message)
            raise DataLoadingError(f"Illegal values found in {path}: {exc.message}", path) from exc
        logger.info("Loaded %d persons from %s", len(roster), path)
        return roster

    def save(self, roster: Roster, file_path: Optional[Path] = None) -> None:
        path = Path(file_path) if file_path is not None else self.file_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(serialize_roster(roster), ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Saved %d persons to %s", len(roster), path)
