"""Roster use cases: load or initialise, mutate and save."""

from __future__ import annotations

import logging
from typing import List

from rosterbook.domain.person import Person
from rosterbook.domain.roster import Roster
from rosterbook.repositories.json_storage import DataLoadingError, JsonRosterStorage
from rosterbook.services.sample_data import sample_roster

logger = logging.getLogger(__name__)


class RosterService:
    """Keeps the in-memory roster and rewrites the file after each change.

    A mutation only becomes visible once the file write succeeded.
    """

    def __init__(self, storage: JsonRosterStorage) -> None:
        self.storage = storage
        self.roster = Roster()

    def load(self) -> Roster:
        """Load the file, propagating DataLoadingError. A missing file yields an empty roster."""
        self.roster = self.storage.read() or Roster()
        return self.roster

    def load_or_init(self) -> Roster:
        """Startup policy: sample data for a missing file, empty roster for a corrupt one."""
        try:
            roster = self.storage.read()
        except DataLoadingError as exc:
            logger.warning(
                "Data file at %s could not be loaded (%s). Starting with an empty roster.",
                self.storage.file_path,
                exc.message,
            )
            roster = Roster()
        else:
            if roster is None:
                logger.info("Data file not found. Starting with a sample roster.")
                roster = sample_roster()
        self.roster = roster
        return roster

    def save(self) -> None:
        self.storage.save(self.roster)

    def list_persons(self) -> List[Person]:
        return self.roster.persons()

    def get(self, index: int) -> Person:
        return self.roster.get(index)

    def _commit(self, updated: Roster) -> None:
        """Write ``updated`` and only then make it the live roster."""
        self.storage.save(updated)
        self.roster = updated

    def _working_copy(self) -> Roster:
        return Roster(self.roster.persons())

    def add(self, person: Person) -> Person:
        updated = self._working_copy()
        updated.add(person)
        self._commit(updated)
        logger.info("Added %s", person.name)
        return person

    def replace(self, index: int, person: Person) -> Person:
        target = self.roster.get(index)
        updated = self._working_copy()
        updated.set_person(target, person)
        self._commit(updated)
        logger.info("Replaced %s with %s", target.name, person.name)
        return person

    def remove(self, index: int) -> Person:
        target = self.roster.get(index)
        updated = self._working_copy()
        updated.remove(target)
        self._commit(updated)
        logger.info("Removed %s", target.name)
        return target
