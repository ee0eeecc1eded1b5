"""Ordered collection of roster records, unique by name."""
from __future__ import annotations

from typing import Iterable, Iterator, List

from rosterbook.domain.person import Person


class RosterError(Exception):
    """Base exception for roster mutations."""

    code = "roster_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicatePersonError(RosterError):
    """Raised when a record with the same name is already on the roster."""

    code = "duplicate"

    def __init__(self, person: Person):
        super().__init__(f"A person named {person.name} already exists in the roster")
        self.person = person


class PersonNotFoundError(RosterError):
    """Raised when the target record is not on the roster."""

    code = "not_found"

    def __init__(self, person: Person | None = None, message: str = "Person not found in the roster"):
        super().__init__(message)
        self.person = person


class Roster:
    """Mutable list of records; records themselves are replaced, never edited."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: List[Person] = []
        for person in persons:
            self.add(person)

    def contains(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError(person)
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` at the same position."""
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError(target) from None
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(edited)
        self._persons[index] = edited

    def remove(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError(person) from None

    def get(self, index: int) -> Person:
        """Return the record at a 1-based position."""
        if index < 1 or index > len(self._persons):
            raise PersonNotFoundError(message=f"No person at position {index}")
        return self._persons[index - 1]

    def persons(self) -> List[Person]:
        return list(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"Roster({len(self._persons)} persons)"
