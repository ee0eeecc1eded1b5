"""Roster records: the Person base entity and its Student variant."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable, Tuple

from rosterbook.domain.attendance import AttendanceEntry
from rosterbook.domain.fields import Address, Email, Name, Phone, Tag

PERSON_TYPE = "person"
STUDENT_TYPE = "student"


@dataclass(frozen=True)
class Person:
    """Contact record. Every field must be present; equality is attribute-wise."""

    RECORD_TYPE: ClassVar[str] = PERSON_TYPE

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: FrozenSet[Tag] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", frozenset(self.tags))

    @property
    def record_type(self) -> str:
        return self.RECORD_TYPE

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality used to keep the roster free of duplicates."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda t: t.value)

    def describe(self) -> str:
        tags = "".join(str(t) for t in self.sorted_tags())
        return f"{self.name}; Phone: {self.phone}; Email: {self.email}; Address: {self.address}; Tags: {tags}"


@dataclass(frozen=True)
class Student(Person):
    """Person with class, subjects, contact/payment details and attendance."""

    RECORD_TYPE: ClassVar[str] = STUDENT_TYPE

    student_class: str = ""
    subjects: Tuple[str, ...] = ()
    emergency_contact: str = ""
    payment_status: str = ""
    assignment_status: str = ""
    attendance: Tuple[AttendanceEntry, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "subjects", tuple(self.subjects))
        object.__setattr__(self, "attendance", tuple(self.attendance))

    def describe(self) -> str:
        parts = [
            super().describe(),
            f"Class: {self.student_class}",
            f"Subjects: {', '.join(self.subjects)}",
            f"Emergency contact: {self.emergency_contact}",
            f"Payment: {self.payment_status}",
            f"Assignment: {self.assignment_status}",
            f"Attendance: {', '.join(e.encode() for e in self.attendance)}",
        ]
        return "; ".join(parts)


def make_person(
    name: str,
    phone: str,
    email: str,
    address: str,
    tags: Iterable[str] = (),
) -> Person:
    """Build a Person from raw strings, validating every field."""
    return Person(Name(name), Phone(phone), Email(email), Address(address), frozenset(Tag(t) for t in tags))
