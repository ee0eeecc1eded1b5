"""
JSON-friendly transfer form of a roster record.

``JsonAdaptedPerson`` is the flat structure stored for every record: a type
discriminator, the four base fields, the tags and six nullable student-only
fields. It is only used at the persistence boundary; everything else works
with ``Person``/``Student``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple, Type

from rosterbook.domain.attendance import AttendanceEntry, MESSAGE_CONSTRAINTS as ATTENDANCE_CONSTRAINTS
from rosterbook.domain.errors import (
    FieldFormatError,
    IllegalValueError,
    MalformedAttendanceError,
    MissingFieldError,
    UnknownRecordTypeError,
)
from rosterbook.domain.fields import Address, Email, Name, Phone, Tag, ValidatedString
from rosterbook.domain.person import PERSON_TYPE, STUDENT_TYPE, Person, Student

logger = logging.getLogger(__name__)


def _require(raw: Any, field_type: Type[ValidatedString]) -> Any:
    if raw is None:
        raise MissingFieldError(field_type.__name__)
    if not field_type.is_valid(raw):
        raise FieldFormatError(field_type.MESSAGE_CONSTRAINTS)
    return field_type(raw)


def _text(raw: Any, label: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise FieldFormatError(f"{label} should be a string")
    return raw


def _strings(raw: Any, label: str) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise FieldFormatError(f"{label} should be a list of strings")
    return tuple(raw)


@dataclass
class JsonAdaptedPerson:
    record_type: Optional[str]
    name: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    tags: Any = field(default_factory=list)
    student_class: Optional[str] = None
    subjects: Optional[List[str]] = None
    emergency_contact: Optional[str] = None
    payment_status: Optional[str] = None
    assignment_status: Optional[str] = None
    attendance: Optional[List[str]] = None

    # ------------------------------------------------------------ model -> json
    @classmethod
    def from_model(cls, person: Person) -> "JsonAdaptedPerson":
        adapted = cls(
            record_type=person.record_type,
            name=person.name.value,
            phone=person.phone.value,
            email=person.email.value,
            address=person.address.value,
            tags=[t.value for t in person.sorted_tags()],
        )
        if isinstance(person, Student):
            adapted.student_class = person.student_class
            adapted.subjects = list(person.subjects)
            adapted.emergency_contact = person.emergency_contact
            adapted.payment_status = person.payment_status
            adapted.assignment_status = person.assignment_status
            adapted.attendance = [entry.encode() for entry in person.attendance]
        return adapted

    def to_dict(self) -> dict:
        return {
            "type": self.record_type,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "tags": list(self.tags or []),
            "class": self.student_class,
            "subjects": self.subjects,
            "emergencyContact": self.emergency_contact,
            "paymentStatus": self.payment_status,
            "assignmentStatus": self.assignment_status,
            "attendance": self.attendance,
        }

    # ------------------------------------------------------------ json -> model
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JsonAdaptedPerson":
        if not isinstance(data, Mapping):
            raise IllegalValueError("Roster entries should be JSON objects")
        return cls(
            record_type=data.get("type"),
            name=data.get("name"),
            phone=data.get("phone"),
            email=data.get("email"),
            address=data.get("address"),
            tags=data.get("tags"),
            student_class=data.get("class"),
            subjects=data.get("subjects"),
            emergency_contact=data.get("emergencyContact"),
            payment_status=data.get("paymentStatus"),
            assignment_status=data.get("assignmentStatus"),
            attendance=data.get("attendance"),
        )

    def has_student_fields(self) -> bool:
        return any(
            value is not None
            for value in (
                self.student_class,
                self.subjects,
                self.emergency_contact,
                self.payment_status,
                self.assignment_status,
                self.attendance,
            )
        )

    def to_model_type(self) -> Person:
        """
        Convert back into a Person or Student.

        Base fields are checked in a fixed order (name, phone, email,
        address, then tags) and the first problem is raised. Student-only
        fields default to empty when absent.
        """
        name = _require(self.name, Name)
        phone = _require(self.phone, Phone)
        email = _require(self.email, Email)
        address = _require(self.address, Address)
        tags = frozenset(self._tags())

        if self.record_type == PERSON_TYPE:
            if self.has_student_fields():
                logger.debug("Ignoring student-only fields on person entry %s", name)
            return Person(name, phone, email, address, tags)
        if self.record_type == STUDENT_TYPE:
            return Student(name, phone, email, address, tags, **self._student_fields())
        raise UnknownRecordTypeError(self.record_type)

    def _tags(self) -> List[Tag]:
        if self.tags is None:
            return []
        if not isinstance(self.tags, list):
            raise FieldFormatError(Tag.MESSAGE_CONSTRAINTS)
        tags = []
        for raw in self.tags:
            if not Tag.is_valid(raw):
                raise FieldFormatError(Tag.MESSAGE_CONSTRAINTS)
            tags.append(Tag(raw))
        return tags

    def _student_fields(self) -> dict:
        student_class = _text(self.student_class, "Class")
        subjects = _strings(self.subjects, "Subjects")
        emergency_contact = _text(self.emergency_contact, "Emergency contact")
        if emergency_contact and not Phone.is_valid(emergency_contact):
            raise FieldFormatError(Phone.MESSAGE_CONSTRAINTS)
        payment_status = _text(self.payment_status, "Payment status")
        assignment_status = _text(self.assignment_status, "Assignment status")
        if self.attendance is not None and not isinstance(self.attendance, list):
            raise MalformedAttendanceError(ATTENDANCE_CONSTRAINTS)
        attendance = tuple(AttendanceEntry.parse(raw) for raw in self.attendance or [])
        return {
            "student_class": student_class,
            "subjects": subjects,
            "emergency_contact": emergency_contact,
            "payment_status": payment_status,
            "assignment_status": assignment_status,
            "attendance": attendance,
        }


def serialize(person: Person) -> dict:
    """Flat JSON-ready dict for ``person``. Never fails."""
    return JsonAdaptedPerson.from_model(person).to_dict()


def deserialize(data: Mapping[str, Any]) -> Person:
    """Rebuild a record from its flat dict, raising IllegalValueError subclasses."""
    return JsonAdaptedPerson.from_dict(data).to_model_type()
