"""
Unit tests for the JSON transfer form of roster records.

Covers serialization of both Person and Student records, the fixed order in
which base fields are validated, and the handling of student-only fields.
"""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rosterbook.domain.attendance import AttendanceStatus  # noqa: E402
from rosterbook.domain.errors import (  # noqa: E402
    FieldFormatError,
    IllegalValueError,
    MalformedAttendanceError,
    MissingFieldError,
    UnknownRecordTypeError,
)
from rosterbook.domain.fields import Address, Email, Name, Phone, Tag  # noqa: E402
from rosterbook.domain.person import Person, Student  # noqa: E402
from rosterbook.repositories.json_adapter import JsonAdaptedPerson, deserialize, serialize  # noqa: E402

from typical_persons import AMY_STUDENT, BENSON  # noqa: E402

INVALID_NAME = "R@chel"
INVALID_PHONE = "+651234"
INVALID_ADDRESS = " "
INVALID_EMAIL = "example.com"
INVALID_TAG = "#friend"

VALID_NAME = BENSON.name.value
VALID_PHONE = BENSON.phone.value
VALID_EMAIL = BENSON.email.value
VALID_ADDRESS = BENSON.address.value
VALID_TAGS = [t.value for t in BENSON.sorted_tags()]


def _entry(**overrides):
    data = {
        "type": "person",
        "name": VALID_NAME,
        "phone": VALID_PHONE,
        "email": VALID_EMAIL,
        "address": VALID_ADDRESS,
        "tags": list(VALID_TAGS),
    }
    for key, value in overrides.items():
        if value is _DROP:
            data.pop(key, None)
        else:
            data[key] = value
    return data


_DROP = object()


def test_person_round_trip():
    assert deserialize(serialize(BENSON)) == BENSON


def test_student_round_trip_keeps_every_field():
    restored = deserialize(serialize(AMY_STUDENT))
    assert isinstance(restored, Student)
    assert restored == AMY_STUDENT
    assert restored.attendance == AMY_STUDENT.attendance


def test_person_serializes_student_fields_as_null():
    data = serialize(BENSON)
    assert data["type"] == "person"
    assert data["tags"] == ["friends", "owesMoney"]
    for key in ("class", "subjects", "emergencyContact", "paymentStatus", "assignmentStatus", "attendance"):
        assert key in data
        assert data[key] is None


def test_student_serializes_lists_in_order():
    data = serialize(AMY_STUDENT)
    assert data["type"] == "student"
    assert data["class"] == "10A"
    assert data["subjects"] == ["Math", "Physics"]
    assert data["emergencyContact"] == "91234567"
    assert data["attendance"] == ["PRESENT,2025-10-14T10:00", "ABSENT,2025-10-21T10:00:30"]


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("name", INVALID_NAME, Name.MESSAGE_CONSTRAINTS),
        ("phone", INVALID_PHONE, Phone.MESSAGE_CONSTRAINTS),
        ("email", INVALID_EMAIL, Email.MESSAGE_CONSTRAINTS),
        ("address", INVALID_ADDRESS, Address.MESSAGE_CONSTRAINTS),
    ],
)
def test_invalid_base_field_reports_constraint_message(key, value, expected):
    with pytest.raises(FieldFormatError) as exc:
        deserialize(_entry(**{key: value}))
    assert exc.value.message == expected


@pytest.mark.parametrize(
    "key, field_name",
    [("name", "Name"), ("phone", "Phone"), ("email", "Email"), ("address", "Address")],
)
def test_missing_base_field_names_the_field(key, field_name):
    for absent in (None, _DROP):
        with pytest.raises(MissingFieldError) as exc:
            deserialize(_entry(**{key: absent}))
        assert exc.value.message == f"{field_name} field is missing!"
        assert exc.value.field_name == field_name


def test_missing_name_wins_regardless_of_other_fields():
    data = _entry(name=_DROP, phone=INVALID_PHONE, email=_DROP, type="widget")
    with pytest.raises(MissingFieldError, match="Name field is missing!"):
        deserialize(data)


def test_invalid_name_masks_missing_phone():
    with pytest.raises(FieldFormatError) as exc:
        deserialize(_entry(name=INVALID_NAME, phone=_DROP))
    assert exc.value.message == Name.MESSAGE_CONSTRAINTS


def test_non_string_field_is_a_format_error():
    with pytest.raises(FieldFormatError) as exc:
        deserialize(_entry(phone=91234567))
    assert exc.value.message == Phone.MESSAGE_CONSTRAINTS


def test_invalid_tag_rejected():
    with pytest.raises(FieldFormatError) as exc:
        deserialize(_entry(tags=VALID_TAGS + [INVALID_TAG]))
    assert exc.value.message == Tag.MESSAGE_CONSTRAINTS


def test_absent_tags_mean_no_tags():
    person = deserialize(_entry(tags=_DROP))
    assert person.tags == frozenset()


def test_duplicate_tags_collapse():
    person = deserialize(_entry(tags=["friends", "friends"]))
    assert person.tags == frozenset({Tag("friends")})


def test_unknown_type_rejected():
    with pytest.raises(UnknownRecordTypeError) as exc:
        deserialize(_entry(type="widget"))
    assert exc.value.record_type == "widget"
    assert "widget" in exc.value.message


def test_missing_type_rejected_after_base_fields():
    with pytest.raises(UnknownRecordTypeError):
        deserialize(_entry(type=_DROP))


def test_person_ignores_student_fields():
    data = _entry(**{"class": "10A", "subjects": ["Math"], "attendance": ["bogus"]})
    person = deserialize(data)
    assert type(person) is Person
    assert person == BENSON


def test_student_with_no_optional_fields_defaults_to_empty():
    student = deserialize(_entry(type="student"))
    assert isinstance(student, Student)
    assert student.student_class == ""
    assert student.subjects == ()
    assert student.emergency_contact == ""
    assert student.payment_status == ""
    assert student.assignment_status == ""
    assert student.attendance == ()


def test_student_example_entry():
    data = {
        "type": "student",
        "name": "Amy",
        "phone": "91234567",
        "email": "amy@x.com",
        "address": "123 St",
        "tags": [],
        "attendance": ["PRESENT,2025-10-14T10:00"],
    }
    student = deserialize(data)
    assert isinstance(student, Student)
    assert len(student.attendance) == 1
    entry = student.attendance[0]
    assert entry.status is AttendanceStatus.PRESENT
    assert entry.timestamp == datetime(2025, 10, 14, 10, 0)


def test_student_malformed_attendance():
    with pytest.raises(MalformedAttendanceError):
        deserialize(_entry(type="student", attendance=["PRESENT,2025-10-14T10:00", "PRESENT"]))
    with pytest.raises(MalformedAttendanceError):
        deserialize(_entry(type="student", attendance="PRESENT,2025-10-14T10:00"))


def test_student_invalid_emergency_contact():
    with pytest.raises(FieldFormatError) as exc:
        deserialize(_entry(type="student", emergencyContact="call mum"))
    assert exc.value.message == Phone.MESSAGE_CONSTRAINTS


def test_student_list_fields_must_hold_strings():
    with pytest.raises(FieldFormatError, match="Subjects"):
        deserialize(_entry(type="student", subjects=["Math", 3]))


def test_non_object_entry_rejected():
    with pytest.raises(IllegalValueError):
        deserialize(["person", "Amy"])


def test_from_dict_keeps_raw_values():
    adapted = JsonAdaptedPerson.from_dict(_entry(type="student", **{"class": "10A"}))
    assert adapted.record_type == "student"
    assert adapted.student_class == "10A"
    assert adapted.has_student_fields()
    assert not JsonAdaptedPerson.from_dict(_entry()).has_student_fields()


def test_deserialize_is_deterministic():
    data = _entry(type="student", attendance=["LATE,2025-10-14T10:05"])
    assert deserialize(data) == deserialize(dict(data))
