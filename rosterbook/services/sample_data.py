"""Records used to seed a fresh roster file."""

from __future__ import annotations

from datetime import datetime

from rosterbook.domain.attendance import AttendanceEntry, AttendanceStatus
from rosterbook.domain.person import Person, Student, make_person
from rosterbook.domain.roster import Roster


def sample_persons() -> list[Person]:
    alex = make_person("Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29, #06-40", ["friends"])
    bernice = make_person(
        "Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
        ["colleagues", "friends"],
    )
    charlotte = make_person("Charlotte Oliveiro", "93210283", "charlotte@example.com", "Blk 11 Ang Mo Kio Street 74, #11-04")
    david_base = make_person("David Li", "91031282", "lidavid@example.com", "Blk 436 Serangoon Gardens Street 26, #16-43", ["family"])
    david = Student(
        david_base.name,
        david_base.phone,
        david_base.email,
        david_base.address,
        david_base.tags,
        student_class="3B",
        subjects=("Math", "Chemistry"),
        emergency_contact="98765432",
        payment_status="Paid",
        assignment_status="Submitted",
        attendance=(
            AttendanceEntry(AttendanceStatus.PRESENT, datetime(2025, 10, 14, 10, 0)),
            AttendanceEntry(AttendanceStatus.LATE, datetime(2025, 10, 21, 10, 5)),
        ),
    )
    return [alex, bernice, charlotte, david]


def sample_roster() -> Roster:
    return Roster(sample_persons())
