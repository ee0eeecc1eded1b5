"""Attendance entries kept on a student record."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from rosterbook.domain.errors import MalformedAttendanceError

SEPARATOR = ","
# Date and time are both required; offsets only as +HH:MM/-HH:MM.
TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{6})?)?(?:[+-][0-9]{2}:[0-9]{2})?"
)


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


MESSAGE_CONSTRAINTS = (
    "Attendance entries should be of the format STATUS,TIMESTAMP where STATUS is one of "
    + ", ".join(s.value for s in AttendanceStatus)
    + " and TIMESTAMP is an ISO-8601 date-time (YYYY-MM-DDTHH:MM, optional seconds and"
    + " +HH:MM offset), e.g. PRESENT,2025-10-14T10:00"
)


@dataclass(frozen=True)
class AttendanceEntry:
    status: AttendanceStatus
    timestamp: datetime

    @classmethod
    def parse(cls, raw: object) -> "AttendanceEntry":
        """Read ``"<STATUS>,<timestamp>"``; raise MalformedAttendanceError otherwise."""
        if not isinstance(raw, str) or SEPARATOR not in raw:
            raise MalformedAttendanceError(f"Invalid attendance entry {raw!r}. {MESSAGE_CONSTRAINTS}")
        token, _, stamp = raw.partition(SEPARATOR)
        if not TIMESTAMP_PATTERN.fullmatch(stamp):
            raise MalformedAttendanceError(f"Invalid attendance entry {raw!r}. {MESSAGE_CONSTRAINTS}")
        try:
            status = AttendanceStatus(token)
            timestamp = datetime.fromisoformat(stamp)
        except ValueError as exc:
            raise MalformedAttendanceError(f"Invalid attendance entry {raw!r}. {MESSAGE_CONSTRAINTS}") from exc
        return cls(status, timestamp)

    def encode(self) -> str:
        ts = self.timestamp
        if ts.second == 0 and ts.microsecond == 0:
            stamp = ts.isoformat(timespec="minutes")
        else:
            stamp = ts.isoformat()
        return f"{self.status.value}{SEPARATOR}{stamp}"

    def __str__(self) -> str:
        return self.encode()
