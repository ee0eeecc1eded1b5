"""Errors raised while building domain values from untrusted input."""

from __future__ import annotations


class IllegalValueError(Exception):
    """Base error for values that cannot become part of the domain model."""

    code = "illegal_value"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class MissingFieldError(IllegalValueError):
    """Raised when a mandatory base field is absent."""

    code = "missing_field"
    MESSAGE_FORMAT = "{} field is missing!"

    def __init__(self, field_name: str):
        super().__init__(self.MESSAGE_FORMAT.format(field_name))
        self.field_name = field_name


class FieldFormatError(IllegalValueError):
    """Raised when a present value fails its field type's format rule."""

    code = "invalid_format"


class MalformedAttendanceError(FieldFormatError):
    """Raised when an attendance string cannot be read as status + timestamp."""

    code = "malformed_attendance"


class UnknownRecordTypeError(IllegalValueError):
    """Raised when the type discriminator names no known record variant."""

    code = "unknown_type"

    def __init__(self, record_type: object):
        super().__init__(f"Unknown record type: {record_type!r}")
        self.record_type = record_type
