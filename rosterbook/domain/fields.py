"""Validated scalar values held by a roster record."""
from __future__ import annotations

import re
from dataclasses import dataclass

from rosterbook.domain.errors import FieldFormatError

# Unicode letters and digits; spaces allowed after the first character.
NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")
PHONE_PATTERN = re.compile(r"\+?[0-9]{7,}")
ADDRESS_PATTERN = re.compile(r"\S.*")
TAG_PATTERN = re.compile(r"[^\W_]+")

_EMAIL_LOCAL = r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
_EMAIL_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])*"
_EMAIL_LAST_LABEL = r"[A-Za-z0-9](?:-?[A-Za-z0-9])+"
EMAIL_PATTERN = re.compile(rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*{_EMAIL_LAST_LABEL}")


@dataclass(frozen=True)
class ValidatedString:
    """Immutable wrapper that only accepts strings matching ``PATTERN``."""

    value: str

    PATTERN = re.compile(r".*")
    MESSAGE_CONSTRAINTS = ""

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise FieldFormatError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: object) -> bool:
        return isinstance(value, str) and bool(cls.PATTERN.fullmatch(value))

    def __str__(self) -> str:
        return self.value


class Name(ValidatedString):
    PATTERN = NAME_PATTERN
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )


class Phone(ValidatedString):
    PATTERN = PHONE_PATTERN
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain digits, optionally prefixed by a single '+', "
        "and it should be at least 7 digits long"
    )


class Email(ValidatedString):
    """``local-part@domain``.

    The local part holds alphanumerics and ``+_.-`` and must not start or end
    with a special character. The domain is made of dot-separated labels of
    alphanumerics joined by hyphens; the last label has at least 2 characters.
    """

    PATTERN = EMAIL_PATTERN
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )


class Address(ValidatedString):
    PATTERN = ADDRESS_PATTERN
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"


class Tag(ValidatedString):
    PATTERN = TAG_PATTERN
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    def __str__(self) -> str:
        return f"[{self.value}]"
