# models/fields.py

"""
Validated value objects for the primitive fields of a record.

Every field wraps a single normalized string. Construction runs the class's
`validate()` hook, so an instance that exists is always well-formed; invalid
input raises `ValueError` carrying the field's constraint message, which the
parsers surface to the user unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Field:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"{type(self).__name__} expects a string, got {self.value!r}")

        object.__setattr__(self, "value", self.validate(self.value))

    @staticmethod
    def validate(value: str) -> str:
        return value

    def __str__(self) -> str:
        return self.value


class Name(Field):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain letters, digits, spaces, apostrophes, hyphens and periods, "
        "should start with a letter or digit, and should not be blank."
    )

    @staticmethod
    def validate(value: str) -> str:
        value = " ".join(value.split())
        if not re.fullmatch(r"[^\W_][\w '.-]*", value) or "_" in value:
            raise ValueError(Name.MESSAGE_CONSTRAINTS)
        return value


class Phone(Field):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain digits, and should be at least 3 digits long."
    )

    @staticmethod
    def validate(value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"\d{3,}", value):
            raise ValueError(Phone.MESSAGE_CONSTRAINTS)
        return value


class Email(Field):
    MESSAGE_CONSTRAINTS = (
        "Emails must be a valid address with one @ and a domain, e.g. johndoe@example.com."
    )

    @staticmethod
    def validate(value: str) -> str:
        """
        Validates and normalizes an email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        value = value.strip().lower()
        if not re.fullmatch(r"[^@\s]+@[^@\s]+\.[^@\s]+", value):
            raise ValueError(Email.MESSAGE_CONSTRAINTS)
        return value


class Address(Field):
    MESSAGE_CONSTRAINTS = "Addresses can take any value, and should not be blank."

    @staticmethod
    def validate(value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError(Address.MESSAGE_CONSTRAINTS)
        return value


class StudentId(Field):
    MESSAGE_CONSTRAINTS = (
        "Student IDs should start with 'A', followed by 7 digits and end with a letter, e.g. A1234567X."
    )

    @staticmethod
    def validate(value: str) -> str:
        value = value.strip().upper()
        if not re.fullmatch(r"A\d{7}[A-Z]", value):
            raise ValueError(StudentId.MESSAGE_CONSTRAINTS)
        return value


class ModuleCode(Field):
    MESSAGE_CONSTRAINTS = (
        "Module codes should be 2-3 letters, followed by 4 digits and an optional letter, e.g. CS2103T."
    )

    @staticmethod
    def validate(value: str) -> str:
        value = value.strip().upper()
        if not re.fullmatch(r"[A-Z]{2,3}\d{4}[A-Z]?", value):
            raise ValueError(ModuleCode.MESSAGE_CONSTRAINTS)
        return value


class Tag(Field):
    MESSAGE_CONSTRAINTS = "Tag names should be alphanumeric."

    @staticmethod
    def validate(value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"[A-Za-z0-9]+", value):
            raise ValueError(Tag.MESSAGE_CONSTRAINTS)
        return value


class Remark(Field):
    # empty string means "no remark"

    @staticmethod
    def validate(value: str) -> str:
        return value.strip()

    @property
    def is_empty(self) -> bool:
        return not self.value
