# logic/parser_utils.py

"""
Field-level parsers shared by the command parsers.

Each function turns raw marker text into a validated value object. Validation
failures from the model layer (`ValueError`) are re-raised as `ParseError`
with the field's constraint message, so the user sees what a valid value
looks like.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeVar

from logic.exceptions import ParseError
from models.attendance import Attendance
from models.consultation import Consultation
from models.fields import Address, Email, ModuleCode, Name, Phone, Remark, StudentId, Tag
from models.grade import Grade, GradeRecord

T = TypeVar("T")

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

UNSIGNED_INTEGER = re.compile(r"[0-9]+")


def parse_index(one_based_index: str) -> int:
    """
    Parses a 1-based display index.

    Returns:
        int: The index exactly as typed (still 1-based).

    Raises:
        ParseError: If the text is not a positive integer.
    """
    trimmed = one_based_index.strip()
    if not UNSIGNED_INTEGER.fullmatch(trimmed) or int(trimmed) <= 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def _parse_field(factory: Callable[[str], T], raw: str) -> T:
    try:
        return factory(raw)
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_name(raw: str) -> Name:
    return _parse_field(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _parse_field(Phone, raw)


def parse_email(raw: str) -> Email:
    return _parse_field(Email, raw)


def parse_address(raw: str) -> Address:
    return _parse_field(Address, raw)


def parse_student_id(raw: str) -> StudentId:
    return _parse_field(StudentId, raw)


def parse_remark(raw: str) -> Remark:
    return _parse_field(Remark, raw)


def parse_grade(raw: str) -> Grade:
    return _parse_field(Grade.parse, raw)


def parse_attendance(raw: str) -> Attendance:
    return _parse_field(Attendance.parse, raw)


def parse_grades(raw_values: Iterable[str]) -> GradeRecord:
    return GradeRecord(parse_grade(raw) for raw in raw_values)


def parse_module_codes(raw_values: Iterable[str]) -> frozenset[ModuleCode]:
    return frozenset(_parse_field(ModuleCode, raw) for raw in raw_values)


def parse_tags(raw_values: Iterable[str]) -> frozenset[Tag]:
    return frozenset(_parse_field(Tag, raw) for raw in raw_values)


def parse_consultations(raw_values: Iterable[str]) -> tuple[Consultation, ...]:
    return tuple(sorted(_parse_field(Consultation.parse, raw) for raw in raw_values))


def is_clear_request(raw_values: list[str]) -> bool:
    """
    True when a multi-valued marker was given exactly once with no value (e.g. a bare "t/"), meaning "clear it".
    """
    return len(raw_values) == 1 and raw_values[0] == ""
