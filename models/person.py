# models/person.py

"""
Represents a person tracked in the roster.

A record is one of two cases sharing the fields in `Person`:
- `Contact`: reached by phone and address, never holds a student ID
- `Student`: identified by a student ID, never holds a phone or address

Records are immutable. Edits build a replacement record that keeps the
original's internal `id`, so the roster can swap it in at the same position.

Both cases expose `phone`, `address` and `student_id`; the case that does not
carry a field reports it as None. `Person` itself is never instantiated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from core.utils import generate_uuid
from models.attendance import AttendanceRecord
from models.consultation import Consultation
from models.fields import Address, Email, ModuleCode, Name, Phone, Remark, StudentId, Tag
from models.grade import GradeRecord


@dataclass(frozen=True, kw_only=True)
class Person:
    name: Name
    email: Email
    module_codes: frozenset[ModuleCode] = frozenset()
    tags: frozenset[Tag] = frozenset()
    grades: GradeRecord = field(default_factory=GradeRecord)
    attendance: AttendanceRecord = field(default_factory=AttendanceRecord)
    consultations: tuple[Consultation, ...] = ()
    remark: Remark = field(default_factory=lambda: Remark(""))
    id: str = field(default_factory=generate_uuid)

    def __post_init__(self) -> None:
        object.__setattr__(self, "module_codes", frozenset(self.module_codes))
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "consultations", tuple(sorted(self.consultations)))

    @property
    def label(self) -> str:
        student_id = self.student_id
        return str(student_id) if student_id is not None else str(self.name)

    def is_same_person(self, other: Person) -> bool:
        return self.id == other.id


@dataclass(frozen=True, kw_only=True)
class Contact(Person):
    phone: Phone
    address: Address

    @property
    def student_id(self) -> StudentId | None:
        return None

    def __str__(self) -> str:
        return f"CONTACT: {self.name} - (Phone: {self.phone})"


@dataclass(frozen=True, kw_only=True)
class Student(Person):
    student_id: StudentId

    @property
    def phone(self) -> Phone | None:
        return None

    @property
    def address(self) -> Address | None:
        return None

    def __str__(self) -> str:
        return f"STUDENT: {self.name} - (ID: {self.student_id})"


def build_person(
    *,
    id: str,
    name: Name,
    email: Email,
    phone: Phone | None,
    address: Address | None,
    student_id: StudentId | None,
    module_codes: Iterable[ModuleCode],
    tags: Iterable[Tag],
    grades: GradeRecord,
    attendance: AttendanceRecord,
    consultations: Iterable[Consultation],
    remark: Remark,
) -> Person:
    """
    Constructs the record case that matches the populated fields.

    Returns:
        Person: A `Student` if a student ID is given without phone or address, otherwise a `Contact`.

    Raises:
        ValueError:
            - If a student ID is combined with a phone or address.
            - If neither a student ID nor both phone and address are given.
    """
    shared = {
        "id": id,
        "name": name,
        "email": email,
        "module_codes": frozenset(module_codes),
        "tags": frozenset(tags),
        "grades": grades,
        "attendance": attendance,
        "consultations": tuple(consultations),
        "remark": remark,
    }

    has_contact_fields = phone is not None or address is not None

    if student_id is not None and has_contact_fields:
        raise ValueError(
            "A record cannot hold both a student ID and a phone number or address."
        )

    if student_id is not None:
        return Student(student_id=student_id, **shared)

    if phone is None or address is None:
        raise ValueError(
            "A record needs either a student ID, or both a phone number and an address."
        )

    return Contact(phone=phone, address=address, **shared)
