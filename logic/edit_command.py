# logic/edit_command.py

"""
Edits the details of an existing record in the roster.

An edit is described by an `EditPersonDescriptor`: one optional slot per
editable field, where None leaves the field untouched. Most slots replace the
field wholesale. The grade slot replaces the score of an assignment the record
already has, and the attendance slot marks or unmarks a single week.

The replacement record is built and validated in full before the roster is
touched, so a failed edit never leaves a partial write.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TypeVar

import core.formatters as formatters
from core.logging_config import get_logger
from core.response import Response
from logic.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_CONSULTATION,
    PREFIX_EMAIL,
    PREFIX_GRADE,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
    PREFIX_WEEK,
)
from logic.command import Command, resolve_displayed_person
from logic.exceptions import (
    CommandError,
    DuplicateStudentIdError,
    GradeNotFoundError,
    NotEditedError,
    RecordVariantError,
)
from models.attendance import Attendance
from models.consultation import Consultation
from models.fields import Address, Email, ModuleCode, Name, Phone, Remark, StudentId, Tag
from models.grade import Grade
from models.person import Person, build_person
from models.roster import Roster, show_all_persons

logger = get_logger("logic")

T = TypeVar("T")


@dataclass
class EditPersonDescriptor:
    """
    Stores the details to edit a record with. Each slot that is not None replaces the corresponding field.

    None is never a legal field value, so an empty collection or an empty `Remark` is an explicit request to clear
    that field.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    student_id: StudentId | None = None
    module_codes: frozenset[ModuleCode] | None = None
    tags: frozenset[Tag] | None = None
    consultations: tuple[Consultation, ...] | None = None
    grade: Grade | None = None
    attendance: Attendance | None = None
    remark: Remark | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in dataclasses.fields(self))


class EditCommand(Command):
    COMMAND_WORD = "edit"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the student identified "
        "by the index number used in the displayed student list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] "
        f"[{PREFIX_PHONE}PHONE] "
        f"[{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_ADDRESS}ADDRESS] "
        f"[{PREFIX_STUDENT_ID}STUDENT_ID] "
        f"[{PREFIX_MODULE_CODE}MODULE_CODE]... "
        f"[{PREFIX_TAG}TAG]... "
        f"[{PREFIX_CONSULTATION}YYYY-MM-DD HH:MM-HH:MM]... "
        f"[{PREFIX_GRADE}ASSIGNMENT_NAME:SCORE] "
        f"[{PREFIX_WEEK}WEEK_NUMBER:STATUS] "
        f"[{PREFIX_REMARK}REMARK]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 {PREFIX_EMAIL}johndoe@example.com"
    )

    MESSAGE_EDIT_PERSON_SUCCESS = "✓ Updated student: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_STUDENT_ID = (
        "Cannot update: Student ID {} is already assigned to another student."
    )
    MESSAGE_GRADE_NOT_FOUND = (
        "Cannot update grade: Assignment '{}' not found for this student."
    )

    def __init__(self, index: int, descriptor: EditPersonDescriptor):
        """
        Args:
            index (int): 1-based position of the record in the displayed list.
            descriptor (EditPersonDescriptor): The fields to edit. A copy is kept, so later changes by the caller have no effect.
        """
        self._index = index
        self._descriptor = dataclasses.replace(descriptor)

    @property
    def index(self) -> int:
        return self._index

    @property
    def descriptor(self) -> EditPersonDescriptor:
        return dataclasses.replace(self._descriptor)

    def execute(self, roster: Roster) -> Response:
        """
        Applies the descriptor to the record at `index` and replaces it in the roster.

        Returns:
            Response: A successful response with the following contract:
                - detail (str): The confirmation line followed by one bullet per edited field.
                - data (dict):
                    - "record" (Person): The replacement record.

        Raises:
            InvalidIndexError: If `index` is outside the displayed list.
            NotEditedError: If the descriptor has no fields set.
            GradeNotFoundError: If the grade slot names an assignment the record does not have.
            RecordVariantError: If the edit would give a record both a student ID and a phone or address.
            DuplicateStudentIdError: If the new student ID already belongs to another record.

        Notes:
            - On success the display filter is reset to show every record.
            - On failure the roster is unchanged.
        """
        person_to_edit = resolve_displayed_person(roster, self._index)

        if not self._descriptor.is_any_field_edited():
            raise NotEditedError(self.MESSAGE_NOT_EDITED)

        edited_person = create_edited_person(person_to_edit, self._descriptor)

        original_id = person_to_edit.student_id
        edited_id = edited_person.student_id
        if original_id is not None and edited_id is not None and original_id != edited_id:
            if roster.find_person_by_student_id(edited_id).success:
                raise DuplicateStudentIdError(
                    self.MESSAGE_DUPLICATE_STUDENT_ID.format(edited_id), str(edited_id)
                )

        set_response = roster.set_person(person_to_edit, edited_person)

        if not set_response.success:
            raise CommandError(f"Failed to update student: {set_response.detail}")

        roster.update_filter(show_all_persons)

        logger.info("edited %s (index %d)", edited_person.label, self._index)

        message = self.MESSAGE_EDIT_PERSON_SUCCESS.format(edited_person.label)
        edited_fields = build_edited_fields_message(edited_person, self._descriptor)

        return Response.succeed(
            detail=f"{message}\n{edited_fields}",
            data={
                "record": edited_person,
            },
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditCommand):
            return NotImplemented
        return self._index == other._index and self._descriptor == other._descriptor

    def __repr__(self) -> str:
        return f"EditCommand(index={self._index}, descriptor={self._descriptor!r})"


def _updated(value: T | None, existing: T) -> T:
    return existing if value is None else value


def create_edited_person(person: Person, descriptor: EditPersonDescriptor) -> Person:
    """
    Builds the replacement for `person` with the descriptor's slots applied.

    Raises:
        GradeNotFoundError: If the grade slot names an assignment `person` does not have.
        RecordVariantError: If the merged fields fit neither record case.
    """
    grades = person.grades
    if descriptor.grade is not None:
        try:
            grades = grades.update_grade(descriptor.grade)
        except KeyError:
            assignment_name = descriptor.grade.assignment_name
            raise GradeNotFoundError(
                EditCommand.MESSAGE_GRADE_NOT_FOUND.format(assignment_name),
                assignment_name,
            )

    attendance = person.attendance
    if descriptor.attendance is not None:
        attendance = attendance.apply(descriptor.attendance)

    try:
        return build_person(
            id=person.id,
            name=_updated(descriptor.name, person.name),
            email=_updated(descriptor.email, person.email),
            phone=_updated(descriptor.phone, person.phone),
            address=_updated(descriptor.address, person.address),
            student_id=_updated(descriptor.student_id, person.student_id),
            module_codes=_updated(descriptor.module_codes, person.module_codes),
            tags=_updated(descriptor.tags, person.tags),
            grades=grades,
            attendance=attendance,
            consultations=_updated(descriptor.consultations, person.consultations),
            remark=_updated(descriptor.remark, person.remark),
        )

    except ValueError as e:
        raise RecordVariantError(f"Cannot update: {e}")


def build_edited_fields_message(edited: Person, descriptor: EditPersonDescriptor) -> str:
    """
    Lists the edited fields and their new values, in a fixed field order.
    """
    message = "\nEdited fields:"

    if descriptor.name is not None:
        message += formatters.format_bullet("Name", edited.name)
    if descriptor.phone is not None:
        message += formatters.format_bullet("Phone", edited.phone)
    if descriptor.email is not None:
        message += formatters.format_bullet("Email", edited.email)
    if descriptor.address is not None:
        message += formatters.format_bullet("Address", edited.address)
    if descriptor.student_id is not None:
        message += formatters.format_bullet("Student ID", edited.student_id)
    if descriptor.module_codes is not None:
        message += formatters.format_bullet(
            "Module Codes", formatters.format_sorted_set(edited.module_codes)
        )
    if descriptor.tags is not None:
        message += formatters.format_bullet("Tags", formatters.format_sorted_set(edited.tags))
    if descriptor.consultations is not None:
        consultations = (
            ", ".join(str(c) for c in edited.consultations) if edited.consultations else "None"
        )
        message += formatters.format_bullet("Consultations", consultations)
    if descriptor.grade is not None:
        grade = descriptor.grade
        message += formatters.format_bullet(
            "Grade updated", f"{grade.assignment_name} → {formatters.format_score(grade.score)}"
        )
    if descriptor.attendance is not None:
        attendance = descriptor.attendance
        if attendance.is_unmark:
            message += formatters.format_bullet("Attendance unmarked", f"Week {attendance.week}")
        else:
            message += formatters.format_bullet(
                "Attendance", f"Week {attendance.week} → {attendance.status}"
            )
    if descriptor.remark is not None:
        remark = "None" if edited.remark.is_empty else edited.remark
        message += formatters.format_bullet("Remark", remark)

    return message
