# tests/test_edit_command.py

import dataclasses

import pytest

from core.response import ErrorCode
from logic.edit_command import EditCommand, EditPersonDescriptor
from logic.exceptions import (
    DuplicateStudentIdError,
    GradeNotFoundError,
    InvalidIndexError,
    NotEditedError,
    RecordVariantError,
)
from models.attendance import Attendance, AttendanceStatus
from models.fields import Address, ModuleCode, Name, Phone, Remark, StudentId, Tag
from models.grade import Grade
from models.person import Contact, Student

ALL_FIELDS_DESCRIPTOR = EditPersonDescriptor(
    name=Name("Amy Tan"),
    student_id=StudentId("A0000001A"),
    module_codes=frozenset({ModuleCode("CS2101")}),
    tags=frozenset({Tag("friend")}),
    consultations=(),
    grade=Grade("Quiz 1", 95),
    attendance=Attendance(1, AttendanceStatus.PRESENT),
    remark=Remark("Top of the class"),
)


def field_values(person):
    return {
        f.name: getattr(person, f.name)
        for f in dataclasses.fields(person)
    }


# === happy path ===


def test_edit_name_of_contact(two_person_roster, sample_contact):
    command = EditCommand(2, EditPersonDescriptor(name=Name("Amy Tan")))

    response = command.execute(two_person_roster)

    edited = two_person_roster.persons[1]
    assert response.success
    assert isinstance(edited, Contact)
    assert edited.name == Name("Amy Tan")
    assert edited.id == sample_contact.id
    assert "• Name: Amy Tan" in response.detail
    assert response.detail.count("•") == 1


def test_success_message_names_student_id(sample_roster):
    response = EditCommand(1, EditPersonDescriptor(tags=frozenset())).execute(sample_roster)

    assert response.detail.startswith("✓ Updated student: A1234567X\n")
    assert "• Tags: []" in response.detail


def test_remark_only_edit_changes_only_remark(sample_roster, sample_student):
    before = field_values(sample_student)

    EditCommand(1, EditPersonDescriptor(remark=Remark("Moved to tutorial T02"))).execute(sample_roster)

    after = field_values(sample_roster.persons[0])
    assert after.pop("remark") == Remark("Moved to tutorial T02")
    before.pop("remark")
    assert after == before


def test_summary_lists_fields_in_fixed_order(sample_roster):
    response = EditCommand(1, ALL_FIELDS_DESCRIPTOR).execute(sample_roster)

    labels = [
        line.split(":")[0].strip("• ").strip()
        for line in response.detail.splitlines()
        if line.strip().startswith("•")
    ]
    assert labels == [
        "Name",
        "Student ID",
        "Module Codes",
        "Tags",
        "Consultations",
        "Grade updated",
        "Attendance",
        "Remark",
    ]
    assert "• Consultations: None" in response.detail
    assert "• Grade updated: Quiz 1 → 95" in response.detail
    assert "• Attendance: Week 1 → Present" in response.detail


def test_absent_fields_are_not_reported(sample_roster):
    response = EditCommand(1, EditPersonDescriptor(remark=Remark("Quiet"))).execute(sample_roster)

    assert "Name:" not in response.detail
    assert "Tags:" not in response.detail
    assert "• Remark: Quiet" in response.detail


def test_grade_update_replaces_existing_score(sample_roster):
    EditCommand(1, EditPersonDescriptor(grade=Grade("Quiz 1", 55))).execute(sample_roster)

    grades = sample_roster.persons[0].grades
    assert grades.get("Quiz 1").score == 55
    assert len(grades) == 1


def test_attendance_mark_then_unmark(sample_roster):
    EditCommand(1, EditPersonDescriptor(attendance=Attendance(2, AttendanceStatus.ABSENT))).execute(sample_roster)
    assert sample_roster.persons[0].attendance.attendance_in(2) is AttendanceStatus.ABSENT

    response = EditCommand(
        1, EditPersonDescriptor(attendance=Attendance(2, AttendanceStatus.UNMARK))
    ).execute(sample_roster)

    assert not sample_roster.persons[0].attendance.is_marked(2)
    assert "• Attendance unmarked: Week 2" in response.detail


def test_unmarking_unmarked_week_succeeds(sample_roster, sample_student):
    response = EditCommand(
        1, EditPersonDescriptor(attendance=Attendance(7, AttendanceStatus.UNMARK))
    ).execute(sample_roster)

    assert response.success
    assert "unmarked" in response.detail
    assert sample_roster.persons[0].attendance == sample_student.attendance


def test_student_id_may_be_set_to_its_current_value(sample_roster):
    response = EditCommand(
        1, EditPersonDescriptor(student_id=StudentId("A1234567X"))
    ).execute(sample_roster)

    assert response.success


def test_student_id_may_change_to_unused_value(sample_roster):
    EditCommand(1, EditPersonDescriptor(student_id=StudentId("A0000001A"))).execute(sample_roster)

    assert sample_roster.persons[0].student_id == StudentId("A0000001A")


def test_edit_resets_filter(sample_roster, second_student):
    sample_roster.update_filter(lambda person: person.student_id == second_student.student_id)

    EditCommand(1, EditPersonDescriptor(name=Name("Bernice Yu Lin"))).execute(sample_roster)

    assert len(sample_roster.filtered_persons) == 3
    assert sample_roster.persons[1].name == Name("Bernice Yu Lin")


def test_index_refers_to_filtered_list(sample_roster, sample_contact):
    sample_roster.update_filter(lambda person: isinstance(person, Contact))

    EditCommand(1, EditPersonDescriptor(phone=Phone("88887777"))).execute(sample_roster)

    assert sample_roster.persons[2].phone == Phone("88887777")


# === failures ===


def test_index_out_of_range(sample_roster):
    with pytest.raises(InvalidIndexError) as e:
        EditCommand(4, EditPersonDescriptor(name=Name("Amy Tan"))).execute(sample_roster)

    assert e.value.error is ErrorCode.INVALID_INDEX


def test_no_fields_is_rejected_without_mutation(sample_roster):
    before = sample_roster.persons

    with pytest.raises(NotEditedError) as e:
        EditCommand(1, EditPersonDescriptor()).execute(sample_roster)

    assert e.value.message == "At least one field to edit must be provided."
    assert sample_roster.persons == before
    assert not sample_roster.has_unsaved_changes


def test_missing_grade_aborts_whole_edit(sample_roster):
    before = sample_roster.persons
    descriptor = EditPersonDescriptor(name=Name("Amy Tan"), grade=Grade("Final Exam", 70))

    with pytest.raises(GradeNotFoundError) as e:
        EditCommand(1, descriptor).execute(sample_roster)

    assert e.value.assignment_name == "Final Exam"
    assert "'Final Exam'" in e.value.message
    assert sample_roster.persons == before


def test_duplicate_student_id_is_rejected(sample_roster):
    before = sample_roster.persons

    with pytest.raises(DuplicateStudentIdError) as e:
        EditCommand(1, EditPersonDescriptor(student_id=StudentId("A7654321B"))).execute(sample_roster)

    assert e.value.student_id == "A7654321B"
    assert "A7654321B" in e.value.message
    assert sample_roster.persons == before


def test_student_cannot_gain_contact_fields(sample_roster):
    with pytest.raises(RecordVariantError):
        EditCommand(1, EditPersonDescriptor(address=Address("1 Kent Ridge"))).execute(sample_roster)

    assert isinstance(sample_roster.persons[0], Student)


def test_contact_cannot_gain_student_id(sample_roster):
    with pytest.raises(RecordVariantError):
        EditCommand(3, EditPersonDescriptor(student_id=StudentId("A0000001A"))).execute(sample_roster)
