# tests/test_view_command.py

import pytest

from core.response import ErrorCode
from logic.exceptions import InvalidIndexError, PersonNotFoundError
from logic.view_command import ViewCommand
from models.fields import StudentId


def test_view_by_index(sample_roster, second_student):
    response = ViewCommand.by_index(2).execute(sample_roster)

    assert response.success
    assert response.detail == "Viewing student: A7654321B"
    assert response.data["record"] == second_student
    assert response.data["view"] is True


def test_view_contact_is_labelled_by_name(sample_roster):
    response = ViewCommand.by_index(3).execute(sample_roster)

    assert response.detail == "Viewing student: Charlotte Oliveiro"


def test_view_by_student_id_ignores_filter(sample_roster, sample_student):
    sample_roster.update_filter(lambda person: False)

    response = ViewCommand.by_student_id(StudentId("A1234567X")).execute(sample_roster)

    assert response.data["record"] == sample_student


def test_view_does_not_change_roster(sample_roster):
    before = sample_roster.persons

    ViewCommand.by_index(1).execute(sample_roster)

    assert sample_roster.persons == before
    assert not sample_roster.has_unsaved_changes


def test_view_unknown_student_id(sample_roster):
    with pytest.raises(PersonNotFoundError) as e:
        ViewCommand.by_student_id(StudentId("A0000000Z")).execute(sample_roster)

    assert e.value.message == "No student found with student ID A0000000Z"
    assert e.value.error is ErrorCode.NOT_FOUND


def test_view_index_out_of_range(sample_roster):
    sample_roster.update_filter(lambda person: person.student_id is None)

    with pytest.raises(InvalidIndexError):
        ViewCommand.by_index(2).execute(sample_roster)
