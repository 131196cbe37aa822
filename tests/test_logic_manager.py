# tests/test_logic_manager.py

import pytest

from core.response import ErrorCode
from logic.cli_syntax import MESSAGE_UNKNOWN_COMMAND
from logic.logic_manager import LogicManager
from models.fields import Name
from models.roster import Roster


def test_edit_second_record_reports_only_name(two_person_roster):
    logic = LogicManager(two_person_roster)

    response = logic.execute("edit 2 n/Amy Tan")

    assert response.success
    assert response.status_code == 200
    assert response.detail == (
        "✓ Updated student: Amy Tan\n"
        "\nEdited fields:"
        "\n  • Name: Amy Tan"
    )
    assert two_person_roster.persons[1].name == Name("Amy Tan")


def test_command_word_is_case_insensitive(logic):
    assert logic.execute("LIST").success


def test_view_unknown_student_id(logic):
    response = logic.execute("view id/A0000000Z")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.detail == "No student found with student ID A0000000Z"


def test_edit_without_fields(logic):
    response = logic.execute("edit 1")

    assert response.error is ErrorCode.NOT_EDITED
    assert response.status_code == 400


def test_edit_index_out_of_range(logic):
    response = logic.execute("edit 9 n/Amy Tan")

    assert response.error is ErrorCode.INVALID_INDEX
    assert response.detail == "The student index provided is invalid"


def test_edit_missing_grade(logic):
    response = logic.execute("edit 1 g/Midterm:50")

    assert response.error is ErrorCode.NOT_FOUND
    assert response.detail == "Cannot update grade: Assignment 'Midterm' not found for this student."


def test_edit_duplicate_student_id(logic):
    response = logic.execute("edit 1 id/A7654321B")

    assert response.error is ErrorCode.DUPLICATE_STUDENT_ID


@pytest.mark.parametrize("user_input", ["", "   "])
def test_blank_input(logic, user_input):
    response = logic.execute(user_input)

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


def test_unknown_command(logic):
    response = logic.execute("delete 1")

    assert response.detail == MESSAGE_UNKNOWN_COMMAND
    assert response.error is ErrorCode.INVALID_INPUT


def test_list_resets_filter(logic):
    logic.roster.update_filter(lambda person: False)

    response = logic.execute("list")

    assert response.detail == "Listed all students (3 in total)."
    assert len(response.data["records"]) == 3


def test_help_lists_every_command(logic):
    detail = logic.execute("help").detail

    for word in ("add:", "edit:", "view:", "list:", "help:", "exit:"):
        assert word in detail


def test_exit_flags_response(logic):
    assert logic.execute("exit").data == {"exit": True}


def test_unexpected_error_is_reported(logic, monkeypatch):
    def explode(roster):
        raise RuntimeError("boom")

    monkeypatch.setattr("logic.basic_commands.ListCommand.execute", lambda self, roster: explode(roster))

    response = logic.execute("list")

    assert response.error is ErrorCode.INTERNAL_ERROR
    assert "boom" in response.detail
    assert "RuntimeError" in response.trace


@pytest.mark.parametrize("user_input", ["edit ² n/Amy Tan", "view ¹"])
def test_non_ascii_digit_index_is_a_format_error(logic, user_input):
    response = logic.execute(user_input)

    assert response.error is ErrorCode.INVALID_INPUT
    assert response.detail.startswith("Invalid command format!")


def test_grade_added_with_record_can_be_edited():
    logic = LogicManager(Roster())

    assert logic.execute("add n/Amy Tan e/amy@example.com id/A1234567X g/Quiz 1:80").success

    response = logic.execute("edit 1 g/Quiz 1:90")

    assert response.success
    assert "• Grade updated: Quiz 1 → 90" in response.detail
    assert logic.roster.persons[0].grades.get("Quiz 1").score == 90


def test_edit_does_not_check_email_uniqueness(logic):
    response = logic.execute("edit 2 e/alexyeoh@example.com")

    assert response.success
    assert logic.roster.persons[1].email == logic.roster.persons[0].email
