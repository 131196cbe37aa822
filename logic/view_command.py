# logic/view_command.py

from __future__ import annotations

from core.logging_config import get_logger
from core.response import Response
from logic.cli_syntax import PREFIX_STUDENT_ID
from logic.command import Command, resolve_displayed_person
from logic.exceptions import PersonNotFoundError
from models.fields import StudentId
from models.roster import Roster

logger = get_logger("logic")


class ViewCommand(Command):
    """
    Shows the full details of one record, looked up either by displayed index or by student ID.
    """

    COMMAND_WORD = "view"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the full details of a student, identified either by the index number "
        "used in the displayed student list or by their student ID.\n"
        f"Parameters: INDEX (must be a positive integer) or {PREFIX_STUDENT_ID}STUDENT_ID\n"
        f"Example: {COMMAND_WORD} 1\n"
        f"Example: {COMMAND_WORD} {PREFIX_STUDENT_ID}A1234567X"
    )

    MESSAGE_VIEW_PERSON_SUCCESS = "Viewing student: {}"
    MESSAGE_PERSON_NOT_FOUND = "No student found with student ID {}"

    def __init__(self, index: int | None = None, student_id: StudentId | None = None):
        if (index is None) == (student_id is None):
            raise ValueError("ViewCommand needs exactly one of index or student_id.")

        self._index = index
        self._student_id = student_id

    @classmethod
    def by_index(cls, index: int) -> ViewCommand:
        return cls(index=index)

    @classmethod
    def by_student_id(cls, student_id: StudentId) -> ViewCommand:
        return cls(student_id=student_id)

    @property
    def index(self) -> int | None:
        return self._index

    @property
    def student_id(self) -> StudentId | None:
        return self._student_id

    def execute(self, roster: Roster) -> Response:
        """
        Raises:
            InvalidIndexError: If the index is outside the displayed list.
            PersonNotFoundError: If no record holds the student ID.
        """
        if self._student_id is not None:
            find_response = roster.find_person_by_student_id(self._student_id)

            if not find_response.success:
                raise PersonNotFoundError(
                    self.MESSAGE_PERSON_NOT_FOUND.format(self._student_id)
                )

            person = find_response.record

        else:
            person = resolve_displayed_person(roster, self._index)

        logger.debug("viewing %s", person.label)

        return Response.succeed(
            detail=self.MESSAGE_VIEW_PERSON_SUCCESS.format(person.label),
            data={
                "record": person,
                "view": True,
            },
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ViewCommand):
            return NotImplemented
        return self._index == other._index and self._student_id == other._student_id

    def __repr__(self) -> str:
        return f"ViewCommand(index={self._index}, student_id={self._student_id!r})"
