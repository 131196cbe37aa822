# logic/add_command.py

from __future__ import annotations

from core.logging_config import get_logger
from core.response import ErrorCode, Response
from logic.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GRADE,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
)
from logic.command import Command
from logic.exceptions import CommandError, DuplicateStudentIdError
from models.person import Person
from models.roster import Roster, show_all_persons

logger = get_logger("logic")


class AddCommand(Command):
    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a student identified by student ID, or a contact reached by phone and address.\n"
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_EMAIL}EMAIL "
        f"({PREFIX_STUDENT_ID}STUDENT_ID | {PREFIX_PHONE}PHONE {PREFIX_ADDRESS}ADDRESS) "
        f"[{PREFIX_MODULE_CODE}MODULE_CODE]... [{PREFIX_TAG}TAG]... [{PREFIX_GRADE}ASSIGNMENT_NAME:SCORE]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_EMAIL}johnd@example.com "
        f"{PREFIX_STUDENT_ID}A1234567X {PREFIX_MODULE_CODE}CS2103T"
    )

    MESSAGE_SUCCESS = "✓ New student added: {}"

    def __init__(self, person: Person):
        self._person = person

    @property
    def person(self) -> Person:
        return self._person

    def execute(self, roster: Roster) -> Response:
        """
        Raises:
            DuplicateStudentIdError: If the student ID is already taken.
            CommandError: If the roster rejects the record for any other reason (e.g. a duplicate email).
        """
        add_response = roster.add_person(self._person)

        if not add_response.success:
            if add_response.error is ErrorCode.DUPLICATE_STUDENT_ID:
                raise DuplicateStudentIdError(
                    add_response.detail, str(self._person.student_id)
                )
            raise CommandError(add_response.detail)

        roster.update_filter(show_all_persons)

        logger.info("added %s", self._person.label)

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS.format(self._person.label),
            data={
                "record": self._person,
            },
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddCommand):
            return NotImplemented
        return self._person == other._person
