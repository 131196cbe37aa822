# logic/command.py

from __future__ import annotations

from abc import ABC, abstractmethod

from core.response import Response
from logic.cli_syntax import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from logic.exceptions import InvalidIndexError
from models.person import Person
from models.roster import Roster


class Command(ABC):
    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, roster: Roster) -> Response:
        """
        Runs the command against `roster`.

        Returns:
            Response: A successful response whose `detail` is the message shown to the user.

        Raises:
            CommandError: If the command cannot be carried out. The roster is left unchanged.
        """


def resolve_displayed_person(roster: Roster, one_based_index: int) -> Person:
    """
    Looks up a record by its 1-based position in the currently displayed list.

    Raises:
        InvalidIndexError: If the index is past the end of the displayed list.
    """
    displayed = roster.filtered_persons

    if not 1 <= one_based_index <= len(displayed):
        raise InvalidIndexError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)

    return displayed[one_based_index - 1]
