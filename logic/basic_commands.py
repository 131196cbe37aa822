# logic/basic_commands.py

"""
Commands that take no arguments: list, help and exit.
"""

from __future__ import annotations

from core.response import Response
from logic.command import Command
from models.roster import Roster, show_all_persons


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all students."
    MESSAGE_SUCCESS = "Listed all students ({} in total)."

    def execute(self, roster: Roster) -> Response:
        roster.update_filter(show_all_persons)
        persons = roster.filtered_persons

        return Response.succeed(
            detail=self.MESSAGE_SUCCESS.format(len(persons)),
            data={
                "records": persons,
            },
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCommand)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Shows the usage of every command."

    def __init__(self, usages: list[str]):
        self._usages = list(usages)

    def execute(self, roster: Roster) -> Response:
        return Response.succeed(detail="\n\n".join(self._usages))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HelpCommand):
            return NotImplemented
        return self._usages == other._usages


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."

    def execute(self, roster: Roster) -> Response:
        return Response.succeed(
            detail="Exiting TeachMate as requested ...",
            data={
                "exit": True,
            },
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExitCommand)
