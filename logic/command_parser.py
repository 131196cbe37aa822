# logic/command_parser.py

"""
Dispatches raw user input to the parser for its command word.

The first whitespace-separated word selects the command; the rest of the line
is handed to that command's parser untouched (leading space included), so
each parser sees exactly the arguments it owns.
"""

from __future__ import annotations

import re
from typing import Callable

from logic.add_command import AddCommand
from logic.add_parser import parse_add_command
from logic.basic_commands import ExitCommand, HelpCommand, ListCommand
from logic.cli_syntax import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from logic.command import Command
from logic.edit_command import EditCommand
from logic.edit_parser import parse_edit_command
from logic.exceptions import ParseError
from logic.view_command import ViewCommand
from logic.view_parser import parse_view_command

COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

USAGES = [
    AddCommand.MESSAGE_USAGE,
    EditCommand.MESSAGE_USAGE,
    ViewCommand.MESSAGE_USAGE,
    ListCommand.MESSAGE_USAGE,
    HelpCommand.MESSAGE_USAGE,
    ExitCommand.MESSAGE_USAGE,
]

PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add_command,
    EditCommand.COMMAND_WORD: parse_edit_command,
    ViewCommand.COMMAND_WORD: parse_view_command,
    ListCommand.COMMAND_WORD: lambda _: ListCommand(),
    HelpCommand.COMMAND_WORD: lambda _: HelpCommand(USAGES),
    ExitCommand.COMMAND_WORD: lambda _: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """
    Parses a full line of user input into a `Command`.

    Raises:
        ParseError: If the input is blank, the command word is unknown, or the arguments are malformed.
    """
    match = COMMAND_FORMAT.fullmatch(user_input.strip())

    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

    command_word = match.group("command_word").lower()
    parser = PARSERS.get(command_word)

    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)

    return parser(match.group("arguments"))
