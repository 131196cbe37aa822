# logic/view_parser.py

from __future__ import annotations

import logic.parser_utils as parser_utils
from logic.cli_syntax import MESSAGE_INVALID_COMMAND_FORMAT, PREFIX_STUDENT_ID
from logic.exceptions import ParseError
from logic.tokenizer import tokenize
from logic.view_command import ViewCommand


def parse_view_command(args: str) -> ViewCommand:
    """
    Parses the arguments of a `view` command.

    Args:
        args (str): Everything after the command word, e.g. " 2" or " id/A1234567X".

    Returns:
        ViewCommand: A by-student-ID lookup if the `id/` marker is present, otherwise a by-index lookup.

    Raises:
        ParseError: If the student ID or the index is malformed. The message always carries the view usage text.
    """
    arg_multimap = tokenize(args, PREFIX_STUDENT_ID)
    raw_student_id = arg_multimap.get_value(PREFIX_STUDENT_ID)

    try:
        if raw_student_id is not None:
            return ViewCommand.by_student_id(parser_utils.parse_student_id(raw_student_id))

        return ViewCommand.by_index(parser_utils.parse_index(arg_multimap.preamble))

    except ParseError as e:
        raise ParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(ViewCommand.MESSAGE_USAGE)
        ) from e
