# logic/edit_parser.py

from __future__ import annotations

import logic.parser_utils as parser_utils
from logic.cli_syntax import (
    MESSAGE_INVALID_COMMAND_FORMAT,
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
from logic.edit_command import EditCommand, EditPersonDescriptor
from logic.exceptions import ParseError
from logic.tokenizer import ArgumentMultimap, tokenize

SINGLE_VALUED_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_STUDENT_ID,
    PREFIX_GRADE,
    PREFIX_WEEK,
    PREFIX_REMARK,
)
MULTI_VALUED_PREFIXES = (PREFIX_MODULE_CODE, PREFIX_TAG, PREFIX_CONSULTATION)


def parse_edit_command(args: str) -> EditCommand:
    """
    Parses the arguments of an `edit` command into an index and an `EditPersonDescriptor`.

    Args:
        args (str): Everything after the command word, e.g. " 2 n/Amy Tan t/tutee".

    Returns:
        EditCommand: The command, possibly with an empty descriptor (rejected later, at execution).

    Raises:
        ParseError:
            - If the index is missing or not a positive integer (message carries the edit usage text).
            - If a single-valued marker is repeated.
            - If any field value fails validation (message carries the field's constraints).
    """
    arg_multimap = tokenize(args, *SINGLE_VALUED_PREFIXES, *MULTI_VALUED_PREFIXES)

    try:
        index = parser_utils.parse_index(arg_multimap.preamble)
    except ParseError as e:
        raise ParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(EditCommand.MESSAGE_USAGE)
        ) from e

    arg_multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    descriptor = EditPersonDescriptor()

    if (raw := arg_multimap.get_value(PREFIX_NAME)) is not None:
        descriptor.name = parser_utils.parse_name(raw)
    if (raw := arg_multimap.get_value(PREFIX_PHONE)) is not None:
        descriptor.phone = parser_utils.parse_phone(raw)
    if (raw := arg_multimap.get_value(PREFIX_EMAIL)) is not None:
        descriptor.email = parser_utils.parse_email(raw)
    if (raw := arg_multimap.get_value(PREFIX_ADDRESS)) is not None:
        descriptor.address = parser_utils.parse_address(raw)
    if (raw := arg_multimap.get_value(PREFIX_STUDENT_ID)) is not None:
        descriptor.student_id = parser_utils.parse_student_id(raw)

    descriptor.module_codes = _parse_collection_for_edit(
        arg_multimap, PREFIX_MODULE_CODE, parser_utils.parse_module_codes
    )
    descriptor.tags = _parse_collection_for_edit(
        arg_multimap, PREFIX_TAG, parser_utils.parse_tags
    )
    descriptor.consultations = _parse_collection_for_edit(
        arg_multimap, PREFIX_CONSULTATION, parser_utils.parse_consultations
    )

    if (raw := arg_multimap.get_value(PREFIX_GRADE)) is not None:
        descriptor.grade = parser_utils.parse_grade(raw)
    if (raw := arg_multimap.get_value(PREFIX_WEEK)) is not None:
        descriptor.attendance = parser_utils.parse_attendance(raw)
    if (raw := arg_multimap.get_value(PREFIX_REMARK)) is not None:
        descriptor.remark = parser_utils.parse_remark(raw)

    return EditCommand(index, descriptor)


def _parse_collection_for_edit(arg_multimap: ArgumentMultimap, prefix: str, parse_fn):
    """
    Parses every value given for a multi-valued marker.

    Returns None if the marker is absent, and an empty collection if it was given once with no value.
    """
    raw_values = arg_multimap.get_all_values(prefix)

    if not raw_values:
        return None

    if parser_utils.is_clear_request(raw_values):
        return parse_fn([])

    return parse_fn(raw_values)
