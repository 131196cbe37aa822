# logic/add_parser.py

from __future__ import annotations

import logic.parser_utils as parser_utils
from core.utils import generate_uuid
from logic.add_command import AddCommand
from logic.cli_syntax import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GRADE,
    PREFIX_MODULE_CODE,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_STUDENT_ID,
    PREFIX_TAG,
)
from logic.exceptions import ParseError
from logic.tokenizer import tokenize
from models.person import Contact, Student

SINGLE_VALUED_PREFIXES = (
    PREFIX_NAME,
    PREFIX_EMAIL,
    PREFIX_PHONE,
    PREFIX_ADDRESS,
    PREFIX_STUDENT_ID,
)


def parse_add_command(args: str) -> AddCommand:
    """
    Parses the arguments of an `add` command into a new `Student` or `Contact`.

    Raises:
        ParseError:
            - If there is a preamble, the name or email is missing, or the record shape is neither
              "student ID only" nor "phone and address" (message carries the add usage text).
            - If a single-valued marker is repeated, or a field value fails validation.
    """
    arg_multimap = tokenize(
        args, *SINGLE_VALUED_PREFIXES, PREFIX_MODULE_CODE, PREFIX_TAG, PREFIX_GRADE
    )
    usage_error = ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(AddCommand.MESSAGE_USAGE))

    has_student_id = arg_multimap.is_present(PREFIX_STUDENT_ID)
    has_phone = arg_multimap.is_present(PREFIX_PHONE)
    has_address = arg_multimap.is_present(PREFIX_ADDRESS)

    is_student_shape = has_student_id and not (has_phone or has_address)
    is_contact_shape = has_phone and has_address and not has_student_id

    if (
        arg_multimap.preamble
        or not arg_multimap.is_present(PREFIX_NAME)
        or not arg_multimap.is_present(PREFIX_EMAIL)
        or not (is_student_shape or is_contact_shape)
    ):
        raise usage_error

    arg_multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    shared = {
        "id": generate_uuid(),
        "name": parser_utils.parse_name(arg_multimap.get_value(PREFIX_NAME)),
        "email": parser_utils.parse_email(arg_multimap.get_value(PREFIX_EMAIL)),
        "module_codes": parser_utils.parse_module_codes(
            arg_multimap.get_all_values(PREFIX_MODULE_CODE)
        ),
        "tags": parser_utils.parse_tags(arg_multimap.get_all_values(PREFIX_TAG)),
        "grades": parser_utils.parse_grades(arg_multimap.get_all_values(PREFIX_GRADE)),
    }

    if is_student_shape:
        person = Student(
            student_id=parser_utils.parse_student_id(
                arg_multimap.get_value(PREFIX_STUDENT_ID)
            ),
            **shared,
        )
    else:
        person = Contact(
            phone=parser_utils.parse_phone(arg_multimap.get_value(PREFIX_PHONE)),
            address=parser_utils.parse_address(arg_multimap.get_value(PREFIX_ADDRESS)),
            **shared,
        )

    return AddCommand(person)
