# logic/exceptions.py

"""
Exceptions raised while parsing and executing commands.

Every exception carries an `ErrorCode` so that `LogicManager` can convert it
into a failed `Response` without inspecting its type. None of them is fatal:
each aborts only the command that raised it.
"""

from core.response import ErrorCode


class TeachMateError(Exception):
    error: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(TeachMateError):
    error = ErrorCode.INVALID_INPUT


# === command errors ===


class CommandError(TeachMateError):
    error = ErrorCode.VALIDATION_FAILED


class InvalidIndexError(CommandError):
    error = ErrorCode.INVALID_INDEX


class NotEditedError(CommandError):
    error = ErrorCode.NOT_EDITED


class GradeNotFoundError(CommandError):
    error = ErrorCode.NOT_FOUND

    def __init__(self, message: str, assignment_name: str):
        super().__init__(message)
        self.assignment_name = assignment_name


class DuplicateStudentIdError(CommandError):
    error = ErrorCode.DUPLICATE_STUDENT_ID

    def __init__(self, message: str, student_id: str):
        super().__init__(message)
        self.student_id = student_id


class PersonNotFoundError(CommandError):
    error = ErrorCode.NOT_FOUND


class RecordVariantError(CommandError):
    error = ErrorCode.VALIDATION_FAILED
