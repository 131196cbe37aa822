# logic/cli_syntax.py

# markers that attribute a value to a field, e.g. "n/Amy Tan"

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_STUDENT_ID = "id/"
PREFIX_MODULE_CODE = "m/"
PREFIX_TAG = "t/"
PREFIX_CONSULTATION = "c/"
PREFIX_GRADE = "g/"
PREFIX_WEEK = "w/"
PREFIX_REMARK = "r/"

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The student index provided is invalid"
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): {}"
)
