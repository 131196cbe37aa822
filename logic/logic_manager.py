# logic/logic_manager.py

from __future__ import annotations

import traceback

from core.logging_config import get_logger
from core.response import ErrorCode, Response
from logic.command_parser import parse_command
from logic.exceptions import TeachMateError
from models.roster import Roster

logger = get_logger("logic")


class LogicManager:
    """
    Runs one line of user input against the roster and reports the outcome as a `Response`.

    Commands are executed one at a time, in the order they are submitted.
    """

    def __init__(self, roster: Roster):
        self._roster = roster

    @property
    def roster(self) -> Roster:
        return self._roster

    def execute(self, user_input: str) -> Response:
        """
        Parses and executes a command.

        Args:
            user_input (str): The full line typed by the user.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the command ran to completion.
                    - False if parsing or execution failed.
                - detail (str | None):
                    - On success, the command's message for the user.
                    - On failure, the error message (usage text, constraint text, or the command's reason).
                - error (ErrorCode | str | None):
                    - The `ErrorCode` carried by the raised `TeachMateError`.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - On failure, the `ErrorCode`'s status (404 not found, 409 duplicate, 500 internal, otherwise 400)
                - data (dict): The command's payload on success, otherwise empty.

        Notes:
            - This method does not raise; every failure aborts only the current command.
        """
        logger.debug("received input: %r", user_input)

        try:
            command = parse_command(user_input)
            response = command.execute(self._roster)

        except TeachMateError as e:
            logger.info("command failed [%s]: %s", e.error.name, e.message)

            return Response.fail(detail=e.message, error=e.error)

        except Exception as e:
            logger.exception("unexpected error while running %r", user_input)

            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        return response
