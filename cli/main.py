# cli/main.py

"""
Entry point for the TeachMate REPL.

Reads one command per line, runs it through `LogicManager`, and prints the
result. The roster lives in memory for the duration of the session.
"""

import argparse

import cli.menu_helpers as helpers
import core.formatters as formatters
from core.logging_config import get_logger, setup_logging
from logic.logic_manager import LogicManager
from models.roster import Roster

logger = get_logger("cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teachmate",
        description="Manage student records from the command line.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to $TEACHMATE_LOG_LEVEL or WARNING.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tracebacks for unexpected errors.",
    )
    return parser


def run_cli(logic: LogicManager, debug: bool = False) -> None:
    """
    Top-level read-eval-print loop.

    Notes:
        - The loop ends on the `exit` command, end of input (Ctrl-D), or Ctrl-C.
        - Every failure is reported and the loop continues; no command error is fatal.
    """
    print(formatters.format_banner_text("TEACHMATE"))
    print("Type 'help' to see the available commands.")

    while True:
        try:
            user_input = helpers.prompt_user_input()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not user_input:
            continue

        response = logic.execute(user_input)
        helpers.display_response(response, debug)

        if response.success and response.data.get("exit"):
            break

    exit_program()


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    logger.info("starting session")

    run_cli(LogicManager(Roster()), args.debug)


if __name__ == "__main__":
    main()
