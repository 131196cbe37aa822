# cli/menu_helpers.py

"""
Helper functions for the TeachMate REPL.

This module provides utilities for:
- Prompting for user input
- Displaying numbered result lists
- Displaying command results and standard error feedback
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
from core.response import Response

PROMPT = ">> "


# === display methods ===


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_response(response: Response, debug: bool = False) -> None:
    """
    Prints the outcome of a command.

    Notes:
        - Failures are delegated to `display_response_failure()`.
        - A "records" payload is printed as a numbered list, matching the indices commands accept.
        - A "record" payload flagged with "view" is printed in full.
    """
    if not response.success:
        display_response_failure(response, debug)
        return

    print(f"\n{response.detail}")

    if "records" in response.data:
        display_results(
            response.data["records"], True, model_formatters.format_person_oneline
        )

    elif response.data.get("view"):
        print(model_formatters.format_person_multiline(response.data["record"]))


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, prints the trace field when present. Defaults to False.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    if debug and response.trace:
        print(f"\nDebug Trace: {response.trace}")


# === prompt user input methods ===


def prompt_user_input(prompt: str = PROMPT) -> str:
    return input(f"\n{prompt}").strip()
