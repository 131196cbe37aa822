# core/logging_config.py

"""
Logging configuration for TeachMate.

Log output is split into channels (logic, roster, cli) so that entries can be
filtered by the layer that produced them. Every channel logger lives under the
`teachmate` namespace and inherits the single stderr handler attached there,
which keeps the REPL's stdout reserved for command results.

The level is taken from the `--log-level` flag when given, otherwise from the
`TEACHMATE_LOG_LEVEL` environment variable, and defaults to WARNING.
"""

import logging
import os

ROOT_LOGGER_NAME = "teachmate"
CHANNELS = ["logic", "roster", "cli"]
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(channel)s] %(message)s"


class ChannelFormatter(logging.Formatter):
    """
    Plain-text formatter that exposes the channel (last dotted part of the logger name) as `%(channel)s`.
    """

    def format(self, record: logging.LogRecord) -> str:
        record.channel = record.name.rsplit(".", 1)[-1]
        return super().format(record)


def resolve_log_level(level: str | None = None) -> int:
    """
    Resolves a level name to a `logging` level constant.

    Args:
        level (str | None): An explicit level name. If None, `TEACHMATE_LOG_LEVEL` is consulted.

    Returns:
        int: The matching `logging` level, or WARNING when the name is unknown.
    """
    name = (level or os.getenv("TEACHMATE_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    resolved = logging.getLevelName(name)

    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures the `teachmate` logger and its channel loggers.

    Args:
        level (str | None): Optional level name overriding the environment.

    Returns:
        logging.Logger: The configured `teachmate` logger.

    Notes:
        - Calling this more than once replaces the handler instead of stacking duplicates.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(ChannelFormatter(LOG_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(resolve_log_level(level))
    root_logger.handlers = [handler]
    root_logger.propagate = False

    for channel in CHANNELS:
        logging.getLogger(f"{ROOT_LOGGER_NAME}.{channel}").setLevel(logging.NOTSET)

    return root_logger


def get_logger(channel: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{channel}")
