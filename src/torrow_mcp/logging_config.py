"""Logging setup: loguru for the server, stdlib logging for the HTTP transport.

Both write to stderr, since stdout carries the MCP stdio transport.
"""

import logging
import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "TORROW_MCP_LOG_LEVEL"

# loguru level names; TRACE and SUCCESS map to INFO for the stdlib logger.
LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _level(verbose: bool) -> str:
    if verbose:
        return "DEBUG"
    level = (os.environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
    return level if level in LEVELS else "INFO"


def configure_logging(*, verbose: bool = False) -> None:
    """Route loguru and the ``api`` logger to stderr at one level.

    ``--verbose`` wins over TORROW_MCP_LOG_LEVEL.
    """
    level = _level(verbose)

    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} {level.icon} {message}")

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="[%(levelname).1s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
