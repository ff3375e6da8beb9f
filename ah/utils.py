"""Utility functions for ah."""

import logging
import os
import sys
from typing import Any

from ah.constants import DEBUG_ENV_VAR

logger = logging.getLogger(__name__)


def is_debug_mode() -> bool:
    """Return True when AH_DEBUG=1 is set in the environment."""
    return os.environ.get(DEBUG_ENV_VAR) == "1"


def log_and_print_error(message: str, *args: Any) -> None:
    """Log error message and print to stderr.

    The log record is emitted at DEBUG level so the console handlers do
    not repeat the printed line.

    Parameters
    ----------
    message : str
        Error message with optional format placeholders
    *args : Any
        Format arguments for message
    """
    logger.debug(message, *args)
    formatted_msg = message % args if args else message
    print(f"Error: {formatted_msg}", file=sys.stderr)
