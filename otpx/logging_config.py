"""Logging setup for the otpx command line tool."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_HANDLER_ATTR = "_is_otpx_cli_handler"


def configure_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """
    Send otpx logs to the current stderr. `verbose` forces DEBUG, otherwise
    `level` (a level name) is used, defaulting to WARNING.

    Calling it again replaces the handler installed by the previous call.
    """
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName((level or "WARNING").upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logger = logging.getLogger("otpx")
    logger.setLevel(resolved)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
