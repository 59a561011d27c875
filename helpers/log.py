"""
Logging setup for ControlWeb tooling.
Library modules only create named loggers; applications call setup_logging once.
"""

import logging

from config import LOGGING_PARAMS


def setup_logging(level=None):
    """
    Configures the root logger from LOGGING_PARAMS.

    Args:
        level (str | int, optional): Overrides LOGGING_PARAMS["level"].
    """
    level = level or LOGGING_PARAMS["level"]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, format=LOGGING_PARAMS["format"], force=True)
    logging.getLogger("matplotlib").setLevel(logging.ERROR)
    logging.getLogger("numba").setLevel(logging.WARNING)
