"""
Logging Utility.

Sets up the process-wide stdout handler used by every module logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        level: Logging level name, e.g. "INFO" or "DEBUG"

    Returns:
        The root logger
    """
    root = logging.getLogger()
    root.setLevel(logging.getLevelName(level.upper()))

    # Prevent adding handlers multiple times (reloads, repeated startups)
    if not any(getattr(h, "_todo_app_handler", False) for h in root.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._todo_app_handler = True
        root.addHandler(console_handler)

    return root
