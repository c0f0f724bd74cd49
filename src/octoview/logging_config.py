"""Logging setup for Octoview.

The Textual app owns the terminal, so records go to a file.
"""

import logging
from pathlib import Path
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_path: Optional[Path] = None,
) -> logging.Logger:
    """Configure the ``octoview`` package logger.

    Args:
        level: Logging level for the package logger.
        log_path: File receiving the records. Without one, nothing is
            attached and records propagate to the root logger.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("octoview")
    logger.setLevel(level)

    # Replace any existing handlers to avoid duplicate logs
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    else:
        logger.propagate = True

    return logger
