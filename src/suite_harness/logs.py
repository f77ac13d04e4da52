"""Loguru setup for harness runs."""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

_logging_initialized: bool = False


def init_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_str: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initialize the loguru logger used for suite diagnostics.

    Safe to call from every entry point; only the first call configures
    handlers unless ``force`` is set.

    Args:
        level: Log level (DEBUG, INFO, ...). Defaults to SUITE_HARNESS_LOG_LEVEL or INFO.
        log_file: Optional file to mirror the log trail into.
        format_str: Custom log format string.
        force: Reconfigure even if logging was already initialized.
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return

    log_level = (level or os.environ.get("SUITE_HARNESS_LOG_LEVEL") or "INFO").upper()
    log_format = format_str or DEFAULT_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            colorize=False,
        )

    _logging_initialized = True
    logger.debug(f"Logging initialized with level: {log_level}")
