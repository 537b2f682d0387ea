"""
Unified output system using Loguru.
Log lines go to a rotating file; user-facing messages also reach the console.
"""

import sys
from pathlib import Path

from loguru import logger

from .console import safe_print


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    rotation: str = "5 MB",
    retention: int = 3,
    console_output: bool = False,
) -> None:
    """
    Configure loguru for file logging with optional stderr output.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        rotation: Size at which the log file is rotated
        retention: Number of rotated files to keep
        console_output: Also write log lines to stderr
    """
    # Remove default handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation=rotation,
        retention=retention,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes (thread-safe but blocking)
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints to the console.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    styles = {
        "debug": "dim",
        "info": None,
        "warning": "yellow",
        "error": "red",
    }
    safe_print(message, style=styles.get(level))
