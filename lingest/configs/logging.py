"""
Lingest Logging Configuration

Configures logging based on environment variables:
- LINGEST_DEBUG: Enable debug logging (default: false)
- LINGEST_LOG_FILE: Optional log file path (default: stderr only)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
    quiet: bool = False,
) -> logging.Logger:
    """
    Configure logging for lingest.

    Args:
        debug: Enable debug level. Defaults to LINGEST_DEBUG env var.
        log_file: Log file path. Defaults to LINGEST_LOG_FILE env var;
                  when neither is set only stderr is used.
        quiet: Only show warnings and errors on stderr.

    Returns:
        Root logger for lingest
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("LINGEST_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("LINGEST_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("lingest")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file or quiet:
        # File gets the detail, stderr only warnings
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "ingest.walker", "cli")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"lingest.{component}")
