# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Logging configuration with rich handler for localcfg."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "LOCALCFG_LOG_LEVEL"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "INFO",
    *,
    show_time: bool = True,
    show_path: bool = False,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """Set up logging with rich handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        show_time: Whether to show timestamps
        show_path: Whether to show file paths
        rich_tracebacks: Whether to use rich tracebacks

    Returns:
        Configured logger instance
    """
    # Log to stderr so command output on stdout stays parseable
    console = Console(stderr=True)

    # Configure rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        enable_link_path=False,
        markup=True,
        rich_tracebacks=rich_tracebacks,
        tracebacks_show_locals=False,
    )

    # Set log level
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    rich_handler.setLevel(numeric_level)

    # Configure root logger
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",  # Rich handler handles formatting
        handlers=[rich_handler],
        force=True,  # Override any existing configuration
    )

    # Create and return logger
    logger = logging.getLogger("localcfg")
    logger.setLevel(numeric_level)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (defaults to 'localcfg')

    Returns:
        Logger instance
    """
    if name is None:
        name = "localcfg"
    return logging.getLogger(name)


# Global logger instance
logger = get_logger()


def init_cli_logging(*, verbose: bool = False) -> logging.Logger:
    """Initialize logging for CLI usage.

    A valid level in ``LOCALCFG_LOG_LEVEL`` takes precedence over ``verbose``.

    Args:
        verbose: Enable debug logging

    Returns:
        Configured logger
    """
    # Check environment variable first, then verbose flag
    env_level = os.getenv(LOG_LEVEL_ENV, "").upper()
    if env_level in _LEVELS:
        level = env_level
    else:
        level = "DEBUG" if verbose else "INFO"
    return setup_logging(level=level)
