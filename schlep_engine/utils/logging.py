"""
Logging utilities for the Schlep-engine SDK.

The SDK logs through loguru but stays silent until the application opts in
with ``enable_logging``.

Author: Yobie Benjamin
Date: 2026-10-19
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE = "schlep_engine"

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _only_sdk(record) -> bool:
    return record["name"].startswith(PACKAGE)


def enable_logging(
    level: str = "DEBUG",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    format: Optional[str] = None,
) -> list[int]:
    """
    Enable SDK log output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
        rotation: Log rotation size/time
        retention: Log retention period
        format: Log format string

    Returns:
        IDs of the added handlers, for ``disable_logging``
    """
    logger.enable(PACKAGE)

    format = format or DEFAULT_FORMAT

    handler_ids = [
        logger.add(
            sys.stderr,
            format=format,
            level=level,
            colorize=True,
            filter=_only_sdk,
        )
    ]

    if log_file:
        handler_ids.append(
            logger.add(
                log_file,
                format=format,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                filter=_only_sdk,
            )
        )

    return handler_ids


def disable_logging(handler_ids: Optional[list[int]] = None) -> None:
    """Silence SDK log output and drop handlers added by ``enable_logging``."""
    logger.disable(PACKAGE)
    for handler_id in handler_ids or []:
        logger.remove(handler_id)
