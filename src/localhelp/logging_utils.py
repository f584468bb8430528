"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

DEBUG_FORMAT = "[DEBUG] {file}:{line} {message}"
DEFAULT_FORMAT = "{level} | {message}"


def configure_logging(*, debug: bool = False) -> None:
    """Configure process-level logging once per invocation."""

    logger.remove()
    if debug:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format=DEBUG_FORMAT,
            backtrace=False,
            diagnose=False,
        )
        return
    logger.add(
        sys.stderr,
        level="WARNING",
        format=DEFAULT_FORMAT,
        backtrace=False,
        diagnose=False,
    )


def preview(text: str, limit: int) -> str:
    """Return at most `limit` characters of `text` for diagnostic lines."""
    return text[:limit]
