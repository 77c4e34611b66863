"""
================================================================================
Test Logger
================================================================================

Leveled logging facade used by scenarios and fixtures.

Levels:
    - INFO: general progress
    - STEP: a user-visible scenario step ("Clicking login button")
    - WARNING: degraded but non-fatal behaviour (teardown, flaky app output)
    - ERROR: failures, optionally with the originating exception

All records go through loguru, so formatting, timestamps and sinks come from
`bank_tools.common.init_logger`.

================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger


STEP_LEVEL = "STEP"

try:
    logger.level(STEP_LEVEL)
except ValueError:
    logger.level(STEP_LEVEL, no=22, color="<cyan><bold>", icon="▶")


class Logger:
    """Stateless logging facade; every method writes one record."""

    @staticmethod
    def info(message: str) -> None:
        logger.opt(depth=1).info(message)

    @staticmethod
    def step(message: str) -> None:
        logger.opt(depth=1).log(STEP_LEVEL, message)

    @staticmethod
    def warning(message: str) -> None:
        logger.opt(depth=1).warning(message)

    @staticmethod
    def error(message: str, error: Optional[BaseException] = None) -> None:
        """
        Log an error message.

        Args:
            message: Message to log
            error: Optional exception; its traceback is included in the record
        """
        if error is not None:
            logger.opt(depth=1, exception=error).error(f"{message}: {error}")
        else:
            logger.opt(depth=1).error(message)


__all__ = [
    "Logger",
    "STEP_LEVEL",
]
