"""Execution of a confirmed recommended command."""

from __future__ import annotations

from loguru import logger

from localhelp.core.process import ProcessResult, run_captured
from localhelp.errors import NoCommandToExecuteError


def split_command(command: str) -> list[str]:
    """Split on single spaces, dropping empty fragments. No shell rules apply."""

    argv = [part for part in command.split(" ") if part]
    if not argv:
        raise NoCommandToExecuteError()
    return argv


def execute_command(command: str) -> ProcessResult:
    argv = split_command(command)
    logger.debug("executor.run argv={}", argv)
    result = run_captured(argv)
    logger.debug("executor.done exit={}", result.returncode)
    return result
