"""Documentation lookup for arbitrary command-line tools.

Sources are tried one at a time and the first usable one wins:

1. ``man <command>`` filtered through ``col -bx`` to drop overstrike formatting.
2. A fixed list of help invocations (``--help``, ``-h``, subcommand help,
   ``help`` subcommand, bare command). An attempt counts only when the exit
   status is 0, 1 or 2 and the output reads like help text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loguru import logger

from localhelp.core.process import ProcessResult, run_captured, run_pipeline
from localhelp.errors import HelpCommandFailedError, ManPageNotFoundError, ProcessError
from localhelp.logging_utils import preview

MAN_FILTER = ("col", "-bx")
HELP_MARKERS = (
    "Usage:",
    "usage:",
    "USAGE:",
    "Options:",
    "options:",
    "Commands:",
    "commands:",
    "--help",
    "Examples:",
    "Description:",
)
MIN_HELP_CHARS = 10
HELP_EXIT_CODES = frozenset({0, 1, 2})
PREVIEW_CHARS = 200


def get_documentation(command: str, args: Sequence[str] = ()) -> str:
    """Return man page or help text for `command`, raising `ManPageNotFoundError` when none exists."""

    logger.debug("docs.man.try command={}", command)
    try:
        content = try_man_page(command)
    except HelpCommandFailedError as exc:
        logger.debug("docs.man.missing reason={}", exc)
    else:
        logger.debug("docs.man.found chars={}", len(content))
        logger.debug("docs.man.preview {}...", preview(content, PREVIEW_CHARS))
        return content

    for argv in help_patterns(command, args):
        try:
            content = try_help_command(argv)
        except HelpCommandFailedError as exc:
            logger.debug("docs.help.skip argv={} reason={}", argv, exc)
            continue
        logger.debug("docs.help.found argv={} chars={}", argv, len(content))
        logger.debug("docs.help.preview {}...", preview(content, PREVIEW_CHARS))
        return content

    logger.debug("docs.missing command={}", command)
    raise ManPageNotFoundError(command)


def try_man_page(command: str) -> str:
    result = _run(lambda: run_pipeline(("man", command), MAN_FILTER))
    if not result.ok:
        raise HelpCommandFailedError(f"man exited with {result.returncode}: {result.stderr.strip()}")
    return result.stdout


def try_help_command(argv: Sequence[str]) -> str:
    result = _run(lambda: run_captured(argv))
    if result.returncode not in HELP_EXIT_CODES:
        raise HelpCommandFailedError(f"exit={result.returncode} stderr={result.stderr.strip()}")
    if not looks_like_help(result.stdout):
        raise HelpCommandFailedError(f"output does not look like help, chars={len(result.stdout)}")
    return result.stdout


def help_patterns(command: str, args: Sequence[str] = ()) -> list[tuple[str, ...]]:
    """Help invocations to try, in order."""

    if args:
        subcommand_help = (command, args[0], "--help")
        subcommand_short = (command, args[0], "-h")
    else:
        subcommand_help = (command, "--help")
        subcommand_short = (command, "-h")
    return [
        (command, "--help"),
        (command, "-h"),
        subcommand_help,
        subcommand_short,
        (command, "help"),
        (command,),
    ]


def looks_like_help(text: str) -> bool:
    if len(text) < MIN_HELP_CHARS:
        return False
    return any(marker in text for marker in HELP_MARKERS)


def _run(spawn: Callable[[], ProcessResult]) -> ProcessResult:
    try:
        return spawn()
    except (OSError, ProcessError) as exc:
        raise HelpCommandFailedError(str(exc)) from exc
