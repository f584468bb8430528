"""CLI entry point for localhelp."""

from typing import Optional

import typer
from loguru import logger

from localhelp.cli.render import Renderer
from localhelp.config import Settings, load_settings
from localhelp.core.commands import parse_command_args
from localhelp.core.docs import get_documentation
from localhelp.core.executor import execute_command
from localhelp.core.prompt import build_prompt
from localhelp.core.types import CommandInfo
from localhelp.errors import LocalHelpError, ManPageNotFoundError, NoCommandToExecuteError, ProcessError
from localhelp.llm import get_llm_response
from localhelp.logging_utils import preview

PROMPT_PREVIEW_CHARS = 500

app = typer.Typer(
    name="localhelp",
    help="Explain a command with its local documentation and an LLM.",
    add_completion=False,
)


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    }
)
def main(
    argv: Optional[list[str]] = typer.Argument(None, metavar="COMMAND [ARGS]... [QUERY]"),
) -> None:
    """Look up documentation for COMMAND and answer QUERY about it."""
    renderer = Renderer()
    if not argv:
        renderer.usage()
        return

    try:
        settings = load_settings()
        process_command(argv, settings, renderer)
    except LocalHelpError as exc:
        renderer.error(str(exc))
        _exit_with_error()


def _exit_with_error() -> None:
    """Exit with error code."""
    raise typer.Exit(1)


def process_command(argv: list[str], settings: Settings, renderer: Renderer) -> None:
    """Resolve documentation for the command and answer the query, if any."""

    info = parse_command_args(argv)
    logger.debug("cli.docs.fetch command={}", info.command)
    try:
        documentation: Optional[str] = get_documentation(info.command, info.args)
    except ManPageNotFoundError:
        logger.debug("cli.docs.missing command={}", info.command)
        if info.query is None:
            renderer.no_documentation(info.command)
            return
        renderer.documentation_missing(info.command)
        documentation = None

    if info.query is None:
        renderer.documentation(info.command, documentation or "")
        return

    process_with_llm(info, info.query, documentation, settings, renderer)


def process_with_llm(
    info: CommandInfo,
    query: str,
    documentation: Optional[str],
    settings: Settings,
    renderer: Renderer,
) -> None:
    prompt = build_prompt(info, query, documentation)
    logger.debug("cli.llm.prompt.preview {}...", preview(prompt, PROMPT_PREVIEW_CHARS))

    response = get_llm_response(settings, prompt)
    renderer.llm_response(response)

    command = response.recommended_command
    if command is not None and command != "NONE":
        ask_and_execute(command, renderer)


def ask_and_execute(command: str, renderer: Renderer) -> None:
    """Run `command` after the user confirms it. Failures are reported, never raised."""

    if not renderer.confirm_execution(command):
        renderer.not_executed()
        return

    renderer.executing(command)
    try:
        result = execute_command(command)
    except NoCommandToExecuteError:
        renderer.execution_failed("Error: No command to execute")
        return
    except (OSError, ProcessError) as exc:
        renderer.execution_failed(f"Error executing command: {exc!s}")
        return
    renderer.execution_result(result)
