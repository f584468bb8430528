"""Prompt construction for the structured command-help reply."""

from __future__ import annotations

from localhelp.core.types import CommandInfo

MAX_DOCUMENTATION_CHARS = 2000
TRUNCATION_MARKER = "\n... (truncated)"
DOCUMENTATION_HEADER = "MAN PAGE CONTENT:"

PROMPT_PREAMBLE = "You are a command line expert. Help the user with this command context."

RESPONSE_FORMAT = """Please respond with structured output in this exact format:

EXPLANATION: [Brief explanation of what the user wants to achieve]
COMMAND: [Exact command to run, or NONE if no specific command recommended]
WARNINGS: [Any important warnings or caveats, or NONE]
INFO: [Additional helpful information, or NONE]
"""


def build_prompt(info: CommandInfo, query: str, documentation: str | None = None) -> str:
    """Render the prompt sent to the provider."""

    parts = [
        f"{PROMPT_PREAMBLE}\n\n",
        f"COMMAND CONTEXT: {info.full_command}\n",
        f"USER QUERY: {query}",
    ]
    if documentation is not None:
        parts.append(f"\n\n{DOCUMENTATION_HEADER}\n")
        parts.append(truncate_documentation(documentation))
    parts.append(f"\n\n{RESPONSE_FORMAT}")
    return "".join(parts)


def truncate_documentation(documentation: str) -> str:
    if len(documentation) <= MAX_DOCUMENTATION_CHARS:
        return documentation
    return documentation[:MAX_DOCUMENTATION_CHARS] + TRUNCATION_MARKER
