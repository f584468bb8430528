"""Invocation argument splitting."""

from __future__ import annotations

from collections.abc import Sequence

from localhelp.core.types import CommandInfo
from localhelp.errors import NoCommandError

QUOTE_CHARS = ("'", '"')
QUERY_WORDS = ("I ", "help", "want", "need", "how")


def parse_command_args(argv: Sequence[str]) -> CommandInfo:
    """Split `argv` into the target command, its arguments and a free-text query.

    The first element is the command. The first later argument that looks like
    prose starts the query; it and everything after it are joined with single
    spaces, each fragment losing one pair of surrounding quotes.
    """

    if not argv:
        raise NoCommandError()

    command = argv[0]
    args: list[str] = []
    last_index = len(argv) - 1
    for index in range(1, len(argv)):
        arg = argv[index]
        if _starts_query(arg, is_last=index == last_index):
            query = " ".join(_strip_quotes(fragment) for fragment in argv[index:])
            return CommandInfo(command=command, args=tuple(args), query=query)
        args.append(arg)

    return CommandInfo(command=command, args=tuple(args), query=None)


def _starts_query(arg: str, *, is_last: bool) -> bool:
    if " " in arg or arg.startswith(QUOTE_CHARS):
        return True
    return is_last and any(word in arg for word in QUERY_WORDS)


def _strip_quotes(fragment: str) -> str:
    if len(fragment) >= 2 and fragment[0] in QUOTE_CHARS and fragment[-1] == fragment[0]:
        return fragment[1:-1]
    return fragment
