import pytest

from localhelp.core.commands import parse_command_args
from localhelp.errors import NoCommandError


def test_quoted_query_is_split_from_subcommand() -> None:
    info = parse_command_args(["git", "reset", "'help me unstage'"])
    assert info.command == "git"
    assert info.args == ("reset",)
    assert info.query == "help me unstage"


def test_plain_arguments_have_no_query() -> None:
    info = parse_command_args(["docker", "ps", "-a"])
    assert info.args == ("ps", "-a")
    assert info.query is None


def test_command_only() -> None:
    info = parse_command_args(["tar"])
    assert info.command == "tar"
    assert info.args == ()
    assert info.query is None


def test_empty_argv_raises() -> None:
    with pytest.raises(NoCommandError):
        parse_command_args([])


def test_argument_with_space_starts_query() -> None:
    info = parse_command_args(["docker", "ps", "show only running containers"])
    assert info.args == ("ps",)
    assert info.query == "show only running containers"


def test_query_absorbs_all_following_arguments() -> None:
    info = parse_command_args(["git", "'how do", "I", "rebase'", "--onto"])
    assert info.args == ()
    assert info.query == "'how do I rebase' --onto"


def test_quotes_are_stripped_per_fragment() -> None:
    info = parse_command_args(["git", '"undo"', "'last commit'"])
    assert info.query == "undo last commit"


def test_query_word_only_counts_on_last_argument() -> None:
    info = parse_command_args(["git", "help", "status"])
    assert info.args == ("help", "status")
    assert info.query is None


@pytest.mark.parametrize("word", ["help", "want", "need", "how"])
def test_trailing_query_word_starts_query(word: str) -> None:
    info = parse_command_args(["git", "log", f"some{word}"])
    assert info.args == ("log",)
    assert info.query == f"some{word}"


def test_query_word_match_is_case_sensitive() -> None:
    info = parse_command_args(["git", "log", "HOW"])
    assert info.args == ("log", "HOW")
    assert info.query is None


def test_first_trailing_argument_query_leaves_args_empty() -> None:
    info = parse_command_args(["ls", "'list hidden files'"])
    assert info.args == ()
    assert info.query == "list hidden files"


def test_mismatched_quotes_are_kept() -> None:
    info = parse_command_args(["ls", "'list files\""])
    assert info.query == "'list files\""
