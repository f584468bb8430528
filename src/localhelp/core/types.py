"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandInfo:
    """Target command split from the invocation arguments."""

    command: str
    args: tuple[str, ...] = ()
    query: str | None = None

    @property
    def full_command(self) -> str:
        return " ".join((self.command, *self.args))


@dataclass(frozen=True)
class LLMResponse:
    """Structured answer extracted from a provider reply."""

    explanation: str
    recommended_command: str | None = None
    warnings: str | None = None
    additional_info: str | None = None
