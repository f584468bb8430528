"""Provider contract shared by every LLM backend."""

from __future__ import annotations

from typing import Protocol

from localhelp.config import Settings
from localhelp.core.types import LLMResponse


class LLMProvider(Protocol):
    def respond(self, settings: Settings, prompt: str) -> LLMResponse:
        """Answer `prompt` with a structured response."""
        ...
