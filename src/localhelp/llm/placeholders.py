"""Providers whose integration is not wired up yet.

They check their configuration and answer with canned responses without
touching the network.
"""

from __future__ import annotations

from dataclasses import dataclass

from localhelp.config import Settings
from localhelp.core.types import LLMResponse

PENDING_INFO = "Coming soon! For now, use simulation mode."


@dataclass(frozen=True)
class PlaceholderProvider:
    """Canned responses for a backend without a real client."""

    label: str
    missing_config: LLMResponse
    requires_url: bool = False

    def respond(self, settings: Settings, prompt: str) -> LLMResponse:
        configured = settings.api_url if self.requires_url else settings.api_key
        if configured is None:
            return self.missing_config
        return LLMResponse(
            explanation=f"{self.label} integration placeholder",
            warnings=f"{self.label} API integration not yet implemented.",
            additional_info=PENDING_INFO,
        )


OPENAI_PROVIDER = PlaceholderProvider(
    label="OpenAI",
    missing_config=LLMResponse(
        explanation="OpenAI provider selected but no API key configured.",
        warnings="Set LOCALHELP_API_KEY environment variable with your OpenAI API key.",
        additional_info="Example: export LOCALHELP_API_KEY=sk-...",
    ),
)

ANTHROPIC_PROVIDER = PlaceholderProvider(
    label="Anthropic",
    missing_config=LLMResponse(
        explanation="Anthropic provider selected but no API key configured.",
        warnings="Set LOCALHELP_API_KEY environment variable with your Anthropic API key.",
        additional_info="Example: export LOCALHELP_API_KEY=sk-ant-...",
    ),
)

LOCAL_PROVIDER = PlaceholderProvider(
    label="Local LLM",
    requires_url=True,
    missing_config=LLMResponse(
        explanation="Local LLM provider selected but no API URL configured.",
        warnings="Set LOCALHELP_API_URL environment variable with your local LLM endpoint.",
        additional_info="Example: export LOCALHELP_API_URL=http://localhost:11434",
    ),
)
