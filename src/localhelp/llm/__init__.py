"""LLM provider dispatch."""

from __future__ import annotations

from loguru import logger

from localhelp.config import Provider, Settings
from localhelp.core.types import LLMResponse
from localhelp.logging_utils import preview

from .base import LLMProvider
from .openrouter import OpenRouterProvider
from .placeholders import ANTHROPIC_PROVIDER, LOCAL_PROVIDER, OPENAI_PROVIDER
from .simulation import SimulationProvider

PROVIDERS: dict[Provider, LLMProvider] = {
    Provider.OPENROUTER: OpenRouterProvider(),
    Provider.OPENAI: OPENAI_PROVIDER,
    Provider.ANTHROPIC: ANTHROPIC_PROVIDER,
    Provider.LOCAL: LOCAL_PROVIDER,
    Provider.SIMULATION: SimulationProvider(),
}


def get_provider(kind: Provider) -> LLMProvider:
    return PROVIDERS[kind]


def get_llm_response(settings: Settings, prompt: str) -> LLMResponse:
    """Send `prompt` to the configured provider."""

    logger.debug("llm.request provider={}", settings.llm_provider.value)
    response = get_provider(settings.llm_provider).respond(settings, prompt)
    logger.debug("llm.response.explanation {}...", preview(response.explanation, 300))
    if response.recommended_command is not None:
        logger.debug("llm.response.command {}", response.recommended_command)
    return response


__all__ = ["PROVIDERS", "LLMProvider", "get_llm_response", "get_provider"]
