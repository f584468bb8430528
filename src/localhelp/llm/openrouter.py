"""OpenRouter chat-completions backend."""

from __future__ import annotations

from typing import Any, ClassVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from localhelp.config import Settings
from localhelp.core.response import parse_structured_response
from localhelp.core.types import LLMResponse
from localhelp.errors import APIRequestFailedError, InvalidJSONResponseError
from localhelp.logging_utils import preview

OPENROUTER_ENDPOINT = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "anthropic/claude-3.7-sonnet"
TEMPERATURE = 0.7
MAX_TOKENS = 1000

MISSING_KEY_RESPONSE = LLMResponse(
    explanation="OpenRouter provider selected but no API key configured.",
    warnings="Set LOCALHELP_API_KEY environment variable with your OpenRouter API key.",
    additional_info="Get your key at https://openrouter.ai/keys. Example: export LOCALHELP_API_KEY=sk-or-...",
)


class ChatMessage(BaseModel):
    role: str
    content: str


class MessageChoice(BaseModel):
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    choices: list[MessageChoice]


class OpenRouterProvider:
    """Sends one chat-completion request per prompt and parses the reply."""

    DEFAULT_HEADERS: ClassVar[dict[str, str]] = {"HTTP-Referer": "https://github.com/localhelp", "X-Title": "localhelp"}

    def __init__(self, *, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def respond(self, settings: Settings, prompt: str) -> LLMResponse:
        if settings.api_key is None:
            return MISSING_KEY_RESPONSE

        model = settings.model or DEFAULT_MODEL
        logger.debug("llm.openrouter.request model={}", model)
        text = self.complete(settings, model=model, prompt=prompt)
        logger.debug("llm.openrouter.reply chars={}", len(text))
        logger.debug("llm.openrouter.reply.preview {}...", preview(text, 200))
        return parse_structured_response(text)

    def complete(self, settings: Settings, *, model: str, prompt: str) -> str:
        payload = build_payload(model, prompt)
        headers = {
            **self.DEFAULT_HEADERS,
            "Authorization": f"Bearer {settings.api_key}",
            "Content-Type": "application/json",
        }
        try:
            with httpx.Client(timeout=settings.timeout_seconds, transport=self._transport) as client:
                response = client.post(OPENROUTER_ENDPOINT, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise APIRequestFailedError(f"OpenRouter request failed: {exc!s}") from exc

        logger.debug("llm.openrouter.status code={}", response.status_code)
        if not response.is_success:
            logger.debug("llm.openrouter.body.preview {}...", preview(response.text, 500))
            raise APIRequestFailedError(f"OpenRouter request failed with status {response.status_code}")
        return extract_content(response.content)


def build_payload(model: str, prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": TEMPERATURE,
        "max_tokens": MAX_TOKENS,
    }


def extract_content(body: bytes | str) -> str:
    """Return the first choice's message content from a chat-completion body."""

    try:
        parsed = ChatCompletionResponse.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidJSONResponseError(f"Invalid OpenRouter response: {exc.error_count()} validation error(s)") from exc
    if not parsed.choices:
        raise InvalidJSONResponseError("No choices in OpenRouter response")
    return parsed.choices[0].message.content
