from __future__ import annotations

import json

import httpx
import pytest

from localhelp.config import Provider, Settings
from localhelp.core.prompt import build_prompt
from localhelp.core.types import CommandInfo
from localhelp.errors import APIRequestFailedError, InvalidJSONResponseError
from localhelp.llm import PROVIDERS, get_llm_response
from localhelp.llm.openrouter import (
    DEFAULT_MODEL,
    MISSING_KEY_RESPONSE,
    OPENROUTER_ENDPOINT,
    OpenRouterProvider,
    extract_content,
)
from localhelp.llm.simulation import SimulationProvider

REPLY = "Here is my answer.\nEXPLANATION: Lists files\nCOMMAND: ls -la\nWARNINGS: NONE\nINFO: Try -h\n"


def _completion(content: str) -> dict[str, object]:
    return {
        "id": "gen-1",
        "model": "anthropic/claude-3.7-sonnet",
        "choices": [{"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}}],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


def _settings(**kwargs: object) -> Settings:
    return Settings(**kwargs)


def test_every_provider_is_registered() -> None:
    assert set(PROVIDERS) == set(Provider)


def test_openrouter_posts_chat_completion(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json=_completion(REPLY))

    provider = OpenRouterProvider(transport=httpx.MockTransport(handler))
    response = provider.respond(_settings(api_key="sk-or-test"), "the prompt")

    request = captured["request"]
    assert str(request.url) == OPENROUTER_ENDPOINT
    assert request.method == "POST"
    assert request.headers["Authorization"] == "Bearer sk-or-test"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "model": DEFAULT_MODEL,
        "messages": [{"role": "user", "content": "the prompt"}],
        "temperature": 0.7,
        "max_tokens": 1000,
    }
    assert response.explanation == "Lists files"
    assert response.recommended_command == "ls -la"
    assert response.warnings is None
    assert response.additional_info == "Try -h"


def test_openrouter_uses_configured_model() -> None:
    models: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        models.append(json.loads(request.content)["model"])
        return httpx.Response(200, json=_completion(REPLY))

    provider = OpenRouterProvider(transport=httpx.MockTransport(handler))
    provider.respond(_settings(api_key="k", model="openai/gpt-4o-mini"), "p")
    assert models == ["openai/gpt-4o-mini"]


def test_openrouter_without_key_makes_no_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    provider = OpenRouterProvider(transport=httpx.MockTransport(handler))
    assert provider.respond(_settings(), "p") == MISSING_KEY_RESPONSE


@pytest.mark.parametrize("status", [401, 429, 500])
def test_openrouter_non_success_status_raises(status: int) -> None:
    provider = OpenRouterProvider(transport=httpx.MockTransport(lambda request: httpx.Response(status, text="nope")))
    with pytest.raises(APIRequestFailedError):
        provider.respond(_settings(api_key="k"), "p")


def test_openrouter_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = OpenRouterProvider(transport=httpx.MockTransport(handler))
    with pytest.raises(APIRequestFailedError):
        provider.respond(_settings(api_key="k"), "p")


def test_openrouter_empty_choices_raise() -> None:
    provider = OpenRouterProvider(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []})))
    with pytest.raises(InvalidJSONResponseError):
        provider.respond(_settings(api_key="k"), "p")


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"{}",
        b'{"choices": [{"message": {"role": "assistant"}}]}',
        b'{"choices": "wrong"}',
    ],
)
def test_extract_content_rejects_malformed_bodies(body: bytes) -> None:
    with pytest.raises(InvalidJSONResponseError):
        extract_content(body)


def test_extract_content_ignores_extra_fields() -> None:
    assert extract_content(json.dumps(_completion("hi"))) == "hi"


@pytest.mark.parametrize(
    ("provider", "fragment"),
    [
        (Provider.OPENAI, "OpenAI provider selected but no API key configured."),
        (Provider.ANTHROPIC, "Anthropic provider selected but no API key configured."),
        (Provider.LOCAL, "Local LLM provider selected but no API URL configured."),
    ],
)
def test_placeholders_explain_missing_configuration(provider: Provider, fragment: str) -> None:
    response = get_llm_response(_settings(llm_provider=provider), "p")
    assert response.explanation == fragment
    assert response.recommended_command is None
    assert response.warnings is not None
    assert "LOCALHELP_" in response.warnings


@pytest.mark.parametrize(
    ("provider", "settings_kwargs", "label"),
    [
        (Provider.OPENAI, {"api_key": "k"}, "OpenAI"),
        (Provider.ANTHROPIC, {"api_key": "k"}, "Anthropic"),
        (Provider.LOCAL, {"api_url": "http://localhost:11434"}, "Local LLM"),
    ],
)
def test_configured_placeholders_report_pending_integration(
    provider: Provider, settings_kwargs: dict[str, str], label: str
) -> None:
    response = get_llm_response(_settings(llm_provider=provider, **settings_kwargs), "p")
    assert response.explanation == f"{label} integration placeholder"
    assert response.warnings == f"{label} API integration not yet implemented."
    assert response.additional_info == "Coming soon! For now, use simulation mode."


def test_local_placeholder_ignores_api_key() -> None:
    response = get_llm_response(_settings(llm_provider=Provider.LOCAL, api_key="k"), "p")
    assert response.explanation == "Local LLM provider selected but no API URL configured."


def test_simulation_git_unstage_with_and_without_docs() -> None:
    provider = SimulationProvider()
    info = CommandInfo(command="git", args=("reset",), query="I want to unstage my changes")
    without_docs = provider.respond(_settings(), build_prompt(info, info.query or ""))
    with_docs = provider.respond(_settings(), build_prompt(info, info.query or "", "GIT-RESET(1)"))

    assert without_docs.recommended_command == "git reset HEAD"
    assert with_docs.recommended_command == "git reset HEAD"
    assert without_docs.additional_info != with_docs.additional_info
    assert with_docs.additional_info is not None
    assert with_docs.additional_info.endswith("(Analysis based on git man page)")


def test_simulation_docker_running() -> None:
    response = SimulationProvider().respond(_settings(), "docker ps show running containers")
    assert response.recommended_command == "docker ps"
    assert response.warnings is None
    assert response.additional_info is not None
    assert "docker ps -a" in response.additional_info


def test_simulation_generic_answer_has_no_command() -> None:
    response = SimulationProvider().respond(_settings(), "tar extract MAN PAGE CONTENT:\nTAR(1)")
    assert response.explanation == "This is a simulated LLM response for testing purposes."
    assert response.recommended_command is None
    assert response.warnings is not None
    assert "with man page context" in response.warnings
