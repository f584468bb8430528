"""Structured reply parsing.

Replies are read line by line. Lines starting with ``EXPLANATION: ``,
``COMMAND: ``, ``WARNINGS: `` or ``INFO: `` set the matching field (a later
line overrides an earlier one); everything else is ignored. ``NONE`` marks an
optional field as absent.
"""

from __future__ import annotations

from localhelp.core.types import LLMResponse

EXPLANATION_PREFIX = "EXPLANATION: "
COMMAND_PREFIX = "COMMAND: "
WARNINGS_PREFIX = "WARNINGS: "
INFO_PREFIX = "INFO: "
NONE_VALUE = "NONE"
FALLBACK_EXPLANATION = "Unable to parse explanation from response."


def parse_structured_response(text: str) -> LLMResponse:
    explanation: str | None = None
    command: str | None = None
    warnings: str | None = None
    info: str | None = None

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(EXPLANATION_PREFIX):
            explanation = line[len(EXPLANATION_PREFIX) :]
        elif line.startswith(COMMAND_PREFIX):
            command = _optional(line[len(COMMAND_PREFIX) :])
        elif line.startswith(WARNINGS_PREFIX):
            warnings = _optional(line[len(WARNINGS_PREFIX) :])
        elif line.startswith(INFO_PREFIX):
            info = _optional(line[len(INFO_PREFIX) :])

    return LLMResponse(
        explanation=FALLBACK_EXPLANATION if explanation is None else explanation,
        recommended_command=command,
        warnings=warnings,
        additional_info=info,
    )


def render_structured_response(response: LLMResponse) -> str:
    """Render `response` in the four-line reply format."""

    return "\n".join(
        (
            f"{EXPLANATION_PREFIX}{response.explanation}",
            f"{COMMAND_PREFIX}{_rendered(response.recommended_command)}",
            f"{WARNINGS_PREFIX}{_rendered(response.warnings)}",
            f"{INFO_PREFIX}{_rendered(response.additional_info)}",
        )
    )


def _optional(value: str) -> str | None:
    if value == NONE_VALUE:
        return None
    return value


def _rendered(value: str | None) -> str:
    return NONE_VALUE if value is None else value
