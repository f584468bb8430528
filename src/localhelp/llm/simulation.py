"""Offline provider with canned answers for a few known questions."""

from __future__ import annotations

from localhelp.config import Settings
from localhelp.core.prompt import DOCUMENTATION_HEADER
from localhelp.core.types import LLMResponse

GIT_UNSTAGE_INFO = (
    "After running this command, your changes will still be present in your working directory "
    "but will no longer be staged for commit. You can re-stage them later with 'git add'."
)
DOCKER_RUNNING_INFO = (
    "By default, 'docker ps' only shows running containers. "
    "To see all containers including stopped ones, use 'docker ps -a'."
)


class SimulationProvider:
    """Keyword-matched responses; never fails and needs no credentials."""

    def respond(self, settings: Settings, prompt: str) -> LLMResponse:
        has_docs = DOCUMENTATION_HEADER in prompt

        if _contains_all(prompt, "git", "reset", "unstage"):
            info = GIT_UNSTAGE_INFO + (" (Analysis based on git man page)" if has_docs else "")
            return LLMResponse(
                explanation=(
                    "You want to unstage changes that are currently in the git index (staging area) "
                    "but keep them as modified files in your working directory."
                ),
                recommended_command="git reset HEAD",
                warnings=(
                    "This will unstage ALL staged changes. "
                    "To unstage specific files, use 'git reset HEAD <filename>'."
                ),
                additional_info=info,
            )

        if _contains_all(prompt, "docker", "ps", "running"):
            info = DOCKER_RUNNING_INFO + (" (Analysis based on docker man page)" if has_docs else "")
            return LLMResponse(
                explanation="You want to see only currently running Docker containers, not stopped ones.",
                recommended_command="docker ps",
                additional_info=info,
            )

        context = "with" if has_docs else "without"
        return LLMResponse(
            explanation="This is a simulated LLM response for testing purposes.",
            warnings=(
                f"This is a simulated response {context} man page context. "
                "For real AI assistance, configure an API key."
            ),
            additional_info="Set LOCALHELP_LLM_PROVIDER and LOCALHELP_API_KEY environment variables.",
        )


def _contains_all(text: str, *needles: str) -> bool:
    return all(needle in text for needle in needles)
