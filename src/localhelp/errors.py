"""Application-level exception types for localhelp."""

from __future__ import annotations


class LocalHelpError(Exception):
    """Base exception for localhelp."""


class ConfigurationError(LocalHelpError):
    """Raised when environment configuration cannot be parsed."""


class NoCommandError(LocalHelpError):
    """Raised when the argument list does not name a command."""

    def __init__(self) -> None:
        super().__init__("no command given")


class DocumentationError(LocalHelpError):
    """Base exception for documentation lookup."""


class ManPageNotFoundError(DocumentationError):
    """Raised when neither the man page nor any help invocation produced documentation."""

    def __init__(self, command: str) -> None:
        super().__init__(f"no documentation found for {command!r}")
        self.command = command


class HelpCommandFailedError(DocumentationError):
    """Raised when one help invocation did not produce usable help text."""


class ProcessError(LocalHelpError):
    """Base exception for subprocess capture."""


class OutputLimitExceededError(ProcessError):
    """Raised when a child process writes more output than the capture limit."""

    def __init__(self, argv: tuple[str, ...], limit: int) -> None:
        super().__init__(f"output of {' '.join(argv)!r} exceeded {limit} bytes")
        self.argv = argv
        self.limit = limit


class SecretStoreError(LocalHelpError):
    """Base exception for secret store lookups."""


class KeyNotFoundError(SecretStoreError):
    """Raised when no credential is stored for the service and account."""


class AccessDeniedError(SecretStoreError):
    """Raised when the secret store refuses to hand out the credential."""


class InvalidParametersError(SecretStoreError):
    """Raised when the service or account name is rejected by the store."""


class UnknownSecretStoreError(SecretStoreError):
    """Raised for any other secret store failure."""


class LLMError(LocalHelpError):
    """Base exception for LLM provider calls."""


class APIRequestFailedError(LLMError):
    """Raised when the provider request fails or returns a non-2xx status."""


class InvalidJSONResponseError(LLMError):
    """Raised when the provider response body does not match the expected schema."""


class NoCommandToExecuteError(LocalHelpError):
    """Raised when a recommended command splits into no arguments."""

    def __init__(self) -> None:
        super().__init__("no command to execute")
