"""Read-only access to stored provider credentials."""

from __future__ import annotations

import os
import sys
from typing import Protocol

import keyring
import keyring.errors

from .core.process import run_captured
from .errors import (
    AccessDeniedError,
    InvalidParametersError,
    KeyNotFoundError,
    ProcessError,
    UnknownSecretStoreError,
)

SERVICE_PREFIX = "localhelp-"
KNOWN_SERVICES = frozenset({"openrouter", "openai", "anthropic"})
MAX_WHOAMI_BYTES = 256


class SecretStore(Protocol):
    def get(self, service: str, account: str) -> str:
        """Return the credential stored for `service`/`account`."""
        ...


class KeyringSecretStore:
    """Secret store backed by the system keyring (Keychain on macOS)."""

    def get(self, service: str, account: str) -> str:
        if not service or not account:
            raise InvalidParametersError(f"invalid service/account: {service!r}/{account!r}")
        try:
            value = keyring.get_password(service, account)
        except keyring.errors.KeyringLocked as exc:
            raise AccessDeniedError(str(exc)) from exc
        except keyring.errors.KeyringError as exc:
            raise UnknownSecretStoreError(str(exc)) from exc
        except ValueError as exc:
            raise InvalidParametersError(str(exc)) from exc
        if not value:
            raise KeyNotFoundError(f"no credential for {service}")
        return value


class UnsupportedSecretStore:
    """Placeholder for platforms without a supported secret store."""

    def get(self, service: str, account: str) -> str:
        raise KeyNotFoundError(f"secret store unsupported on {sys.platform}, no credential for {service}")


def default_secret_store() -> SecretStore:
    if sys.platform == "darwin":
        return KeyringSecretStore()
    return UnsupportedSecretStore()


def service_name(provider: str) -> str:
    """Map a provider name to its secret store service identifier."""
    if provider in KNOWN_SERVICES:
        return f"{SERVICE_PREFIX}{provider}"
    return f"{SERVICE_PREFIX}unknown"


def current_user() -> str:
    """Return the account name used for secret lookups."""

    user = os.environ.get("USER")
    if user is not None:
        return user
    try:
        result = run_captured(["whoami"], max_output_bytes=MAX_WHOAMI_BYTES)
    except (OSError, ProcessError) as exc:
        raise UnknownSecretStoreError(f"cannot determine current user: {exc!s}") from exc
    if result.returncode != 0:
        raise UnknownSecretStoreError(f"whoami exited with {result.returncode}")
    return result.stdout.strip()
