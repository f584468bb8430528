"""Configuration management for localhelp."""

from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .credentials import SecretStore, current_user, default_secret_store, service_name
from .errors import ConfigurationError, SecretStoreError
from .logging_utils import configure_logging

DEBUG_TRUE_VALUES = ("true", "1")


class Provider(str, Enum):
    """Supported LLM backends."""

    OPENROUTER = "openrouter"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    LOCAL = "local"
    SIMULATION = "simulation"


class Settings(BaseSettings):
    """Application settings, read once at process start."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    llm_provider: Provider = Field(
        default=Provider.OPENROUTER,
        validation_alias="LOCALHELP_LLM_PROVIDER",
        description="LLM backend to query",
    )
    api_key: str | None = Field(
        default=None,
        validation_alias="LOCALHELP_API_KEY",
        description="API key for the LLM provider",
    )
    api_url: str | None = Field(
        default=None,
        validation_alias="LOCALHELP_API_URL",
        description="Endpoint for local or custom providers",
    )
    model: str | None = Field(
        default=None,
        validation_alias="LOCALHELP_MODEL",
        description="Model identifier passed to the provider",
    )
    dev: bool = Field(
        default=False,
        validation_alias="LOCALHELP_DEV",
        description="Emit diagnostic logging to stderr",
    )
    timeout_seconds: float = Field(
        default=60.0,
        validation_alias="LOCALHELP_TIMEOUT_SECONDS",
        gt=0,
        description="HTTP timeout for provider calls",
    )

    @field_validator("llm_provider", mode="before")
    @classmethod
    def _fallback_provider(cls, value: Any) -> Any:
        if isinstance(value, Provider):
            return value
        try:
            return Provider(value)
        except ValueError:
            return Provider.OPENROUTER

    @field_validator("dev", mode="before")
    @classmethod
    def _parse_dev(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value in DEBUG_TRUE_VALUES
        return value


def load_settings(secret_store: SecretStore | None = None) -> Settings:
    """Load settings from the environment, falling back to the secret store for the API key.

    Args:
        secret_store: Optional store override, the platform default otherwise

    Returns:
        Settings instance
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        first = exc.errors()[0]
        name = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(f"invalid value for {name}: {first['msg']}") from exc
    configure_logging(debug=settings.dev)
    if settings.api_key is not None:
        return settings

    store = secret_store or default_secret_store()
    service = service_name(settings.llm_provider.value)
    try:
        api_key = store.get(service, current_user())
    except SecretStoreError as exc:
        logger.debug("config.secret.unavailable service={} reason={}", service, type(exc).__name__)
        return settings

    logger.debug("config.secret.loaded service={}", service)
    return settings.model_copy(update={"api_key": api_key})
