"""Core pipeline: argument splitting, documentation lookup, prompt and reply handling."""

from .types import CommandInfo, LLMResponse

__all__ = ["CommandInfo", "LLMResponse"]
