"""localhelp - command documentation plus an LLM, on the command line."""

__version__ = "0.1.0"
