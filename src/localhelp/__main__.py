"""localhelp CLI bootstrap."""

from __future__ import annotations

from localhelp.cli import app

if __name__ == "__main__":
    app()
