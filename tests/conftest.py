from __future__ import annotations

import os

import pytest

import localhelp.config as config_module
from localhelp.credentials import UnsupportedSecretStore


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.upper().startswith("LOCALHELP_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("USER", "tester")
    monkeypatch.setattr(config_module, "default_secret_store", UnsupportedSecretStore)
