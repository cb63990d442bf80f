from __future__ import annotations

import pytest

from scexplorer.config import API_URL_VAR, TIMEOUT_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without scexplorer variables; undo anything dotenv sets."""
    for name in (API_URL_VAR, TIMEOUT_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
