"""Shared pytest fixtures and configuration for the ffcli test suite.

Guidelines
----------
* No internet access in any test.
* The HTTP transport must be mocked at the infra boundary.
* Core tests must be pure — no side effects, no real sleeping.
* Tests must not depend on OS state: the API-key environment and the
  user config directory are isolated for every test.
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear ffcli environment variables and point the config dir at *tmp_path*."""
    for name in ("FIREFLIES_API_KEY", "FFCLI_API_URL", "FFCLI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture()
def config_file(_isolated_environment: Path) -> Path:
    """Location of the credential file inside the isolated config dir."""
    return _isolated_environment / "ffcli" / "config.json"
