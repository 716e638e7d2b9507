"""Runtime settings for ffcli.

Settings are read from the process environment once per invocation and
frozen.  The API key is deliberately *not* part of :class:`Settings` —
it is resolved on demand by
:func:`~ffcli.infra.credential_store.resolve_api_key`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ffcli.exceptions import InvalidOptionError

API_KEY_ENV: str = "FIREFLIES_API_KEY"
"""Environment variable that overrides the persisted API key."""

API_URL_ENV: str = "FFCLI_API_URL"
TIMEOUT_ENV: str = "FFCLI_TIMEOUT"

DEFAULT_API_URL: str = "https://api.fireflies.ai/graphql"
DEFAULT_TIMEOUT: float = 30.0

CONFIG_DIR_NAME: str = "ffcli"
CONFIG_FILE_NAME: str = "config.json"


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return ``<user-config-dir>/ffcli/config.json``.

    Honours ``XDG_CONFIG_HOME`` and falls back to ``~/.config``.
    """
    environ = os.environ if env is None else env
    base = environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable per-invocation settings."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    """Per-attempt HTTP timeout in seconds."""

    config_path: Path | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        environ = os.environ if env is None else env

        raw_timeout = environ.get(TIMEOUT_ENV, "").strip()
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                timeout = -1.0
            if timeout <= 0:
                raise InvalidOptionError(
                    f"Invalid {TIMEOUT_ENV} value: {raw_timeout!r}",
                    hint="Use a positive number of seconds, e.g. 30.",
                )

        return cls(
            api_url=environ.get(API_URL_ENV, "").strip() or DEFAULT_API_URL,
            timeout=timeout,
            config_path=default_config_path(environ),
        )
