"""Credential resolution and persistence.

The API key comes from the ``FIREFLIES_API_KEY`` environment variable
when it is set and non-empty; otherwise from a JSON file
(``{"apiKey": "..."}``) in the per-user config directory.

:func:`resolve_api_key` never raises — a missing or broken config file
is a normal "no key" outcome.  :func:`save_api_key` is the only durable
write performed by ffcli.  Concurrent ``ffcli auth`` invocations writing
the same file are not guarded against.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ffcli.config import API_KEY_ENV, default_config_path

logger = logging.getLogger(__name__)

_DIR_MODE: int = 0o700
_FILE_MODE: int = 0o600


def get_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the location of the persisted credential file."""
    return default_config_path(env)


def _read_stored_key(path: Path) -> str | None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    try:
        data = json.loads(content)
    except ValueError:
        logger.debug("Ignoring malformed config file at %s", path)
        return None
    if not isinstance(data, dict):
        return None
    key = data.get("apiKey")
    return key if isinstance(key, str) and key else None


def resolve_api_key(
    env: Mapping[str, str] | None = None,
    path: Path | None = None,
) -> str | None:
    """Return the active API key, or ``None`` when nothing is configured.

    Parameters
    ----------
    env:
        Environment mapping; defaults to :data:`os.environ`.
    path:
        Credential file; defaults to :func:`get_config_path`.
    """
    environ = os.environ if env is None else env
    override = environ.get(API_KEY_ENV)
    if override:
        return override
    return _read_stored_key(path or get_config_path(environ))


def save_api_key(api_key: str, path: Path | None = None) -> Path:
    """Persist *api_key* with owner-only permissions and return the file path."""
    target = path or get_config_path()
    target.parent.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
    # mkdir's mode is filtered by the umask and ignored for existing dirs.
    os.chmod(target.parent, _DIR_MODE)
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as fh:
        fh.write(json.dumps({"apiKey": api_key}, indent=2) + "\n")
    # os.open only applies the mode when it creates the file.
    os.chmod(target, _FILE_MODE)
    logger.debug("Saved API key to %s", target)
    return target
